"""npm semver range evaluation using semantic versioning."""

from __future__ import annotations

import logging
import re
from typing import Optional

import semantic_version

logger = logging.getLogger(__name__)

# node-semver tolerates whitespace between an operator and its version.
_OPERATOR_SPACE_RE = re.compile(r"(<=|>=|<|>|=|~|\^)\s+")


def _normalize_range(range_str: str) -> str:
    """Collapse operator whitespace, e.g. ``>= 1.2.3`` -> ``>=1.2.3``."""
    return _OPERATOR_SPACE_RE.sub(r"\1", range_str.strip())


def _parse_range(range_str: str) -> Optional[semantic_version.NpmSpec]:
    """Parse an npm range expression, returning None when it is not valid."""
    if not isinstance(range_str, str) or not range_str.strip():
        return None
    try:
        return semantic_version.NpmSpec(_normalize_range(range_str))
    except ValueError:
        return None


def _parse_version(version: str) -> Optional[semantic_version.Version]:
    """Parse an installed version, coercing loose forms like ``1.2`` or ``v1.2.3``."""
    if not isinstance(version, str) or not version.strip():
        return None
    raw = version.strip()
    if raw[0] in ("v", "V", "="):
        raw = raw[1:]
    try:
        return semantic_version.Version(raw)
    except ValueError:
        pass
    try:
        return semantic_version.Version.coerce(raw)
    except ValueError:
        logger.debug("Unparseable installed version: %s", version)
        return None


def is_valid_range(range_str: str) -> bool:
    """Return True if ``range_str`` is valid npm semver range syntax.

    Accepts the npm grammar: caret and tilde ranges, x-ranges, hyphen
    ranges, comparator sets and ``||`` unions.
    """
    return _parse_range(range_str) is not None


def satisfies(version: str, range_str: str) -> bool:
    """Return True if the installed ``version`` falls within ``range_str``.

    Pre-release versions only match when the range itself names a
    pre-release on the same major.minor.patch, as npm does. An invalid
    range or a version that cannot be parsed never satisfies.
    """
    spec = _parse_range(range_str)
    if spec is None:
        return False
    parsed = _parse_version(version)
    if parsed is None:
        return False
    return spec.match(parsed)
