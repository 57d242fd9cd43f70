"""Token parsing utilities for package requests."""

from typing import Optional, Tuple

from constants import Constants


def tokenize_rightmost_at(s: str) -> Tuple[str, Optional[str]]:
    """Return (name, range or None) using the rightmost-``@`` rule.

    A leading ``@`` belongs to a scoped package name and is never treated
    as the separator, so ``@types/node@^18`` splits into
    ``("@types/node", "^18")`` and ``@types/node`` has no range.
    """
    s = s.strip()
    idx = s.rfind('@')
    if idx <= 0:
        return s, None
    name = s[:idx].strip()
    spec_part = s[idx + 1:].strip()
    if not spec_part or spec_part.lower() == Constants.LATEST_TAG:
        return name, None
    return name, spec_part
