"""Data models for dependency reconciliation requests and plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from constants import StdioModes
from package_managers import BackendChoice, CommandSpec

# A single name, an ordered sequence of names, or name -> required range.
DependencySpec = Union[str, Sequence[str], Mapping[str, Optional[str]]]


@dataclass
class DependencyRequest:
    """Normalized request: ordered unique names plus an optional range map."""

    names: List[str]
    versions: Dict[str, str] = field(default_factory=dict)


@dataclass
class InstallOptions:
    """Options recognized by install/uninstall."""

    dev: bool = True
    force_alternate_backend: bool = False
    versions: Optional[Dict[str, str]] = None
    cwd: Optional[str] = None
    stdio: str = StdioModes.INHERIT.value
    timeout: Optional[float] = None
    dry_run: bool = False


@dataclass
class ReconciliationPlan:
    """What a single install/uninstall call decided to do."""

    packages: List[str]
    remove: bool = False
    backend: Optional[BackendChoice] = None
    command: Optional[CommandSpec] = None

    @property
    def is_empty(self) -> bool:
        return not self.packages


def _unique(names: Sequence[str]) -> List[str]:
    seen = set()
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def normalize_request(
    deps: DependencySpec,
    versions: Optional[Mapping[str, Optional[str]]] = None,
) -> DependencyRequest:
    """Normalize the polymorphic ``deps`` input into a DependencyRequest.

    A mapping is both the package list and the constraint map, and takes
    the place of ``versions``. For a name or a sequence of names,
    ``versions`` supplies ranges for any of them.

    Raises:
        TypeError: If ``deps`` is none of the accepted shapes.
    """
    if isinstance(deps, str):
        names = [deps]
        constraints = versions or {}
    elif isinstance(deps, Mapping):
        names = list(deps.keys())
        constraints = deps
    elif isinstance(deps, Sequence):
        names = list(deps)
        constraints = versions or {}
    else:
        raise TypeError(f"Unsupported dependency request: {deps!r}")

    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"Invalid package name: {name!r}")

    return DependencyRequest(
        names=_unique([n.strip() for n in names]),
        versions={k: v for k, v in constraints.items() if v},
    )


def coerce_options(options: Union[None, InstallOptions, Mapping[str, Any]]) -> InstallOptions:
    """Accept InstallOptions, a plain mapping, or None.

    Mapping keys match the InstallOptions fields; ``yarn`` is accepted as
    an alias of ``force_alternate_backend``.
    """
    if options is None:
        return InstallOptions()
    if isinstance(options, InstallOptions):
        return options
    data = dict(options)
    if "yarn" in data:
        data.setdefault("force_alternate_backend", bool(data.pop("yarn")))
    known = set(InstallOptions.__dataclass_fields__)  # pylint: disable=no-member
    unknown = set(data) - known
    if unknown:
        raise TypeError(f"Unknown options: {', '.join(sorted(unknown))}")
    return InstallOptions(**data)
