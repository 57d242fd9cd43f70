"""Per-manager command construction for dependency reconciliation.

Each supported package manager gets a builder that turns an action, a
dependency scope and a package list into a concrete command line.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from constants import Constants, PackageManagers

logger = logging.getLogger(__name__)

BackendChoice = PackageManagers


@dataclass
class CommandSpec:
    """A package manager command ready to hand to a runner."""

    program: str
    args: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return " ".join([self.program] + self.args)


def is_using_yarn(project_dir: Optional[str] = None) -> bool:
    """Return True if the project carries a yarn.lock marker."""
    root = project_dir or os.getcwd()
    return os.path.isfile(os.path.join(root, Constants.YARN_LOCK_FILE))


def select_backend(force_alternate: bool = False, project_dir: Optional[str] = None) -> BackendChoice:
    """Choose the backend for a whole invocation.

    Args:
        force_alternate: Always use Yarn, skipping detection.
        project_dir: Project root to inspect for yarn.lock.

    Returns:
        BackendChoice.YARN when forced or detected, else BackendChoice.NPM.
    """
    if force_alternate:
        logger.debug("Yarn forced by caller")
        return BackendChoice.YARN
    if is_using_yarn(project_dir):
        logger.debug("Found %s, using yarn", Constants.YARN_LOCK_FILE)
        return BackendChoice.YARN
    return BackendChoice.NPM


def versioned_dep(name: str, versions: Dict[str, str]) -> str:
    """Add the required range, or ``latest``, to a package name."""
    version = versions.get(name) or Constants.LATEST_TAG
    return f"{name}@{version}"


# ---------- builders ----------


def _build_npm(packages: Sequence[str], remove: bool, dev: bool) -> CommandSpec:
    args = [
        "uninstall" if remove else "install",
        "--save-dev" if dev else "--save",
    ]
    return CommandSpec(program=PackageManagers.NPM.value, args=args + list(packages))


def _build_yarn(packages: Sequence[str], remove: bool, dev: bool) -> CommandSpec:
    if remove:
        args = ["remove"]
    else:
        args = ["add", "--dev"] if dev else ["add"]
    return CommandSpec(program=PackageManagers.YARN.value, args=args + list(packages))


_BUILDERS: Dict[BackendChoice, Callable[[Sequence[str], bool, bool], CommandSpec]] = {
    BackendChoice.NPM: _build_npm,
    BackendChoice.YARN: _build_yarn,
}


def build_command(
    backend: BackendChoice,
    packages: Sequence[str],
    remove: bool = False,
    dev: bool = True,
) -> CommandSpec:
    """Build the command line for ``backend``.

    Args:
        backend: Selected package manager.
        packages: Package arguments, already versioned for installs.
        remove: Build an uninstall/remove command instead of install/add.
        dev: Target development dependencies (ignored by yarn remove).

    Returns:
        CommandSpec for the runner.
    """
    return _BUILDERS[backend](packages, remove, dev)
