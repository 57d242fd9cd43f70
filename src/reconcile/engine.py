"""Dependency reconciliation: decide what to install or remove, then delegate.

The engine itself is a pure function of the request, a manifest snapshot
and an installed-version lookup. File reads and process execution are
reached only through injectable collaborators.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from common.errors import ConfigurationError
from common.logging_utils import extra_context, is_debug_enabled
from common.text import listify
from package_managers import build_command, select_backend, versioned_dep
from project.installed import InstalledPackageInspector
from project.manifest import ManifestReader
from runner import CommandRunner, ExecutionConfig, run_command
from versioning.semver import is_valid_range, satisfies

from .models import (
    DependencySpec,
    InstallOptions,
    ReconciliationPlan,
    coerce_options,
    normalize_request,
)

logger = logging.getLogger(__name__)

Options = Union[None, InstallOptions, Mapping[str, Any]]


class ReconciliationEngine:
    """Computes the packages that need an install or uninstall action."""

    def __init__(
        self,
        manifest: Any,
        inspector: Any,
        valid_range: Callable[[str], bool] = is_valid_range,
        satisfied_by: Callable[[str, str], bool] = satisfies,
    ):
        self.manifest = manifest
        self.inspector = inspector
        self.valid_range = valid_range
        self.satisfied_by = satisfied_by

    @classmethod
    def for_project(cls, project_dir: Optional[str] = None) -> "ReconciliationEngine":
        """Engine reading package.json and node_modules under ``project_dir``."""
        return cls(ManifestReader(project_dir), InstalledPackageInspector(project_dir))

    def validate_versions(self, versions: Mapping[str, str]) -> None:
        """Raise ConfigurationError on the first invalid non-empty range."""
        for required in versions.values():
            if required and not self.valid_range(required):
                raise ConfigurationError(
                    f"Invalid version: {required}. Use proper semver range syntax."
                )

    def _needs_install(self, name: str, required: Optional[str], own: Dict[str, str]) -> bool:
        installed = self.inspector.get_installed_version(name)
        if not installed:
            return True
        # Installed on disk but missing from the manifest: must be declared
        if not own.get(name):
            return True
        if not required:
            return False
        return not self.satisfied_by(installed, required)

    def compute_unsatisfied(
        self,
        deps: Sequence[str],
        versions: Optional[Mapping[str, str]] = None,
        dev: bool = True,
    ) -> List[str]:
        """Return the requested packages that are missing, undeclared or outdated.

        Args:
            deps: Requested package names, in order.
            versions: Required ranges for some or all of ``deps``.
            dev: Compare against devDependencies rather than dependencies.

        Returns:
            The subset of ``deps`` needing an install, in request order.

        Raises:
            ConfigurationError: If any range in ``versions`` is invalid.
        """
        versions = versions or {}
        self.validate_versions(versions)
        own = self.manifest.get_own_dependencies(dev)

        result = []
        for name in deps:
            needed = self._needs_install(name, versions.get(name), own)
            if is_debug_enabled(logger):
                logger.debug(
                    "Install decision",
                    extra=extra_context(
                        event="decision",
                        component="engine",
                        action="install",
                        target=name,
                        outcome="include" if needed else "skip",
                        required=versions.get(name),
                    ),
                )
            if needed:
                result.append(name)
        return result

    def compute_removable(self, deps: Sequence[str], dev: bool = True) -> List[str]:
        """Return the requested packages that are declared in the manifest.

        Undeclared names, and names declared with an empty version, are
        skipped, so removing them is a no-op.
        """
        own = self.manifest.get_own_dependencies(dev)
        return [name for name in deps if own.get(name)]


def _engine_for(options: InstallOptions, engine: Optional[ReconciliationEngine]) -> ReconciliationEngine:
    return engine or ReconciliationEngine.for_project(options.cwd)


def _log_backend(backend, action: str, command) -> None:
    if is_debug_enabled(logger):
        logger.debug(
            "Backend selected",
            extra=extra_context(
                event="decision",
                component="engine",
                action=action,
                package_manager=backend.value,
                command=str(command),
            ),
        )


def plan_install(
    deps: DependencySpec,
    options: Options = None,
    engine: Optional[ReconciliationEngine] = None,
) -> ReconciliationPlan:
    """Decide which packages to install and build the command, without running it."""
    opts = coerce_options(options)
    request = normalize_request(deps, opts.versions)
    names = _engine_for(opts, engine).compute_unsatisfied(request.names, request.versions, opts.dev)
    if not names:
        return ReconciliationPlan(packages=[])

    backend = select_backend(opts.force_alternate_backend, opts.cwd)
    versioned = [versioned_dep(name, request.versions) for name in names]
    command = build_command(backend, versioned, remove=False, dev=opts.dev)
    _log_backend(backend, "install", command)
    return ReconciliationPlan(packages=names, backend=backend, command=command)


def plan_uninstall(
    deps: DependencySpec,
    options: Options = None,
    engine: Optional[ReconciliationEngine] = None,
) -> ReconciliationPlan:
    """Decide which packages to remove and build the command, without running it."""
    opts = coerce_options(options)
    request = normalize_request(deps)
    names = _engine_for(opts, engine).compute_removable(request.names, opts.dev)
    if not names:
        return ReconciliationPlan(packages=[], remove=True)

    backend = select_backend(opts.force_alternate_backend, opts.cwd)
    command = build_command(backend, names, remove=True, dev=opts.dev)
    _log_backend(backend, "uninstall", command)
    return ReconciliationPlan(packages=names, remove=True, backend=backend, command=command)


def _execute(
    plan: ReconciliationPlan,
    opts: InstallOptions,
    config: ExecutionConfig,
    runner: Optional[CommandRunner],
):
    if opts.dry_run:
        logger.info("Dry run, not executing: %s", plan.command)
        return None
    run = runner or run_command
    return run(plan.command.program, plan.command.args, config)


def install(
    deps: DependencySpec,
    options: Options = None,
    runner: Optional[CommandRunner] = None,
    engine: Optional[ReconciliationEngine] = None,
):
    """Install or update the given packages if needed.

    Args:
        deps: A package name, a list of names, or a name -> range mapping.
        options: InstallOptions or an equivalent mapping.
        runner: Command runner; defaults to a subprocess runner.
        engine: Reconciliation engine; defaults to one over ``options.cwd``.

    Returns:
        The runner's result, or None when nothing needed installing.

    Raises:
        ConfigurationError: On an invalid range, before anything runs.
        ExecutionError: If the package manager fails.
    """
    opts = coerce_options(options)
    config = ExecutionConfig(cwd=opts.cwd, stdio=opts.stdio, timeout=opts.timeout)
    plan = plan_install(deps, opts, engine)
    if plan.is_empty:
        logger.debug("All requested packages are satisfied")
        return None

    logger.info("Installing %s...", listify(plan.packages))
    return _execute(plan, opts, config, runner)


def uninstall(
    deps: DependencySpec,
    options: Options = None,
    runner: Optional[CommandRunner] = None,
    engine: Optional[ReconciliationEngine] = None,
):
    """Uninstall the given packages if they are declared.

    Same arguments and return convention as install().
    """
    opts = coerce_options(options)
    config = ExecutionConfig(cwd=opts.cwd, stdio=opts.stdio, timeout=opts.timeout)
    plan = plan_uninstall(deps, opts, engine)
    if plan.is_empty:
        logger.debug("None of the requested packages are declared")
        return None

    logger.info("Uninstalling %s...", listify(plan.packages))
    return _execute(plan, opts, config, runner)
