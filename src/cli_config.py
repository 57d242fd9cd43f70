"""Configuration loading and CLI overrides for reconciliation options.

Precedence, highest first: CLI flags, the YAML config file, defaults.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from common.errors import ConfigurationError
from constants import Constants
from reconcile.models import InstallOptions

logger = logging.getLogger(__name__)

_BOOL_KEYS = ("dev", "yarn")


def _default_config_path(project_dir: Optional[str]) -> Optional[str]:
    path = os.path.join(project_dir or os.getcwd(), Constants.CONFIG_FILE)
    return path if os.path.isfile(path) else None


def load_config(config_path: Optional[str] = None, project_dir: Optional[str] = None) -> Dict[str, Any]:
    """Load the depsync configuration mapping.

    Args:
        config_path: Explicit YAML file. Must exist when given.
        project_dir: Where to look for the default config file.

    Returns:
        The ``depsync`` section if present, else the whole document;
        an empty dict when there is no config file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed.
    """
    if config_path:
        if not os.path.isfile(config_path):
            raise ConfigurationError(f"Config file not found: {config_path}")
    else:
        config_path = _default_config_path(project_dir)
        if not config_path:
            return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (IOError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid config {config_path}: expected a mapping")

    logger.debug("Loaded config from: %s", config_path)
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Invalid config {config_path}: '{Constants.CONFIG_SECTION}' must be a mapping"
        )
    return _validate(section, config_path)


def _validate(section: Dict[str, Any], config_path: str) -> Dict[str, Any]:
    for key in _BOOL_KEYS:
        if key in section and not isinstance(section[key], bool):
            raise ConfigurationError(f"Invalid config {config_path}: '{key}' must be true or false")
    versions = section.get("versions")
    if versions is not None and not isinstance(versions, dict):
        raise ConfigurationError(f"Invalid config {config_path}: 'versions' must be a mapping")
    timeout = section.get("timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
        raise ConfigurationError(f"Invalid config {config_path}: 'timeout' must be a number")
    return section


def build_options(args, config: Optional[Dict[str, Any]] = None) -> InstallOptions:
    """Merge parsed CLI args over config values into InstallOptions."""
    config = config or {}

    dev = getattr(args, "DEV", None)
    if dev is None:
        dev = config.get("dev", True)
    yarn = getattr(args, "YARN", None)
    if yarn is None:
        yarn = config.get("yarn", False)

    versions = config.get("versions")
    return InstallOptions(
        dev=dev,
        force_alternate_backend=yarn,
        versions={str(k): str(v) for k, v in versions.items() if v is not None} if versions else None,
        cwd=getattr(args, "CWD", None),
        stdio=config.get("stdio", InstallOptions.stdio),
        timeout=config.get("timeout"),
        dry_run=bool(getattr(args, "DRY_RUN", False)),
    )
