"""package.json reader for a project's declared dependencies."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from common.errors import ConfigurationError
from constants import Constants

logger = logging.getLogger(__name__)


class ManifestReader:
    """Reads the ``dependencies``/``devDependencies`` sections of package.json.

    A project may have no manifest or no dependencies yet, so missing
    files and sections read as empty mappings.
    """

    def __init__(self, project_dir: Optional[str] = None):
        self.project_dir = project_dir or os.getcwd()

    @property
    def path(self) -> str:
        return os.path.join(self.project_dir, Constants.PACKAGE_JSON_FILE)

    def load(self) -> Dict[str, Any]:
        """Load the whole manifest document.

        Returns:
            Parsed manifest, or an empty dict when the file does not exist.

        Raises:
            ConfigurationError: If the file exists but is not a JSON object.
        """
        if not os.path.isfile(self.path):
            logger.debug("No manifest at %s", self.path)
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (IOError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid manifest {self.path}: expected a JSON object")
        return data

    def get_own_dependencies(self, dev: bool = True) -> Dict[str, str]:
        """Return the declared dependencies for the selected scope.

        Args:
            dev: Read ``devDependencies`` when True, ``dependencies`` otherwise.

        Returns:
            Mapping of package name to declared version string.
        """
        section = Constants.DEV_DEPENDENCIES_SECTION if dev else Constants.DEPENDENCIES_SECTION
        deps = self.load().get(section) or {}
        if not isinstance(deps, dict):
            logger.warning("Ignoring non-object %s section in %s", section, self.path)
            return {}
        return dict(deps)


def get_own_dependencies(dev: bool = True, project_dir: Optional[str] = None) -> Dict[str, str]:
    """Convenience wrapper around ManifestReader.get_own_dependencies."""
    return ManifestReader(project_dir).get_own_dependencies(dev)
