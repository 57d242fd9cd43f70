"""Installed package lookup from the local node_modules tree."""

from __future__ import annotations

import json
import logging
import os
from typing import Optional

from constants import Constants

logger = logging.getLogger(__name__)


class InstalledPackageInspector:
    """Reports installed versions by reading each package's own package.json."""

    def __init__(self, project_dir: Optional[str] = None):
        self.project_dir = project_dir or os.getcwd()

    def metadata_path(self, name: str) -> str:
        # Scoped names ("@scope/pkg") live in nested directories.
        parts = name.split("/")
        return os.path.join(
            self.project_dir, Constants.NODE_MODULES_DIR, *parts, Constants.PACKAGE_JSON_FILE
        )

    def get_installed_version(self, name: str) -> Optional[str]:
        """Return the installed version of ``name``, or None if not installed.

        Absence is the common case, not a failure: a missing directory,
        missing or unreadable metadata, or a missing ``version`` field all
        yield None.
        """
        path = self.metadata_path(name)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (IOError, json.JSONDecodeError) as e:
            logger.warning("Failed to read installed metadata for %s: %s", name, e)
            return None
        if not isinstance(data, dict):
            return None
        version = data.get("version")
        return version if isinstance(version, str) and version else None


def get_installed_version(name: str, project_dir: Optional[str] = None) -> Optional[str]:
    """Convenience wrapper around InstalledPackageInspector.get_installed_version."""
    return InstalledPackageInspector(project_dir).get_installed_version(name)
