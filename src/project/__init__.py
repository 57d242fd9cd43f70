"""Read-only views over the project manifest and installed module tree."""

from .installed import InstalledPackageInspector, get_installed_version
from .manifest import ManifestReader, get_own_dependencies

__all__ = [
    "InstalledPackageInspector",
    "ManifestReader",
    "get_installed_version",
    "get_own_dependencies",
]
