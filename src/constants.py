"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    EXECUTION_ERROR = 1
    CONFIGURATION_ERROR = 2


class PackageManagers(Enum):
    """Package managers (backends) supported by the program.

    Args:
        Enum (string): Package manager program names.
    """

    NPM = "npm"
    YARN = "yarn"


class StdioModes(Enum):
    """How the package manager process is wired to our standard streams."""

    INHERIT = "inherit"
    PIPE = "pipe"
    IGNORE = "ignore"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PACKAGE_JSON_FILE = "package.json"
    YARN_LOCK_FILE = "yarn.lock"
    NODE_MODULES_DIR = "node_modules"
    CONFIG_FILE = ".depsync.yml"
    CONFIG_SECTION = "depsync"
    DEPENDENCIES_SECTION = "dependencies"
    DEV_DEPENDENCIES_SECTION = "devDependencies"
    LATEST_TAG = "latest"
    SUPPORTED_MANAGERS = [
        PackageManagers.NPM.value,
        PackageManagers.YARN.value,
    ]
    STDIO_MODES = [mode.value for mode in StdioModes]
    COMMANDS = ["install", "uninstall", "check"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "DEPSYNC_LOG_LEVEL"
