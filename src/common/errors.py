"""Error taxonomy for dependency reconciliation."""

from __future__ import annotations

from typing import List, Optional, Sequence


class DepsyncError(Exception):
    """Base class for all errors raised by depsync."""


class ConfigurationError(DepsyncError, ValueError):
    """Raised when user-supplied configuration cannot be used.

    Covers invalid semver ranges, malformed manifests and config files.
    Always raised before any package manager command is issued.
    """


class ExecutionError(DepsyncError, RuntimeError):
    """Raised when the package manager command fails or cannot be started."""

    def __init__(
        self,
        message: str,
        program: str,
        args: Sequence[str] = (),
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.program = program
        self.args_list: List[str] = list(args)
        self.returncode = returncode

    @property
    def command(self) -> str:
        """The failing command line as a single string."""
        return " ".join([self.program] + self.args_list)
