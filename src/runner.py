"""Command runner for package manager processes."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from common.errors import ConfigurationError, ExecutionError
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, StdioModes

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Where and how a command is executed."""

    cwd: Optional[str] = None
    stdio: str = StdioModes.INHERIT.value
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.stdio not in Constants.STDIO_MODES:
            raise ConfigurationError(
                f"Invalid stdio mode: {self.stdio}. Use one of: {', '.join(Constants.STDIO_MODES)}"
            )


# (program, args, config) -> result; raises ExecutionError on failure.
CommandRunner = Callable[[str, Sequence[str], ExecutionConfig], object]


def _stream_kwargs(stdio: str) -> dict:
    if stdio == StdioModes.PIPE.value:
        return {"capture_output": True, "text": True}
    if stdio == StdioModes.IGNORE.value:
        return {"stdout": subprocess.DEVNULL, "stderr": subprocess.DEVNULL}
    return {}


def run_command(
    program: str,
    args: Sequence[str],
    config: Optional[ExecutionConfig] = None,
) -> subprocess.CompletedProcess:
    """Run ``program`` with ``args`` and wait for it to finish.

    Args:
        program: Executable name, resolved on PATH.
        args: Ordered argument list.
        config: Working directory, stdio mode and optional timeout.

    Returns:
        The completed process.

    Raises:
        ExecutionError: If the process cannot be started, times out, or
            exits with a non-zero status.
    """
    config = config or ExecutionConfig()
    cmd = [program] + list(args)
    logger.debug("Running: %s", " ".join(cmd))

    try:
        result = subprocess.run(  # noqa: S603
            cmd,
            cwd=config.cwd,
            timeout=config.timeout,
            check=False,
            **_stream_kwargs(config.stdio),
        )
    except FileNotFoundError as e:
        raise ExecutionError(f"Command not found: {program}", program, args) from e
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(
            f"Command timed out after {config.timeout}s: {' '.join(cmd)}", program, args
        ) from e
    except OSError as e:
        raise ExecutionError(f"Failed to run {' '.join(cmd)}: {e}", program, args) from e

    if is_debug_enabled(logger):
        logger.debug(
            "Command finished",
            extra=extra_context(
                event="process_exit",
                component="runner",
                action=program,
                outcome="success" if result.returncode == 0 else "failure",
                returncode=result.returncode,
            ),
        )

    if result.returncode != 0:
        raise ExecutionError(
            f"Command failed with exit code {result.returncode}: {' '.join(cmd)}",
            program,
            args,
            result.returncode,
        )
    return result
