"""Command execution.

CommandExecutor turns a Command into a real process. It reports the outcome as
an ExecutionResult instead of raising, so callers decide what a failure means;
ExecutionResult.check() converts a failure into an ExecutionError.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..subprocess_utils import safe_run
from .command import Command
from .errors import ExecutionError

logger = logging.getLogger(__name__)

# Exit status reported when the program could not be started at all
SPAWN_FAILURE_RETURNCODE = 127


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of running one command."""

    cmdline: str
    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration: float = 0.0

    @property
    def success(self) -> bool:
        """Check if execution was successful."""
        return self.returncode == 0

    def check(self) -> "ExecutionResult":
        """Return self, or raise ExecutionError if the command failed."""
        if not self.success:
            raise ExecutionError(self.cmdline, self.returncode, self.stderr or None)
        return self


class CommandExecutor:
    """Runs commands as subprocesses without a timeout."""

    def __init__(self, cwd: Optional[Path] = None, capture_output: bool = True):
        """Initialize command executor.

        Args:
            cwd: Working directory for spawned processes (defaults to current)
            capture_output: Whether to capture stdout/stderr
        """
        self.cwd = cwd
        self.capture_output = capture_output

    def execute(self, command: Command) -> ExecutionResult:
        """Run a command and wait for it to finish.

        Args:
            command: Command to run

        Returns:
            ExecutionResult describing the exit status and captured output
        """
        logger.debug(f"Executing: {command.cmdline}")
        start_time = time.time()

        try:
            result = safe_run(
                command.argv,
                cwd=self.cwd,
                capture_output=self.capture_output,
                text=True,
            )
        except OSError as e:
            logger.warning(f"Failed to start {command.program}: {e}")
            return ExecutionResult(
                cmdline=command.cmdline,
                returncode=SPAWN_FAILURE_RETURNCODE,
                stderr=str(e),
                duration=time.time() - start_time,
            )

        execution = ExecutionResult(
            cmdline=command.cmdline,
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            duration=time.time() - start_time,
        )

        if execution.success:
            logger.debug(f"Command succeeded in {execution.duration:.2f}s: {command.program}")
        else:
            logger.warning(f"Command failed with code {execution.returncode} in {execution.duration:.2f}s: {command.cmdline}")

        return execution

