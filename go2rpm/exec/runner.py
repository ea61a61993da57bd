"""
Command runner for the external tools go2rpm shells out to.
Runs argv lists (never through a shell) and captures their output as text.
"""

import logging
import subprocess
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of a single command invocation."""
    argv: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    duration_ms: int = 0
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        """True if the command ran and exited with status 0."""
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Stdout with surrounding whitespace removed."""
        return self.stdout.strip()

    def describe(self) -> str:
        """One-line summary suitable for error messages."""
        if self.error:
            return self.error["message"]
        detail = self.stderr.strip().splitlines()
        suffix = f": {detail[-1]}" if detail else ""
        return f"'{self.argv[0]}' exited with status {self.exit_code}{suffix}"


@dataclass
class CommandRunner:
    """
    Executes external commands with output capture.

    Timeouts map to exit code 124 and missing executables to 127, the
    same statuses a shell would report.
    """
    cwd: Optional[Path] = None

    def run(
        self,
        argv: Sequence[str],
        cwd: Optional[Path] = None,
        timeout_sec: Optional[int] = None,
    ) -> CommandResult:
        """
        Run a command and capture its output.

        Args:
            argv: Program and arguments
            cwd: Working directory (default: the runner's cwd)
            timeout_sec: Timeout in seconds

        Returns:
            CommandResult with captured output and metadata
        """
        if isinstance(argv, str):
            raise ValueError(f"Invalid command type: {type(argv)}. Expected an argv list.")

        command_argv = [str(arg) for arg in argv]
        working_dir = cwd or self.cwd
        logger.debug(f"Running: {' '.join(command_argv)}")

        start_time = time.time()
        error = None

        try:
            result = subprocess.run(
                command_argv,
                cwd=str(working_dir) if working_dir else None,
                capture_output=True,
                text=True,
                timeout=timeout_sec,
            )
            exit_code = result.returncode
            stdout = result.stdout or ""
            stderr = result.stderr or ""

        except subprocess.TimeoutExpired as e:
            exit_code = 124
            stdout = _as_text(e.stdout)
            stderr = _as_text(e.stderr)
            error = {
                "type": "timeout",
                "message": f"Command timed out after {timeout_sec} seconds",
                "context": {"timeout_sec": timeout_sec},
            }

        except FileNotFoundError:
            exit_code = 127
            stdout = ""
            stderr = ""
            error = {
                "type": "command_not_found",
                "message": f"Command not found: {command_argv[0]}",
                "context": {"command": command_argv[0]},
            }

        duration_ms = int((time.time() - start_time) * 1000)

        command_result = CommandResult(
            argv=command_argv,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
            duration_ms=duration_ms,
            error=error,
        )
        if not command_result.ok:
            logger.debug(f"Command failed ({exit_code}): {command_result.describe()}")

        return command_result


def _as_text(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
