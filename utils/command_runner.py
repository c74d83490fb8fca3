"""
Command Runner
Runs external tools and captures their output
"""

import shlex
import subprocess
from typing import List, Optional
from loguru import logger


class CommandResult:
    """Exit status and captured output of one process"""

    def __init__(self, args: List[str], exit_code: int, stdout: str = "", stderr: str = ""):
        self.args = args
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def __repr__(self):
        return f"CommandResult(args={self.args!r}, exit_code={self.exit_code})"


class CommandRunner:
    """
    Process invocation for external tools

    Blocks until the process exits. No timeout, no retries.
    """

    def __init__(self, cwd: Optional[str] = None):
        """
        Initialize Command Runner

        Args:
            cwd: Working directory for spawned processes
        """
        self.cwd = cwd

    def run(self, args: List[str], cwd: Optional[str] = None) -> CommandResult:
        """
        Run a command to completion

        Args:
            args: Program and arguments
            cwd: Working directory override

        Returns:
            CommandResult
        """
        logger.info(f"+ {shlex.join(args)}")

        try:
            completed = subprocess.run(
                args,
                cwd=cwd or self.cwd,
                capture_output=True,
                text=True
            )
        except FileNotFoundError as e:
            # Same status a shell reports for an unknown command
            logger.error(f"Command not found: {args[0]}")
            return CommandResult(args, 127, "", str(e))

        self._log_output(completed.stdout, completed.stderr)

        if completed.returncode != 0:
            logger.error(f"{args[0]} exited with status {completed.returncode}")

        return CommandResult(args, completed.returncode, completed.stdout, completed.stderr)

    def _log_output(self, stdout: str, stderr: str):
        """Forward tool output to the log"""
        for line in (stdout or '').splitlines():
            logger.debug(f"  {line}")

        for line in (stderr or '').splitlines():
            logger.debug(f"  [stderr] {line}")
