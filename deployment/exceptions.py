"""
Deployment Errors
Exception hierarchy raised by the build/deploy workflow
"""

from typing import List, Optional


class DeployerError(Exception):
    """Base class for all deployer errors"""


class ConfigurationError(DeployerError):
    """Invalid or missing deployment configuration"""


class ToolInvocationError(DeployerError):
    """External tool exited with a non-zero status"""

    def __init__(self, command: List[str], exit_code: int, stderr: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr

        tool = ' '.join(arg for arg in command[:4] if not arg.startswith('-')) or '<empty>'
        super().__init__(f"'{tool}' exited with status {exit_code}")


class ResultFileError(DeployerError):
    """Deploy result file is missing or not valid JSON"""


class MissingResultFieldError(DeployerError):
    """Result file lacks an expected field path (strict mode only)"""

    def __init__(self, path: str, result_file: Optional[str] = None):
        self.path = path
        self.result_file = result_file

        location = f" in {result_file}" if result_file else ""
        super().__init__(f"Field '{path}' not found{location}")
