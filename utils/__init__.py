"""
Utilities Package
Process invocation and logging setup shared by the deploy scripts
"""

from .command_runner import CommandRunner, CommandResult
from .logging_config import setup_logging

__all__ = [
    'CommandRunner',
    'CommandResult',
    'setup_logging'
]
