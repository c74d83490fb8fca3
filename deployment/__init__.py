"""
Deployment Package
Builds and deploys the soulbound contract through the contract tool
"""

from .config import DeploymentConfig
from .contract_deployer import ContractDeployer
from .models import DeploymentResult
from .exceptions import (
    DeployerError,
    ConfigurationError,
    ToolInvocationError,
    ResultFileError,
    MissingResultFieldError
)

__all__ = [
    'DeploymentConfig',
    'ContractDeployer',
    'DeploymentResult',
    'DeployerError',
    'ConfigurationError',
    'ToolInvocationError',
    'ResultFileError',
    'MissingResultFieldError'
]
