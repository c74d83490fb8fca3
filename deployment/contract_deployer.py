"""
Contract Deployer
Builds the soulbound contract and deploys it through the contract tool
"""

import os
from typing import List, Optional
from loguru import logger

from utils.command_runner import CommandResult, CommandRunner
from .config import DeploymentConfig
from .exceptions import ConfigurationError, ToolInvocationError
from .models import DeploymentResult
from .result_parser import parse_result_file


class ContractDeployer:
    """
    Build and deploy workflow

    build -> deploy -> parse result file. Stops at the first failing step.
    """

    def __init__(
        self,
        config: DeploymentConfig,
        runner: Optional[CommandRunner] = None,
        strict: bool = False
    ):
        """
        Initialize Contract Deployer

        Args:
            config: Deployment configuration
            runner: Process runner (replaced by a fake in tests)
            strict: Fail when the result file lacks a field
        """
        self.config = config
        self.runner = runner or CommandRunner()
        self.strict = strict

    def build_command(self, artifact_path: Optional[str] = None) -> List[str]:
        """Command line for the build step"""
        command = [self.config.tool_binary]

        if self.config.verbose_build:
            command.append('--verbose')

        command.extend(['contract', 'build', artifact_path or self.config.artifact_path])

        return command

    def deploy_command(self, constructor_args: List[str]) -> List[str]:
        """Command line for the deploy step"""
        config = self.config

        command = [
            config.tool_binary, 'contract', 'deploy',
            f'--bytecode={config.bytecode_path}',
            f'--pem={config.pem_file}',
            f'--proxy={config.proxy_url}',
            f'--chain={config.chain_id}',
            f'--outfile={config.outfile}'
        ]

        if config.recall_nonce:
            command.append('--recall-nonce')

        command.append(f'--gas-limit={config.gas_limit}')

        if constructor_args:
            command.append('--arguments')
            command.extend(str(arg) for arg in constructor_args)

        command.append('--send')

        return command

    def build(self, artifact_path: Optional[str] = None) -> CommandResult:
        """
        Build the contract artifact

        Args:
            artifact_path: Override for the configured artifact path

        Returns:
            CommandResult of the build tool

        Raises:
            ToolInvocationError: build tool exited non-zero
        """
        logger.info("Building contract...")

        command = self.build_command(artifact_path)
        result = self.runner.run(command)

        if not result.succeeded:
            raise ToolInvocationError(command, result.exit_code, result.stderr)

        logger.success("Build finished")
        return result

    def deploy(self, constructor_args: List[str]) -> DeploymentResult:
        """
        Deploy the compiled contract

        Sends a new transaction on every call. The result file is read only
        after the deploy tool succeeds.

        Args:
            constructor_args: Encoded constructor arguments, in order

        Returns:
            DeploymentResult

        Raises:
            ConfigurationError: bytecode or signing key file missing
            ToolInvocationError: deploy tool exited non-zero
        """
        config = self.config

        if not os.path.exists(config.bytecode_path):
            logger.info("Run the build step first")
            raise ConfigurationError(f"Contract bytecode not found: {config.bytecode_path}")

        if not os.path.exists(config.pem_file):
            raise ConfigurationError(f"Signing key file not found: {config.pem_file}")

        logger.info(f"Deploying to {config.proxy_url} (chain {config.chain_id})...")
        logger.info(f"Gas limit: {config.gas_limit}")

        command = self.deploy_command(constructor_args)
        result = self.runner.run(command)

        if not result.succeeded:
            raise ToolInvocationError(command, result.exit_code, result.stderr)

        deployment = parse_result_file(config.outfile, strict=self.strict)

        logger.success("Deployed contract")
        logger.info(f"Result written to {config.outfile}")

        return deployment

    def build_and_deploy(self, constructor_args: List[str]) -> DeploymentResult:
        """Build, then deploy. Deploy is skipped if the build fails."""
        self.build()
        return self.deploy(constructor_args)
