"""
Smart Contract Deployment Script
Builds and deploys the Soulbound contract through erdpy
"""

import os
import sys
import argparse
from typing import List, Optional
from loguru import logger
from dotenv import set_key

from deployment import ContractDeployer, DeploymentConfig, DeploymentResult
from deployment.arguments import build_constructor_arguments
from deployment.config import DEFAULT_CONFIG_PATH, get_duration_from_env
from deployment.exceptions import DeployerError, ToolInvocationError
from utils.command_runner import CommandRunner
from utils.logging_config import setup_logging


MAINNET_CHAIN_ID = '1'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='soulbound-deploy',
        description='Build and deploy the Soulbound contract.'
    )

    parser.add_argument(
        'action', nargs='?', default='all', choices=['build', 'deploy', 'all'],
        help='Step to run. Default: %(default)s'
    )
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH, metavar='PATH',
                        help='Deployment config file. Default: %(default)s')
    parser.add_argument('--network', metavar='NAME',
                        help='Network preset from the config (devnet, testnet, mainnet)')
    parser.add_argument('--duration', default=get_duration_from_env(), metavar='VALUE',
                        help='Duration constructor argument. Default: $SOULBOUND_DURATION')
    parser.add_argument('--token-name', metavar='TEXT',
                        help='Token name constructor argument (overrides the config)')
    parser.add_argument('--strict', action='store_true',
                        help='Fail if the result file lacks the address or hash')
    parser.add_argument('--save-env', action='store_true',
                        help='Write the contract address to .env')
    parser.add_argument('--yes', action='store_true',
                        help='Do not ask for confirmation before a mainnet deploy')
    parser.add_argument('--verbose', action='store_true',
                        help='Show tool output and debug logs')

    args = parser.parse_args(argv)

    if args.action in ('deploy', 'all') and not args.duration:
        parser.error('--duration (or SOULBOUND_DURATION) is required to deploy')

    return args


def print_result(deployment: DeploymentResult):
    """Report address and hash on stdout"""
    print(f"Contract address: {deployment.contract_address or ''}")
    print(f"Transaction hash: {deployment.transaction_hash or ''}")


def update_env_file(contract_address: str, env_path: str = ".env"):
    """Update .env file with contract address"""
    if not os.path.exists(env_path):
        open(env_path, 'a').close()

    set_key(env_path, 'SOULBOUND_CONTRACT_ADDRESS', contract_address)

    logger.success(f"Updated {env_path} with contract address")


def confirm_deployment(config: DeploymentConfig) -> bool:
    """Ask before sending to mainnet"""
    if config.chain_id != MAINNET_CHAIN_ID:
        return True

    logger.warning(f"Deploying to MAINNET via {config.proxy_url}")
    print("\nProceed with deployment? (yes/no): ", end="", file=sys.stderr, flush=True)
    answer = input()

    return answer.strip().lower() == 'yes'


def tool_exit_status(exit_code: int) -> int:
    """Shell-style status: a tool killed by signal N exits 128 + N"""
    if exit_code < 0:
        return 128 - exit_code
    return exit_code


def run(args: argparse.Namespace, runner: Optional[CommandRunner] = None) -> int:
    """
    Run the requested steps

    Returns:
        Process exit status
    """
    config = DeploymentConfig.from_file(args.config, network=args.network)
    deployer = ContractDeployer(config, runner=runner, strict=args.strict)

    if args.action == 'build':
        deployer.build()
        return 0

    constructor_args = build_constructor_arguments(
        args.token_name or config.token_name,
        args.duration
    )

    if not args.yes and not confirm_deployment(config):
        logger.info("Deployment cancelled")
        return 1

    if args.action == 'all':
        deployment = deployer.build_and_deploy(constructor_args)
    else:
        deployment = deployer.deploy(constructor_args)

    logger.info("Deployed contract with:")
    print_result(deployment)

    if args.save_env:
        if deployment.contract_address:
            update_env_file(deployment.contract_address)
        else:
            logger.warning("No contract address in result, .env not updated")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    setup_logging(level='DEBUG' if args.verbose else 'INFO')

    try:
        return run(args)
    except ToolInvocationError as e:
        logger.error(f"❌ {e}")
        return tool_exit_status(e.exit_code)
    except DeployerError as e:
        logger.error(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
