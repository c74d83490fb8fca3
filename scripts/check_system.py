"""
System Check Script
Verifies tooling, configuration and network access before deploying
"""

import os
import sys
import json
import shutil
import asyncio
from typing import Dict, List, Optional, Tuple
import aiohttp
from loguru import logger

from deployment.config import DEFAULT_CONFIG_PATH, DeploymentConfig, get_duration_from_env
from deployment.exceptions import ConfigurationError


def check_configuration_file(config_path: str = DEFAULT_CONFIG_PATH) -> Optional[DeploymentConfig]:
    """
    Check that the config file exists and loads

    Returns:
        Loaded config, or None if the check failed
    """
    logger.info("Checking configuration file...")

    try:
        config = DeploymentConfig.from_file(config_path)
    except ConfigurationError as e:
        logger.error(f"  ✗ {e}")
        return None

    logger.success(f"  ✓ {config_path} (network: {config.network})")
    return config


def check_tool_binary(config: DeploymentConfig) -> bool:
    """Check that the contract tool is installed"""
    logger.info("Checking contract tool...")

    path = shutil.which(config.tool_binary)
    if not path:
        logger.error(f"  ✗ {config.tool_binary} not found on PATH")
        return False

    logger.success(f"  ✓ {config.tool_binary}: {path}")
    return True


def check_signing_key(config: DeploymentConfig) -> bool:
    """Check that the PEM file exists"""
    logger.info("Checking signing key...")

    if not os.path.isfile(config.pem_file):
        logger.error(f"  ✗ Signing key not found: {config.pem_file}")
        return False

    logger.success(f"  ✓ {config.pem_file}")
    return True


def check_contract_artifact(config: DeploymentConfig) -> bool:
    """Check for compiled bytecode"""
    logger.info("Checking contract artifact...")

    if not os.path.exists(config.bytecode_path):
        logger.warning(f"  Bytecode not built yet: {config.bytecode_path}")
        logger.info("  Run: soulbound-deploy build")
        return True

    logger.success(f"  ✓ {config.bytecode_path}")
    return True


def check_duration() -> bool:
    """Check that the duration argument is configured"""
    logger.info("Checking constructor arguments...")

    if not get_duration_from_env():
        logger.warning("  SOULBOUND_DURATION not set - pass --duration when deploying")
        return True

    logger.success("  ✓ SOULBOUND_DURATION set")
    return True


async def _fetch_network_config(session: aiohttp.ClientSession, proxy_url: str) -> Dict:
    """
    Fetch network config from the proxy

    Args:
        session: aiohttp session
        proxy_url: Proxy endpoint

    Returns:
        Parsed response body
    """
    url = f"{proxy_url}/network/config"
    timeout = aiohttp.ClientTimeout(total=10)

    async with session.get(url, timeout=timeout) as response:
        response.raise_for_status()
        return await response.json()


async def _probe_proxy(proxy_url: str) -> Dict:
    async with aiohttp.ClientSession() as session:
        return await _fetch_network_config(session, proxy_url)


def check_proxy_connection(config: DeploymentConfig) -> bool:
    """Check that the proxy answers and serves the configured chain"""
    logger.info("Checking proxy connection...")

    try:
        body = asyncio.run(_probe_proxy(config.proxy_url))
    except (aiohttp.ClientError, asyncio.TimeoutError, json.JSONDecodeError) as e:
        logger.error(f"  ✗ {config.proxy_url}: {e}")
        return False

    chain_id = (((body or {}).get('data') or {}).get('config') or {}).get('erd_chain_id')

    if chain_id is None:
        logger.warning(f"  Proxy reachable but chain ID not reported: {config.proxy_url}")
        return True

    if str(chain_id) != config.chain_id:
        logger.error(f"  ✗ Proxy serves chain {chain_id}, config expects {config.chain_id}")
        return False

    logger.success(f"  ✓ {config.proxy_url} (chain {chain_id})")
    return True


def main(config_path: str = DEFAULT_CONFIG_PATH) -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Soulbound Deployer System Check")
    logger.info("=" * 70)

    logger.info("")
    config = check_configuration_file(config_path)
    results = [("Configuration File", config is not None)]

    if config is not None:
        checks = [
            ("Contract Tool", lambda: check_tool_binary(config)),
            ("Signing Key", lambda: check_signing_key(config)),
            ("Contract Artifact", lambda: check_contract_artifact(config)),
            ("Constructor Arguments", check_duration),
            ("Proxy Connection", lambda: check_proxy_connection(config))
        ]

        for name, check_func in checks:
            logger.info("")
            try:
                results.append((name, check_func()))
            except Exception as e:
                logger.error(f"Error in {name}: {e}")
                results.append((name, False))

    return report_results(results)


def report_results(results: List[Tuple[str, bool]]) -> int:
    """Log a PASS/FAIL line per check and return the exit status"""
    logger.info("")
    logger.info("Summary:")

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    failed = [name for name, result in results if not result]
    logger.info(f"{len(results) - len(failed)}/{len(results)} checks passed")

    if failed:
        logger.error(f"❌ Not ready: {', '.join(failed)}")
        return 1

    logger.success("✅ Ready to deploy")
    logger.info("Deploy: soulbound-deploy --duration <value>")
    return 0


if __name__ == "__main__":
    sys.exit(main())
