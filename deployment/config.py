"""
Deployment Configuration
Loads contract, signing and network settings from config/deploy_config.json
with environment overrides from .env
"""

import os
import json
from typing import Dict, Optional
from loguru import logger
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()


DEFAULT_CONFIG_PATH = "config/deploy_config.json"

DEFAULT_NETWORKS = {
    'devnet': {'proxy': 'https://devnet-api.elrond.com', 'chain': 'D'},
    'testnet': {'proxy': 'https://testnet-api.elrond.com', 'chain': 'T'},
    'mainnet': {'proxy': 'https://api.elrond.com', 'chain': '1'}
}


class DeploymentConfig:
    """
    Settings for building and deploying the contract

    Constructed once at startup and passed explicitly into the deployer.
    """

    def __init__(
        self,
        artifact_path: str,
        pem_file: str,
        proxy_url: str,
        chain_id: str,
        gas_limit: int,
        outfile: str = "out.json",
        bytecode_path: Optional[str] = None,
        recall_nonce: bool = True,
        token_name: str = "EGLD",
        tool_binary: str = "erdpy",
        verbose_build: bool = True,
        network: Optional[str] = None
    ):
        """
        Initialize Deployment Config

        Args:
            artifact_path: Contract artifact passed to the build tool
            pem_file: Signing key file
            proxy_url: Network proxy endpoint
            chain_id: Chain identifier (D, T or 1)
            gas_limit: Gas limit for the deploy transaction
            outfile: Where the deploy tool writes its JSON result
            bytecode_path: Compiled bytecode (defaults to artifact_path)
            recall_nonce: Let the tool fetch the account nonce
            token_name: Token name constructor argument
            tool_binary: Name or path of the contract tool
            verbose_build: Pass --verbose to the build command
            network: Preset name the proxy/chain came from, if any
        """
        if isinstance(gas_limit, bool) or not isinstance(gas_limit, int):
            raise ConfigurationError(f"Gas limit must be an integer, got {gas_limit!r}")
        if gas_limit <= 0:
            raise ConfigurationError(f"Gas limit must be positive, got {gas_limit}")

        if not proxy_url:
            raise ConfigurationError("Proxy URL must be set")
        if not chain_id:
            raise ConfigurationError("Chain ID must be set")

        self.artifact_path = artifact_path
        self.bytecode_path = bytecode_path or artifact_path
        self.pem_file = pem_file
        self.proxy_url = proxy_url.rstrip('/')
        self.chain_id = str(chain_id)
        self.gas_limit = gas_limit
        self.outfile = outfile
        self.recall_nonce = recall_nonce
        self.token_name = token_name
        self.tool_binary = tool_binary
        self.verbose_build = verbose_build
        self.network = network

    @classmethod
    def from_dict(cls, data: Dict, network: Optional[str] = None) -> 'DeploymentConfig':
        """
        Build config from the parsed JSON structure

        Environment variables override file values. The network preset is
        chosen by the argument, then SOULBOUND_NETWORK, then the file default.

        Args:
            data: Parsed deploy_config.json
            network: Network preset name

        Returns:
            DeploymentConfig
        """
        contract = data.get('contract', {})
        signing = data.get('signing', {})
        transaction = data.get('transaction', {})
        tool = data.get('tool', {})
        networks = data.get('networks') or DEFAULT_NETWORKS

        network = network or os.getenv('SOULBOUND_NETWORK') or data.get('default_network', 'devnet')

        if network not in networks:
            raise ConfigurationError(
                f"Unknown network '{network}' (available: {', '.join(sorted(networks))})"
            )

        preset = networks[network]

        proxy_url = os.getenv('SOULBOUND_PROXY_URL') or preset.get('proxy')
        chain_id = os.getenv('SOULBOUND_CHAIN_ID') or preset.get('chain')

        gas_limit = os.getenv('SOULBOUND_GAS_LIMIT')
        if gas_limit is not None:
            try:
                gas_limit = int(gas_limit)
            except ValueError:
                raise ConfigurationError(f"SOULBOUND_GAS_LIMIT is not an integer: {gas_limit!r}")
        else:
            gas_limit = transaction.get('gas_limit', 60000000)

        if 'artifact_path' not in contract:
            raise ConfigurationError("contract.artifact_path must be set")

        return cls(
            artifact_path=contract['artifact_path'],
            bytecode_path=contract.get('bytecode_path'),
            token_name=contract.get('token_name', 'EGLD'),
            pem_file=os.getenv('SOULBOUND_PEM_FILE') or signing.get('pem_file', './soulbound.pem'),
            proxy_url=proxy_url,
            chain_id=chain_id,
            gas_limit=gas_limit,
            outfile=transaction.get('outfile', 'out.json'),
            recall_nonce=transaction.get('recall_nonce', True),
            tool_binary=tool.get('binary', 'erdpy'),
            verbose_build=tool.get('verbose', True),
            network=network
        )

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_PATH, network: Optional[str] = None) -> 'DeploymentConfig':
        """Load config from a JSON file"""
        if not os.path.exists(path):
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        config = cls.from_dict(data, network=network)

        logger.debug(f"Loaded deployment config from {path} (network: {config.network})")

        return config

    def to_dict(self) -> Dict:
        return {
            'artifact_path': self.artifact_path,
            'bytecode_path': self.bytecode_path,
            'pem_file': self.pem_file,
            'proxy_url': self.proxy_url,
            'chain_id': self.chain_id,
            'gas_limit': self.gas_limit,
            'outfile': self.outfile,
            'recall_nonce': self.recall_nonce,
            'token_name': self.token_name,
            'tool_binary': self.tool_binary,
            'verbose_build': self.verbose_build,
            'network': self.network
        }


def get_duration_from_env() -> Optional[str]:
    """Duration constructor argument, if configured"""
    return os.getenv('SOULBOUND_DURATION') or None
