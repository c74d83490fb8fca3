"""
Result Parser
Extracts fields from the JSON file written by the deploy tool
"""

import json
from typing import Any, Dict, Optional
from loguru import logger

from .exceptions import MissingResultFieldError, ResultFileError
from .models import DeploymentResult


ADDRESS_PATH = "emitted_tx.address"
HASH_PATH = "emitted_tx.hash"


def get_field(data: Any, path: str) -> Optional[Any]:
    """
    Look up a dotted field path in nested dicts

    Returns None at the first missing key instead of raising.

    Args:
        data: Parsed JSON document
        path: Dotted path, e.g. 'emitted_tx.address'

    Returns:
        Field value or None
    """
    current = data

    for key in path.split('.'):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]

    return current


def load_result_file(path: str) -> Dict:
    """Read and decode the deploy result file"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ResultFileError(f"Result file not found: {path}") from e
    except OSError as e:
        raise ResultFileError(f"Result file is not readable: {path} ({e})") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise ResultFileError(f"Result file is not valid JSON: {path} ({e})") from e


def parse_result_file(path: str, strict: bool = False) -> DeploymentResult:
    """
    Parse deploy output into a DeploymentResult

    Args:
        path: Result file written by the deploy tool
        strict: Raise MissingResultFieldError for absent fields

    Returns:
        DeploymentResult
    """
    data = load_result_file(path)

    values = {}
    for field_path in (ADDRESS_PATH, HASH_PATH):
        value = get_field(data, field_path)

        if value is None:
            if strict:
                raise MissingResultFieldError(field_path, path)
            logger.warning(f"Field '{field_path}' missing from {path}")
        elif not isinstance(value, str):
            value = str(value)

        values[field_path] = value

    return DeploymentResult(
        contract_address=values[ADDRESS_PATH],
        transaction_hash=values[HASH_PATH]
    )
