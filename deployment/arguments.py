"""
Constructor Arguments
Encodes deploy arguments the way the contract tool expects them
"""

from typing import List, Union
from web3 import Web3

from .exceptions import ConfigurationError


def encode_text(value: str) -> str:
    """
    Encode a text argument

    Digits are treated as text. Only 0x-prefixed values are taken as
    already encoded.
    """
    if not isinstance(value, str) or value == "":
        raise ConfigurationError(f"Unsupported text argument: {value!r}")

    if value.startswith('0x'):
        return value

    return Web3.to_hex(text=value)


def build_constructor_arguments(token_name: str, duration: Union[str, int]) -> List[str]:
    """
    Constructor arguments for the soulbound contract

    The token name is sent twice, followed by the duration. The duration
    is passed through unchanged; its units are defined by the contract.

    Args:
        token_name: Token name, plain text or 0x-encoded
        duration: Duration value supplied by the operator

    Returns:
        Ordered argument list
    """
    if duration is None or str(duration).strip() == "":
        raise ConfigurationError(
            "Duration argument is required (use --duration or SOULBOUND_DURATION)"
        )

    encoded_name = encode_text(token_name)

    return [encoded_name, encoded_name, str(duration).strip()]
