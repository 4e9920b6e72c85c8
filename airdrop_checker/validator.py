"""
validator.py - EVM Address Validation
=====================================
Pure functions for checking and normalizing wallet addresses.

A valid address is "0x" followed by exactly 40 hex digits (either case).
The normalized form is all lowercase, which is what the API keys its
responses by and what deduplication compares.
"""

import re
from typing import Dict, Iterable, List, Optional

from .config import MAX_ADDRESS_LENGTH, MIN_ADDRESS_LENGTH
from .errors import InvalidAddress


ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")

ZERO_ADDRESS = "0x" + "0" * 40


def is_valid_address(address) -> bool:
    """
    Check whether a value is a syntactically valid EVM address.

    Examples:
        is_valid_address("0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6")  -> True
        is_valid_address("742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6")    -> False
        is_valid_address(None)                                           -> False
    """
    if not address or not isinstance(address, str):
        return False

    if len(address) < MIN_ADDRESS_LENGTH or len(address) > MAX_ADDRESS_LENGTH:
        return False

    return ADDRESS_PATTERN.match(address) is not None


def normalize_address(address) -> Optional[str]:
    """Return the lowercase form of a valid address, or None."""
    if not is_valid_address(address):
        return None
    return address.lower()


def require_address(address) -> str:
    """Like normalize_address, but raises InvalidAddress instead of returning None."""
    normalized = normalize_address(address)
    if normalized is None:
        raise InvalidAddress(address)
    return normalized


def validate_addresses(addresses: Iterable) -> Dict[str, List]:
    """
    Split addresses into valid (normalized) and invalid (as given).

    Returns:
        {"valid": [...normalized...], "invalid": [...original strings...]}
    """
    valid = []
    invalid = []

    for address in addresses:
        normalized = normalize_address(address)
        if normalized:
            valid.append(normalized)
        else:
            invalid.append(address)

    return {"valid": valid, "invalid": invalid}


def remove_duplicates(addresses: Iterable) -> List[str]:
    """Normalize, drop invalid entries, and keep the first occurrence of each address."""
    normalized = (normalize_address(a) for a in addresses)
    # dict preserves insertion order
    return list(dict.fromkeys(a for a in normalized if a is not None))


def is_zero_address(address) -> bool:
    normalized = normalize_address(address)
    if not normalized:
        return False
    return normalized == ZERO_ADDRESS


def is_contract_address(address) -> bool:
    """
    Basic, offline contract-address check.

    Only rules out invalid and zero addresses; telling an EOA from a contract
    needs an RPC call (eth_getCode), which this tool does not make.
    """
    normalized = normalize_address(address)
    if not normalized:
        return False
    return not is_zero_address(normalized)
