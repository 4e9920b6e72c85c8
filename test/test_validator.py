"""Tests for airdrop_checker/validator.py — address validation and normalization."""

import pytest

from airdrop_checker import validator
from airdrop_checker.errors import InvalidAddress


# ════════════════════════════════════════════════════════════
#  is_valid_address / normalize_address
# ════════════════════════════════════════════════════════════

class TestIsValidAddress:

    def test_mixed_case_address_is_valid(self, addr_a):
        assert validator.is_valid_address(addr_a) is True

    def test_lowercase_address_is_valid(self, addr_a):
        assert validator.is_valid_address(addr_a.lower()) is True

    @pytest.mark.parametrize("value", [
        None,
        "",
        42,
        ["0x742d35cc6634c0532925a3b8d4c9db96c4b4d8b6"],
        "742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6",      # no prefix
        "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b",      # 41 chars
        "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6a",    # 43 chars
        "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8bZ",     # non-hex digit
        "0X742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6",     # upper-case prefix
        " 0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b",     # leading space
    ])
    def test_rejects_malformed(self, value):
        assert validator.is_valid_address(value) is False
        assert validator.normalize_address(value) is None


class TestNormalizeAddress:

    def test_lowercases(self, addr_b):
        assert validator.normalize_address(addr_b) == addr_b.lower()

    def test_is_idempotent(self, addresses):
        for address in addresses:
            once = validator.normalize_address(address)
            assert validator.normalize_address(once) == once

    def test_require_address_raises(self):
        with pytest.raises(InvalidAddress) as exc:
            validator.require_address("0x123")
        assert exc.value.address == "0x123"

    def test_require_address_returns_normalized(self, addr_a):
        assert validator.require_address(addr_a) == addr_a.lower()


# ════════════════════════════════════════════════════════════
#  Batch helpers
# ════════════════════════════════════════════════════════════

def test_validate_addresses_partitions(addr_a, addr_b):
    split = validator.validate_addresses([addr_a, "nope", addr_b, "0x12"])

    assert split["valid"] == [addr_a.lower(), addr_b.lower()]
    assert split["invalid"] == ["nope", "0x12"]


def test_validate_addresses_empty():
    assert validator.validate_addresses([]) == {"valid": [], "invalid": []}


def test_remove_duplicates_collapses_case_variants(addr_a):
    unique = validator.remove_duplicates([addr_a, addr_a.lower(), addr_a.upper().replace("0X", "0x")])
    assert unique == [addr_a.lower()]


def test_remove_duplicates_keeps_first_occurrence_order(addr_a, addr_b):
    unique = validator.remove_duplicates([addr_b, "bad", addr_a, addr_b.lower()])
    assert unique == [addr_b.lower(), addr_a.lower()]


# ════════════════════════════════════════════════════════════
#  Zero / contract address
# ════════════════════════════════════════════════════════════

def test_zero_address():
    assert validator.is_zero_address("0x" + "0" * 40) is True
    assert validator.is_zero_address("0x" + "0" * 39 + "1") is False
    assert validator.is_zero_address("0x0") is False


def test_contract_address_check(addr_a):
    assert validator.is_contract_address(addr_a) is True
    assert validator.is_contract_address(validator.ZERO_ADDRESS) is False
    assert validator.is_contract_address("garbage") is False
