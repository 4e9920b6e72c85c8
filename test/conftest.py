"""Root conftest.py — shared fixtures for the entire test suite."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ---------------------------------------------------------------------------
# Make the package importable without installing it
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from airdrop_checker.api_client import ApiClient  # noqa: E402
from airdrop_checker.config import Settings  # noqa: E402
from airdrop_checker.models import EligibilityResult  # noqa: E402


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

ADDR_A = "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6"
ADDR_B = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"
ADDR_C = "0x1111111111111111111111111111111111111111"


@pytest.fixture
def addr_a():
    return ADDR_A


@pytest.fixture
def addr_b():
    return ADDR_B


@pytest.fixture
def addresses():
    """Three distinct valid addresses in mixed case."""
    return [ADDR_A, ADDR_B, ADDR_C]


# ---------------------------------------------------------------------------
# Settings / HTTP
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    """Settings with a fake host and no real waiting between retries."""
    return Settings(
        base_url="https://airdrop.test",
        endpoint="/api/eligibility",
        timeout_sec=5,
        max_retries=3,
        retry_delay_sec=1.0,
        max_batch=100,
    )


@pytest.fixture
def make_response():
    """Factory returning mock requests.Response objects."""
    def _make(json_data=None, status_code: int = 200, reason: str = "OK", json_error=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.reason = reason
        resp.ok = 200 <= status_code < 400
        resp.text = "" if json_data is None else str(json_data)
        if json_error is not None:
            resp.json.side_effect = json_error
        else:
            resp.json.return_value = json_data
        return resp
    return _make


# ---------------------------------------------------------------------------
# Stub API client
# ---------------------------------------------------------------------------

@pytest.fixture
def stub_api_client():
    """ApiClient double: every address checked comes back eligible."""
    client = MagicMock(spec=ApiClient)

    def _check_many(addresses):
        return [
            EligibilityResult(address=a, status="eligible", message="Eligible with score: 1")
            for a in addresses
        ]

    def _check_one(address):
        return EligibilityResult(address=address, status="eligible", message="Eligible with score: 1")

    client.check_many.side_effect = _check_many
    client.check_one.side_effect = _check_one
    return client


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every AIRDROP_* variable for the duration of a test."""
    for name in (
        "AIRDROP_BASE_URL", "AIRDROP_ENDPOINT", "AIRDROP_TIMEOUT_SEC",
        "AIRDROP_MAX_RETRIES", "AIRDROP_RETRY_DELAY_SEC", "AIRDROP_MAX_BATCH",
    ):
        # setenv first so monkeypatch restores "unset" even if .env loading adds it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
