"""
config.py - Configuration Management
=====================================
This module handles loading configuration from environment variables.
It reads settings from a .env file and makes them available to the rest of the application.

Environment Variables Used:
---------------------------
- AIRDROP_BASE_URL        : (Optional) Base URL of the airdrop site (default: https://airdrop.0gfoundation.ai)
- AIRDROP_ENDPOINT        : (Optional) Eligibility endpoint path (default: /api/eligibility)
- AIRDROP_TIMEOUT_SEC     : (Optional) Request timeout in seconds (default: 30)
- AIRDROP_MAX_RETRIES     : (Optional) Retries after the first failed attempt (default: 3)
- AIRDROP_RETRY_DELAY_SEC : (Optional) Base delay between retries in seconds (default: 1.0)
- AIRDROP_MAX_BATCH       : (Optional) Maximum addresses per check (default: 100)

Example .env file:
------------------
AIRDROP_TIMEOUT_SEC=15
AIRDROP_MAX_RETRIES=2
"""

from dataclasses import dataclass
import os
from pathlib import Path
from dotenv import load_dotenv


# =============================================================================
# CONSTANTS
# =============================================================================

AIRDROP_BASE_URL = "https://airdrop.0gfoundation.ai"
ELIGIBILITY_CHECK_ENDPOINT = "/api/eligibility"

REQUEST_TIMEOUT_SEC = 30
MAX_RETRIES = 3
RETRY_DELAY_SEC = 1.0

# EVM addresses are always "0x" + 40 hex digits
MIN_ADDRESS_LENGTH = 42
MAX_ADDRESS_LENGTH = 42

MAX_ADDRESSES_PER_BATCH = 100


# =============================================================================
# SETTINGS DATACLASS
# =============================================================================

@dataclass
class Settings:
    """Container for all application configuration values."""

    base_url: str = AIRDROP_BASE_URL
    endpoint: str = ELIGIBILITY_CHECK_ENDPOINT

    # How long to wait for a single attempt before giving up on it
    timeout_sec: float = REQUEST_TIMEOUT_SEC

    # Total attempts = 1 initial + max_retries
    max_retries: int = MAX_RETRIES

    # Wait before retry n = retry_delay_sec * n
    retry_delay_sec: float = RETRY_DELAY_SEC

    max_batch: int = MAX_ADDRESSES_PER_BATCH


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean(v: str | None) -> str | None:
    """
    Clean and normalize an environment variable value.

    Examples:
        _clean('  hello  ')     -> 'hello'
        _clean('"quoted"')      -> 'quoted'
        _clean('')              -> None
        _clean(None)            -> None
    """
    if v is None:
        return None

    v = v.strip()

    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1]

    return v if v else None


def _number(name: str, default, cast):
    """Read a numeric variable, falling back to ``default`` when unset."""
    raw = _clean(os.getenv(name))
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise RuntimeError(
            f"{name} must be a number, got {raw!r}. "
            "Please fix it in your .env file."
        ) from None


# =============================================================================
# MAIN CONFIGURATION LOADER
# =============================================================================

def load_settings(env_file: Path | None = None) -> Settings:
    """
    Load application configuration from environment variables.

    This function:
    1. Finds and loads the .env file from the project root
    2. Reads all AIRDROP_* environment variables
    3. Cleans and validates the values
    4. Returns a Settings object with all configuration

    Args:
        env_file: Optional explicit .env path (default: project root .env)

    Returns:
        Settings: A dataclass containing all configuration values

    Raises:
        RuntimeError: If a numeric setting cannot be parsed
    """
    # ---------------------------------------------------------------------
    # STEP 1: Load the .env file
    # ---------------------------------------------------------------------
    # Path(__file__).parents[1] = config.py -> airdrop_checker/ -> project root
    root_env = env_file or Path(__file__).resolve().parents[1] / ".env"
    load_dotenv(dotenv_path=root_env)

    # ---------------------------------------------------------------------
    # STEP 2: Base URL and endpoint
    # ---------------------------------------------------------------------
    base = _clean(os.getenv("AIRDROP_BASE_URL")) or AIRDROP_BASE_URL

    # If someone just puts "airdrop.example.com", we add https://
    if not base.startswith("http"):
        base = "https://" + base

    # Always joined as base_url + endpoint
    base = base.rstrip("/")

    endpoint = _clean(os.getenv("AIRDROP_ENDPOINT")) or ELIGIBILITY_CHECK_ENDPOINT
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint

    # ---------------------------------------------------------------------
    # STEP 3: Build and return the Settings object
    # ---------------------------------------------------------------------
    return Settings(
        base_url=base,
        endpoint=endpoint,
        timeout_sec=_number("AIRDROP_TIMEOUT_SEC", REQUEST_TIMEOUT_SEC, float),
        max_retries=_number("AIRDROP_MAX_RETRIES", MAX_RETRIES, int),
        retry_delay_sec=_number("AIRDROP_RETRY_DELAY_SEC", RETRY_DELAY_SEC, float),
        max_batch=_number("AIRDROP_MAX_BATCH", MAX_ADDRESSES_PER_BATCH, int),
    )
