"""
response_parser.py - Eligibility Response Interpretation
========================================================
The eligibility API has answered in several JSON shapes over time. This
module maps any of them onto one (status, message) pair per address.

Strategy (first matching shape wins, in this order):
1. {"detail": {"evm": {"0xabc...": "5"}}}   - score map keyed by lowercase address
2. {"0xAbC...": {...}}                      - per-address sub-object
3. {"eligible": ["0x...", ...]}             - list of eligible addresses
4. {"notEligible": ["0x...", ...]}          - list of ineligible addresses
5. {"status": "eligible"} / {"eligible": true} - one status for the whole body

Truthiness follows the API's JavaScript origins: an empty dict or list still
counts as "present", while None, False, 0 and "" do not.
"""

from typing import Any, Callable, List, Optional, Tuple

from .models import ELIGIBLE, ERROR, NOT_ELIGIBLE, status_message


# A parsed answer for one address: (status, message)
Parsed = Tuple[str, str]

# A matcher inspects the body for one address; None means "shape not present"
Matcher = Callable[[dict, str], Optional[Parsed]]

UNKNOWN_STATUS_MESSAGE = "Unknown status"


# =============================================================================
# HELPERS
# =============================================================================

def _present(value: Any) -> bool:
    """True for any value except None, False, 0 and the empty string."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return value != ""


def _is_score(value: Any) -> bool:
    """A score counts when it is present and not a zero written as a string."""
    return _present(value) and value != "0"


def _evm_scores(data: dict) -> Optional[Any]:
    """Return the detail.evm map if the body carries one."""
    detail = data.get("detail")
    if not _present(detail) or not isinstance(detail, dict):
        return None
    evm = detail.get("evm")
    return evm if _present(evm) else None


def _message_from(data: Any, status: str) -> str:
    if isinstance(data, dict) and _present(data.get("message")):
        return str(data["message"])
    return status_message(status)


# =============================================================================
# GENERIC STATUS PARSE
# =============================================================================

def parse_eligibility_status(data: Any) -> str:
    """
    Parse one status out of a whole response body (or a per-address sub-object).

    Returns:
        "eligible", "not_eligible" or "error"
    """
    if not isinstance(data, dict) or not data:
        return ERROR

    scores = _evm_scores(data)
    if scores is not None:
        if isinstance(scores, dict) and any(_is_score(v) for v in scores.values()):
            return ELIGIBLE
        return NOT_ELIGIBLE

    # Legacy shape: {"status": ...} or {"eligible": ...}; a falsy "status"
    # defers to "eligible"
    status = data.get("status")
    if not _present(status):
        status = data.get("eligible")

    if status is True or status == ELIGIBLE:
        return ELIGIBLE
    if status is False or status == NOT_ELIGIBLE:
        return NOT_ELIGIBLE
    return ERROR


# =============================================================================
# SHAPE MATCHERS
# =============================================================================

def match_evm_detail(data: dict, address: str) -> Optional[Parsed]:
    scores = _evm_scores(data)
    if scores is None:
        return None

    score = scores.get(address.lower()) if isinstance(scores, dict) else None
    if _is_score(score):
        return ELIGIBLE, f"Eligible with score: {score}"
    return NOT_ELIGIBLE, "Not eligible"


def match_address_key(data: dict, address: str) -> Optional[Parsed]:
    entry = data.get(address)
    if not _present(entry):
        return None
    status = parse_eligibility_status(entry)
    return status, _message_from(entry, status)


def match_eligible_list(data: dict, address: str) -> Optional[Parsed]:
    eligible = data.get("eligible")
    if not isinstance(eligible, list):
        return None
    status = ELIGIBLE if address in eligible else NOT_ELIGIBLE
    return status, status_message(status)


def match_not_eligible_list(data: dict, address: str) -> Optional[Parsed]:
    not_eligible = data.get("notEligible")
    if not isinstance(not_eligible, list):
        return None
    status = NOT_ELIGIBLE if address in not_eligible else ELIGIBLE
    return status, status_message(status)


def match_top_level_status(data: dict, address: str) -> Parsed:
    status = parse_eligibility_status(data)
    return status, _message_from(data, status)


MATCHERS: List[Matcher] = [
    match_evm_detail,
    match_address_key,
    match_eligible_list,
    match_not_eligible_list,
    match_top_level_status,
]


# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================

def parse_address_status(data: Any, address: str) -> Parsed:
    """
    Determine (status, message) for one address of a batch response.

    Args:
        data: The decoded JSON body
        address: The address as it was sent in the request

    Returns:
        (status, message); ("error", "Unknown status") if the body is not
        a JSON object
    """
    if not isinstance(data, dict):
        return ERROR, UNKNOWN_STATUS_MESSAGE

    for matcher in MATCHERS:
        parsed = matcher(data, address)
        if parsed is not None:
            return parsed

    # match_top_level_status always answers, so this is unreachable
    return ERROR, UNKNOWN_STATUS_MESSAGE


def parse_single_response(data: Any) -> Parsed:
    """Determine (status, message) for a single-address request."""
    status = parse_eligibility_status(data)
    return status, _message_from(data, status)
