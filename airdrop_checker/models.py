"""
models.py - Result Types
========================
Plain dataclasses for what one check run produces: one EligibilityResult per
address, and Statistics derived from a list of them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# =============================================================================
# STATUS VALUES
# =============================================================================

ELIGIBLE = "eligible"
NOT_ELIGIBLE = "not_eligible"
ERROR = "error"

STATUSES = (ELIGIBLE, NOT_ELIGIBLE, ERROR)

STATUS_MESSAGES = {
    ELIGIBLE: "Address is eligible for airdrop",
    NOT_ELIGIBLE: "Address is not eligible for airdrop",
    ERROR: "Error checking eligibility",
}

INVALID_ADDRESS_MESSAGE = "Invalid EVM address format"


def status_message(status: str) -> str:
    """Default human-readable message for a status."""
    return STATUS_MESSAGES.get(status, "Unknown status")


# =============================================================================
# RESULT RECORDS
# =============================================================================

def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EligibilityResult:
    """Outcome of checking a single address."""

    address: str
    status: str
    message: Optional[str] = None
    timestamp: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        if self.status not in STATUSES:
            raise ValueError(
                f"Unknown status {self.status!r}. Expected one of: {', '.join(STATUSES)}"
            )

    @classmethod
    def error(cls, address: str, message: str) -> "EligibilityResult":
        return cls(address=address, status=ERROR, message=message)

    def to_row(self) -> Dict[str, Any]:
        """Flatten into the column layout shared by the CSV and Excel exports."""
        timestamp = self.timestamp.isoformat()
        if timestamp.endswith("+00:00"):
            timestamp = timestamp[:-6] + "Z"

        return {
            "Address": "" if self.address is None else str(self.address),
            "Status": self.status,
            "Message": "" if self.message is None else str(self.message),
            "Timestamp": timestamp,
        }


@dataclass
class Statistics:
    """Aggregate counts over a list of results."""

    total: int = 0
    eligible: int = 0
    not_eligible: int = 0
    errors: int = 0
    eligible_percentage: float = 0.0
