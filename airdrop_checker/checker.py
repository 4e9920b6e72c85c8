"""
checker.py - Eligibility Checking Orchestration
===============================================
Ties the pieces together:

1. Validate and normalize the input addresses
2. Report malformed addresses as "error" results (no network call)
3. Deduplicate what's left and check it with one API request
4. Aggregate, filter and export the results

Every address handed to check_addresses() comes back as a result; only an
oversized batch (CapacityExceeded) or an unreadable file (FileReadError)
raises.
"""

import io
import logging
from typing import Iterable, List, Optional

import pandas as pd
from openpyxl.styles import Font, PatternFill

from . import validator
from .api_client import ApiClient
from .config import MAX_ADDRESSES_PER_BATCH
from .errors import CapacityExceeded
from .loader import load_addresses
from .models import (
    ELIGIBLE,
    ERROR,
    INVALID_ADDRESS_MESSAGE,
    NOT_ELIGIBLE,
    EligibilityResult,
    Statistics,
)


logger = logging.getLogger(__name__)


# =============================================================================
# EXPORT LAYOUT
# =============================================================================

CSV_HEADERS = ["Address", "Status", "Message", "Timestamp"]

RESULTS_SHEET = "Airdrop Results"
STATS_SHEET = "Statistics"

HEADER_FILL = PatternFill(fill_type="solid", fgColor="FFE6F3FF")

# Status cell colour per status
STATUS_FILLS = {
    ELIGIBLE: PatternFill(fill_type="solid", fgColor="FFD4EDDA"),
    NOT_ELIGIBLE: PatternFill(fill_type="solid", fgColor="FFF8D7DA"),
    ERROR: PatternFill(fill_type="solid", fgColor="FFFFEAA7"),
}

RESULT_COLUMN_WIDTHS = {"A": 45, "B": 15, "C": 50, "D": 25}
STATS_COLUMN_WIDTHS = {"A": 25, "B": 15}


def _style_sheet(sheet, widths):
    for letter, width in widths.items():
        sheet.column_dimensions[letter].width = width
    for cell in sheet[1]:
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL


# =============================================================================
# CHECKER CLASS
# =============================================================================

class EligibilityChecker:
    """
    Checks wallet addresses for airdrop eligibility.

    Usage:
        checker = EligibilityChecker()
        results = checker.check_addresses(["0x...", "0x..."])
        print(checker.get_statistics(results))
    """

    def __init__(self, api_client: Optional[ApiClient] = None,
                 max_batch: int = MAX_ADDRESSES_PER_BATCH):
        self.api_client = api_client or ApiClient()
        self.max_batch = max_batch

    # -------------------------------------------------------------------------
    # CHECKING
    # -------------------------------------------------------------------------

    def check_address(self, address: str) -> EligibilityResult:
        """Check one address; malformed input is answered without a request."""
        normalized = validator.normalize_address(address)
        if normalized is None:
            return EligibilityResult.error(address, INVALID_ADDRESS_MESSAGE)

        return self.api_client.check_one(normalized)

    def check_addresses(self, addresses: List[str]) -> List[EligibilityResult]:
        """
        Check a batch of addresses.

        Args:
            addresses: Raw address strings (any case, may contain junk and duplicates)

        Returns:
            Errors for malformed addresses first (as given), then one result per
            unique valid address in the order the API client returned them.

        Raises:
            CapacityExceeded: If more than max_batch addresses are given
        """
        if not addresses:
            return []

        if len(addresses) > self.max_batch:
            raise CapacityExceeded(len(addresses), self.max_batch)

        split = validator.validate_addresses(addresses)

        results = [
            EligibilityResult.error(address, INVALID_ADDRESS_MESSAGE)
            for address in split["invalid"]
        ]
        if results:
            logger.warning(f"Skipping {len(results)} invalid address(es)")

        unique = validator.remove_duplicates(split["valid"])
        if unique:
            results.extend(self.api_client.check_many(unique))

        return results

    def check_addresses_from_file(self, path) -> List[EligibilityResult]:
        """
        Load addresses from a file and check them.

        Raises:
            FileReadError: If the file is missing or unreadable
            CapacityExceeded: If the file holds more than max_batch addresses
        """
        addresses = load_addresses(path)
        logger.info(f"Loaded {len(addresses)} address(es) from {path}")
        return self.check_addresses(addresses)

    # -------------------------------------------------------------------------
    # AGGREGATION
    # -------------------------------------------------------------------------

    @staticmethod
    def get_statistics(results: List[EligibilityResult]) -> Statistics:
        total = len(results)
        eligible = sum(1 for r in results if r.status == ELIGIBLE)
        not_eligible = sum(1 for r in results if r.status == NOT_ELIGIBLE)
        errors = sum(1 for r in results if r.status == ERROR)

        return Statistics(
            total=total,
            eligible=eligible,
            not_eligible=not_eligible,
            errors=errors,
            eligible_percentage=(eligible / total) * 100 if total > 0 else 0.0,
        )

    @staticmethod
    def filter_results(results: Iterable[EligibilityResult], status: str) -> List[EligibilityResult]:
        return [r for r in results if r.status == status]

    # -------------------------------------------------------------------------
    # EXPORTS
    # -------------------------------------------------------------------------

    @staticmethod
    def export_to_csv(results: List[EligibilityResult]) -> str:
        """
        Render results as CSV text.

        Fields are joined with plain commas and are not quoted, so a message
        containing a comma shifts that row's columns.
        """
        rows = [CSV_HEADERS]
        for result in results:
            row = result.to_row()
            rows.append([row[h] for h in CSV_HEADERS])

        return "\n".join(",".join(row) for row in rows)

    def export_to_xlsx(self, results: List[EligibilityResult]) -> bytes:
        """
        Render results as an Excel workbook.

        Sheets:
            "Airdrop Results": one row per result, status cell coloured by status
            "Statistics":      summary counts and success rate
        """
        stats = self.get_statistics(results)

        results_df = pd.DataFrame([r.to_row() for r in results], columns=CSV_HEADERS)
        stats_df = pd.DataFrame(
            [
                ("Total Addresses", stats.total),
                ("Eligible Addresses", stats.eligible),
                ("Not Eligible Addresses", stats.not_eligible),
                ("Errors", stats.errors),
                ("Success Rate (%)", f"{stats.eligible_percentage:.2f}"),
            ],
            columns=["Metric", "Value"],
        )

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            results_df.to_excel(writer, sheet_name=RESULTS_SHEET, index=False)
            stats_df.to_excel(writer, sheet_name=STATS_SHEET, index=False)

            sheet = writer.sheets[RESULTS_SHEET]
            _style_sheet(sheet, RESULT_COLUMN_WIDTHS)
            for row_idx, result in enumerate(results, start=2):
                sheet.cell(row=row_idx, column=2).fill = STATUS_FILLS[result.status]
            sheet.auto_filter.ref = "A1:D1"
            sheet.freeze_panes = "A2"

            _style_sheet(writer.sheets[STATS_SHEET], STATS_COLUMN_WIDTHS)

        return buffer.getvalue()
