"""
console.py - Console Output
===========================
Everything the CLI shows a person: banner, grouped results, statistics and
help. Output goes through an injected ``write`` callable (print by default)
so the checking code never prints and tests can capture lines directly.
"""

from typing import Callable, List

from .checker import EligibilityChecker
from .models import ELIGIBLE, ERROR, NOT_ELIGIBLE, EligibilityResult


COLORS = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
}

SEPARATOR = "=" * 60

HELP_TEXT = """
0G Airdrop Eligibility Checker

Usage:
  airdrop-checker check <address1> [address2] ...   Check specific addresses
  airdrop-checker file <input.txt> [output.xlsx]    Check addresses from file
  airdrop-checker help                              Show this help

Examples:
  airdrop-checker check 0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6
  airdrop-checker file addresses.txt results.xlsx
  airdrop-checker file wallets.txt results.csv

File format:
  - One address per line
  - Lines starting with # are ignored
  - CSV format supported (comma-separated)
  - .csv/.xlsx/.xls with an "address" or "wallet" header row: only that column
"""

# (status, section title, colour)
SECTIONS = [
    (ELIGIBLE, "ELIGIBLE ADDRESSES:", "green"),
    (NOT_ELIGIBLE, "NOT ELIGIBLE ADDRESSES:", "red"),
    (ERROR, "ERRORS:", "yellow"),
]


def create_progress_bar(current: int, total: int, width: int = 30) -> str:
    """
    Text progress bar.

    Example:
        create_progress_bar(1, 4, 8)  -> "[##------] 25.0%"
    """
    ratio = current / total if total > 0 else 0.0
    filled = round(ratio * width)
    return f"[{'#' * filled}{'-' * (width - filled)}] {ratio * 100:.1f}%"


class ConsoleReporter:
    """Renders check results for a terminal."""

    def __init__(self, write: Callable[[str], None] = print, color: bool = True):
        self.write = write
        self.color = color

    def _c(self, text: str, *styles: str) -> str:
        if not self.color:
            return text
        prefix = "".join(COLORS[s] for s in styles)
        return f"{prefix}{text}{COLORS['reset']}"

    def show_banner(self):
        self.write(self._c(SEPARATOR, "cyan"))
        self.write(self._c("        0G AIRDROP ELIGIBILITY CHECKER", "yellow", "bright"))
        self.write(self._c("        Check your wallet eligibility", "dim"))
        self.write(self._c(SEPARATOR, "cyan"))
        self.write("")

    def show_check_banner(self, count: int):
        self.write(self._c(f"Checking {count} address(es)...", "cyan"))
        self.write("")

    def show_help(self):
        self.write(HELP_TEXT)

    def show_results(self, results: List[EligibilityResult]):
        """Print results grouped by status, then the statistics block."""
        if not results:
            self.write("No results to display")
            return

        self.write(self._c("RESULTS", "bright"))
        for status, title, color in SECTIONS:
            group = EligibilityChecker.filter_results(results, status)
            if not group:
                continue
            self.write("")
            self.write(self._c(title, color, "bright"))
            self.write("-" * 50)
            for index, result in enumerate(group, start=1):
                self.write(f"{index:>2}. {result.address}")
                if result.message:
                    self.write(f"    {result.message}")

        self.write("")
        self.show_statistics(results)

    def show_statistics(self, results: List[EligibilityResult]):
        stats = EligibilityChecker.get_statistics(results)

        self.write(self._c("STATISTICS", "bright"))
        self.write(f"Total addresses checked: {stats.total}")
        self.write(f"Eligible addresses: {stats.eligible}")
        self.write(f"Not eligible addresses: {stats.not_eligible}")
        self.write(f"Errors: {stats.errors}")
        self.write("")
        self.write(f"Success rate: {stats.eligible_percentage:.2f}%")
        self.write(f"Progress: {create_progress_bar(stats.eligible, stats.total, 30)}")
        self.write("")
