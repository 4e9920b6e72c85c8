"""
errors.py - Exception Types
===========================
Per-address problems (bad format, network failures) are normally absorbed
into ``error`` results. Only batch-level preconditions propagate to callers:
an oversized batch (CapacityExceeded) and an unreadable input file
(FileReadError).
"""


class CheckerError(RuntimeError):
    """Base class for all airdrop checker errors."""


class InvalidAddress(CheckerError, ValueError):
    """Address failed the length or hex-with-prefix format check."""

    def __init__(self, address):
        self.address = address
        super().__init__(f"Invalid EVM address format: {address!r}")


class NetworkError(CheckerError):
    """Timeout, connection failure, non-2xx response or exhausted retries."""


class CapacityExceeded(CheckerError, ValueError):
    """More addresses were submitted than one batch may carry."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Too many addresses ({count}). Maximum allowed: {limit}")


class FileReadError(CheckerError):
    """Input file is missing or could not be read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read file {path}: {reason}")
