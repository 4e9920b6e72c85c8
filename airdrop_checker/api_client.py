"""
api_client.py - Eligibility API Client
======================================
Turns addresses into EligibilityResult records by calling the airdrop
eligibility endpoint. Failures never escape: a request that cannot be
completed becomes an "error" result carrying the failure message.
"""

import logging
from typing import List, Optional

from .config import Settings
from .errors import NetworkError
from .http_client import HttpClient
from .models import EligibilityResult
from .response_parser import parse_address_status, parse_single_response


logger = logging.getLogger(__name__)

HEALTH_CHECK_PATH = "/health"


class ApiClient:
    """
    Client for the eligibility endpoint.

    Usage:
        client = ApiClient()
        result = client.check_one("0x742d35cc6634c0532925a3b8d4c9db96c4b4d8b6")
        results = client.check_many(["0x...", "0x..."])
        client.close()
    """

    def __init__(self, settings: Optional[Settings] = None, http: Optional[HttpClient] = None):
        self.settings = settings or Settings()
        self.http = http or HttpClient(self.settings)
        self.endpoint = self.settings.endpoint

    def _query(self, addresses: List[str]):
        # A batch is one request with the addresses comma-joined
        params = {"walletAddresses": ",".join(addresses)}
        return self.http.get_json(self.endpoint, params=params)

    def check_one(self, address: str) -> EligibilityResult:
        """
        Check a single address.

        Returns:
            An EligibilityResult; status "error" with the failure text if the
            request could not be completed.
        """
        logger.debug(f"Checking eligibility for: {address}")
        try:
            data = self._query([address])
        except NetworkError as e:
            logger.error(f"Error checking eligibility for {address}: {e}")
            return EligibilityResult.error(address, str(e))

        status, message = parse_single_response(data)
        return EligibilityResult(address=address, status=status, message=message)

    def check_many(self, addresses: List[str]) -> List[EligibilityResult]:
        """
        Check several addresses with a single request.

        Args:
            addresses: Addresses to check (already validated by the caller)

        Returns:
            One result per address, in the same order. If the request fails,
            every address gets an "error" result with the same message.
        """
        if not addresses:
            return []

        logger.info(f"Checking eligibility for {len(addresses)} addresses")
        try:
            data = self._query(addresses)
        except NetworkError as e:
            logger.error(f"Error checking {len(addresses)} addresses: {e}")
            return [EligibilityResult.error(address, str(e)) for address in addresses]

        results = []
        for address in addresses:
            status, message = parse_address_status(data, address)
            results.append(EligibilityResult(address=address, status=status, message=message))
        return results

    def health_check(self) -> bool:
        """Return True if the site's health endpoint answers."""
        try:
            self.http.get_json(HEALTH_CHECK_PATH, decode=False)
        except NetworkError as e:
            logger.error(f"Health check failed: {e}")
            return False
        return True

    def close(self):
        self.http.close()
