"""
rpc.py - JSON-RPC transaction source.

Lists a wallet's transactions through the node's `listtransactions` call,
one HTTP POST per wallet at `<url>/wallet/<name>` with basic auth.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from earnings.errors import FetchError
from earnings.models import ListTransactionsResponse, Transaction

logger = logging.getLogger("rpc")

DEFAULT_TX_COUNT = 10000
DEFAULT_TIMEOUT = 30  # seconds
RPC_ID = "wallet-earnings"


class RpcTransactionSource:
    """Fetches transaction lists from a wallet node over JSON-RPC."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        count: int = DEFAULT_TX_COUNT,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip("/")
        self.count = count
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (username, password)

    def wallet_url(self, wallet_id: str) -> str:
        return f"{self.url}/wallet/{quote(wallet_id, safe='')}"

    def payload(self) -> dict:
        return {
            "jsonrpc": "1.0",
            "id": RPC_ID,
            "method": "listtransactions",
            "params": ["*", self.count, 0],
        }

    def fetch(self, wallet_id: str) -> List[Transaction]:
        """Return every transaction of `wallet_id`. Raises FetchError on any failure."""
        url = self.wallet_url(wallet_id)
        logger.debug("POST %s (count=%d)", url, self.count)
        try:
            response = self._session.post(
                url,
                json=self.payload(),
                headers={"Content-Type": "text/plain"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Unable to POST to {url}: {e}", wallet_id) from e

        if response.status_code != 200:
            raise FetchError(
                f"Unexpected status code {response.status_code} from {url}: {response.text[:200]}",
                wallet_id,
            )

        try:
            envelope = ListTransactionsResponse.model_validate(response.json())
        except ValueError as e:
            # ValidationError is a ValueError, as is a JSON decode failure
            kind = "Malformed" if isinstance(e, ValidationError) else "Invalid JSON in"
            raise FetchError(f"{kind} response from {url}: {e}", wallet_id) from e

        if envelope.error is not None:
            raise FetchError(
                f"RPC error {envelope.error.code} from {url}: {envelope.error.message}",
                wallet_id,
            )

        return list(envelope.result or [])
