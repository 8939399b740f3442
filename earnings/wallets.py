"""
wallets.py - Wallet set normalization and multi-wallet fetch.
"""

import logging
from typing import TYPE_CHECKING, Iterable, List, Protocol, Set

from earnings.errors import ConfigurationError

if TYPE_CHECKING:
    from earnings.models import Transaction

logger = logging.getLogger("wallets")


class TransactionSource(Protocol):
    """Anything that can list the transactions of one wallet."""

    def fetch(self, wallet_id: str) -> List["Transaction"]:
        ...


def normalize_wallets(wallet_ids: Iterable[str]) -> Set[str]:
    """Return the unique, non-blank wallet identifiers. Raises on an empty set."""
    wallets = {w.strip() for w in wallet_ids if w and w.strip()}
    if not wallets:
        raise ConfigurationError("At least one wallet name is required")
    return wallets


def fetch_wallets(source: TransactionSource, wallet_ids: Iterable[str]) -> List["Transaction"]:
    """
    Fetch every unique wallet once and merge the results.

    A FetchError from any wallet propagates; no partial list is returned.
    """
    merged: List["Transaction"] = []
    for wallet_id in sorted(normalize_wallets(wallet_ids)):
        txs = source.fetch(wallet_id)
        logger.info("Fetched %d transactions from wallet %s", len(txs), wallet_id)
        merged.extend(txs)
    return merged
