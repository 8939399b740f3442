"""Shared fixtures for the wallet earnings test suite."""

from datetime import datetime

import pytest

from earnings.models import Transaction


# ── Helpers ─────────────────────────────────────────────────────────────────

def make_tx(when: datetime, amount: float = 1.0, generated: bool = True,
            confirmations: int = 5, height: int = 0, **extra) -> Transaction:
    """Build a transaction received at local time `when`."""
    return Transaction(
        category="generate" if generated else "receive",
        amount=amount,
        generated=generated,
        confirmations=confirmations,
        blockheight=height,
        timereceived=int(when.timestamp()),
        **extra,
    )


class FakeSource:
    """In-memory transaction source recording every fetch."""

    def __init__(self, by_wallet=None):
        self.by_wallet = by_wallet or {}
        self.calls = []

    def fetch(self, wallet_id):
        self.calls.append(wallet_id)
        return list(self.by_wallet.get(wallet_id, []))


# ── Fixtures ────────────────────────────────────────────────────────────────

@pytest.fixture
def now():
    """Report time used by most aggregation tests."""
    return datetime(2024, 1, 3, 10, 30, 0)


@pytest.fixture
def scenario_txs():
    """Two accepted rewards and one large non-generated receive."""
    return [
        make_tx(datetime(2024, 1, 1, 8, 0), amount=2.0),
        make_tx(datetime(2024, 1, 3, 9, 15), amount=3.0),
        make_tx(datetime(2024, 1, 3, 9, 0), amount=100.0, generated=False),
    ]
