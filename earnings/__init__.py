"""
Wallet Earnings - Package

Periodic digest of generated-coin income for a mining/staking wallet.
Fetches wallet transactions over JSON-RPC, buckets them by day and by hour,
and renders totals, rates, projections and rough block-win percentages.
"""

__version__ = "0.2.0"

__all__ = [
    "aggregator",
    "bucket",
    "cli",
    "config",
    "errors",
    "models",
    "report",
    "rpc",
    "wallets",
]
