"""
bucket.py - Per-bucket earnings accumulator.

One accumulator backs each reporting bucket: the whole period, each day of
the period, and each hour of today. It sums coins, counts transactions and
tracks the block-height span so a rough block-win percentage can be derived.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from earnings.models import Transaction


@dataclass
class BucketAccumulator:
    first_block: Optional[int] = None  # None until a block height is seen
    last_block: Optional[int] = None
    coins: float = 0.0
    count: int = 0

    def record(self, tx: "Transaction"):
        """Add one transaction to the bucket."""
        self.coins += tx.amount
        self.count += 1

        height = tx.block_height
        if height <= 0:
            # Not yet included in a block
            return
        if self.first_block is None or height < self.first_block:
            self.first_block = height
        if self.last_block is None or height > self.last_block:
            self.last_block = height

    def rough_percent(self) -> float:
        """
        Approximate share of blocks won between the first and last block seen.

        Returns 0 for an empty bucket or one without any block heights.
        """
        if self.count == 0 or self.first_block is None:
            return 0.0
        span = self.last_block - self.first_block + 1
        return 100.0 * self.count / span
