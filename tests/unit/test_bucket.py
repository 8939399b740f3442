"""
test_bucket.py - Unit tests for BucketAccumulator.
"""

from datetime import datetime

import pytest

from earnings.bucket import BucketAccumulator

from .conftest import make_tx

WHEN = datetime(2024, 1, 2, 12, 0)


class TestRecord:

    def test_empty_bucket(self):
        b = BucketAccumulator()
        assert b.coins == 0.0
        assert b.count == 0
        assert b.first_block is None
        assert b.last_block is None

    def test_sums_coins_and_counts(self):
        b = BucketAccumulator()
        b.record(make_tx(WHEN, amount=1.5, height=100))
        b.record(make_tx(WHEN, amount=2.25, height=101))
        assert b.coins == 3.75
        assert b.count == 2

    def test_block_range_tracks_min_and_max(self):
        b = BucketAccumulator()
        for height in (150, 120, 180, 130):
            b.record(make_tx(WHEN, height=height))
        assert b.first_block == 120
        assert b.last_block == 180
        assert b.last_block >= b.first_block

    def test_zero_height_does_not_move_range(self):
        b = BucketAccumulator()
        b.record(make_tx(WHEN, height=0))
        assert b.count == 1
        assert b.first_block is None
        b.record(make_tx(WHEN, height=42))
        b.record(make_tx(WHEN, height=0))
        assert b.first_block == 42
        assert b.last_block == 42


class TestRoughPercent:

    def test_empty_is_zero(self):
        assert BucketAccumulator().rough_percent() == 0.0

    def test_without_block_heights_is_zero(self):
        b = BucketAccumulator()
        b.record(make_tx(WHEN, height=0))
        assert b.rough_percent() == 0.0

    def test_single_block_is_full_share(self):
        b = BucketAccumulator()
        b.record(make_tx(WHEN, height=500))
        assert b.rough_percent() == 100.0

    def test_share_of_span(self):
        b = BucketAccumulator()
        # 4 wins across blocks 100..199
        for height in (100, 120, 150, 199):
            b.record(make_tx(WHEN, height=height))
        assert b.rough_percent() == pytest.approx(4.0)
