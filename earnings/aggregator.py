"""
aggregator.py - Time-bucketing aggregation engine.

Classifies generated-coin transactions into the reporting period, one bucket
per local calendar day and, for today only, one bucket per local hour.

Acceptance rules:
 - generated (coinbase/reward) transactions only
 - at least MIN_CONFIRMATIONS confirmations
 - received at or after midnight of the first day of the period

The last day bucket and the current hour bucket are still filling up, so
they carry a rate over the elapsed time and a projected end-of-bucket total.
Completed buckets carry a plain average and no projection.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from earnings.bucket import BucketAccumulator
from earnings.errors import ConfigurationError, EmptyResultError
from earnings.models import Transaction

logger = logging.getLogger("aggregator")

MIN_CONFIRMATIONS = 2
MIN_REPORT_DAYS = 2
HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60

REJECT_NOT_GENERATED = "not_generated"
REJECT_UNCONFIRMED = "unconfirmed"
REJECT_BEFORE_PERIOD = "before_period"


@dataclass
class BucketSummary:
    """Display-ready view of one bucket."""

    start: datetime
    bucket: BucketAccumulator
    rate: float  # coins per hour (day buckets) or per minute (hour buckets)
    projection: Optional[float] = None  # None = no projection
    current: bool = False


@dataclass
class AggregationResult:
    now: datetime
    report_days: int
    period_start: datetime
    first_seen: datetime
    period: BucketAccumulator = field(default_factory=BucketAccumulator)
    daily: List[BucketAccumulator] = field(default_factory=list)
    hourly: List[BucketAccumulator] = field(default_factory=list)
    days: List[BucketSummary] = field(default_factory=list)
    hours: List[BucketSummary] = field(default_factory=list)
    rejected: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return self.period.coins

    @property
    def daily_average(self) -> float:
        return self.period.coins / self.report_days

    @property
    def hourly_average(self) -> float:
        return self.daily_average / HOURS_PER_DAY


def period_start_for(now: datetime, report_days: int) -> datetime:
    """Local midnight of the first day of a `report_days` long period ending now."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=report_days - 1)


def day_index(timestamp: datetime, period_start: datetime, report_days: int) -> int:
    """Index of the day bucket holding `timestamp`, clamped to the last day."""
    index = (timestamp.date() - period_start.date()).days
    return min(index, report_days - 1)


def project(coins: float, elapsed: float, span: float) -> Tuple[float, Optional[float]]:
    """
    Rate and projected total for a partially elapsed bucket.

    `elapsed` and `span` share a unit (hours of a day, minutes of an hour).
    With nothing elapsed yet the rate is 0 and there is no projection.
    """
    if elapsed <= 0:
        return 0.0, None
    rate = coins / elapsed
    return rate, rate * span


def validate_report_days(report_days) -> int:
    try:
        days = int(report_days)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid number of report days: {report_days!r}") from None
    if days < MIN_REPORT_DAYS:
        raise ConfigurationError(
            f"Report period must be at least {MIN_REPORT_DAYS} days, got {days}"
        )
    return days


def _rejection(tx: Transaction, timestamp: datetime, period_start: datetime) -> Optional[str]:
    if not tx.generated:
        return REJECT_NOT_GENERATED
    if tx.confirmations < MIN_CONFIRMATIONS:
        return REJECT_UNCONFIRMED
    if timestamp < period_start:
        return REJECT_BEFORE_PERIOD
    return None


def aggregate(
    transactions: Iterable[Transaction],
    report_days: int,
    now: datetime,
) -> AggregationResult:
    """
    Bucket `transactions` into a report period ending at `now` (local, naive).

    Raises ConfigurationError for an invalid period length and
    EmptyResultError when there are no transactions at all. Zero accepted
    transactions is a valid, all-zero result.
    """
    report_days = validate_report_days(report_days)
    txs = list(transactions)
    if not txs:
        raise EmptyResultError("No transactions returned for the requested wallet(s)")

    period_start = period_start_for(now, report_days)
    today = report_days - 1
    period = BucketAccumulator()
    daily = [BucketAccumulator() for _ in range(report_days)]
    hourly = [BucketAccumulator() for _ in range(HOURS_PER_DAY)]
    rejected: Counter = Counter()
    first_seen: Optional[datetime] = None

    for tx in txs:
        timestamp = tx.timestamp
        if first_seen is None or timestamp < first_seen:
            first_seen = timestamp

        reason = _rejection(tx, timestamp, period_start)
        if reason is not None:
            rejected[reason] += 1
            continue

        period.record(tx)
        index = day_index(timestamp, period_start, report_days)
        daily[index].record(tx)
        if index == today:
            hourly[timestamp.hour].record(tx)

    if rejected:
        logger.debug("Skipped transactions: %s", dict(rejected))
    logger.debug(
        "Accepted %d of %d transactions since %s", period.count, len(txs), period_start,
    )

    result = AggregationResult(
        now=now,
        report_days=report_days,
        period_start=period_start,
        first_seen=first_seen,
        period=period,
        daily=daily,
        hourly=hourly,
        rejected=dict(rejected),
    )
    result.days = _summarize_days(result)
    result.hours = _summarize_hours(result)
    return result


def _summarize_days(result: AggregationResult) -> List[BucketSummary]:
    now = result.now
    today = result.report_days - 1
    summaries = []
    for i, bucket in enumerate(result.daily):
        start = result.period_start + timedelta(days=i)
        if i == today:
            elapsed_hours = now.hour + now.minute / 60.0
            rate, projection = project(bucket.coins, elapsed_hours, HOURS_PER_DAY)
            summaries.append(BucketSummary(start, bucket, rate, projection, current=True))
        else:
            summaries.append(BucketSummary(start, bucket, bucket.coins / HOURS_PER_DAY))
    return summaries


def _summarize_hours(result: AggregationResult) -> List[BucketSummary]:
    """Hours of today up to and including the current one."""
    now = result.now
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    summaries = []
    for hour in range(now.hour + 1):
        bucket = result.hourly[hour]
        start = midnight + timedelta(hours=hour)
        if hour == now.hour:
            elapsed_minutes = now.minute + now.second / 60.0
            rate, projection = project(bucket.coins, elapsed_minutes, MINUTES_PER_HOUR)
            summaries.append(BucketSummary(start, bucket, rate, projection, current=True))
        else:
            summaries.append(BucketSummary(start, bucket, bucket.coins / MINUTES_PER_HOUR))
    return summaries
