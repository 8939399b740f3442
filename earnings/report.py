"""
report.py - Plain-text rendering of an aggregation result.
"""

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from earnings.aggregator import AggregationResult, BucketSummary

DAY_FORMAT = "%Y-%m-%d"
HOUR_FORMAT = "%Y-%m-%d/%H"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _projection(summary: "BucketSummary") -> str:
    if summary.projection is None:
        return ""
    return f"(~ {summary.projection:0.2f} expected)"


def format_day(summary: "BucketSummary") -> str:
    b = summary.bucket
    return (
        f"{summary.start.strftime(DAY_FORMAT)}:\t\t\t{b.coins:8.2f}\t\t"
        f"{summary.rate:0.2f}/h\t{b.rough_percent():5.1f}%\t{_projection(summary)}"
    ).rstrip()


def format_hour(summary: "BucketSummary") -> str:
    b = summary.bucket
    return (
        f"- {summary.start.strftime(HOUR_FORMAT)}:\t\t{b.coins:8.2f}\t\t"
        f"{summary.rate:0.2f}/m\t{b.rough_percent():5.1f}%\t{_projection(summary)}"
    ).rstrip()


def render_report(result: "AggregationResult", wallets: Iterable[str], fetched: int) -> str:
    """Render the full report; today's hours follow today's day line."""
    lines: List[str] = [
        f"{fetched} transactions (wallet(s): {', '.join(sorted(wallets))})",
        f"First tx was recorded at {result.first_seen.strftime(TIME_FORMAT)}",
        f"Report period total: {result.total:0.2f}",
        f"Daily average: {result.daily_average:0.2f}",
        f"Hourly average: {result.hourly_average:0.2f}",
        f"Rough win percent: {result.period.rough_percent():0.2f}%",
    ]
    for day in result.days:
        lines.append(format_day(day))
    for hour in result.hours:
        lines.append(format_hour(hour))
    return "\n".join(lines) + "\n"
