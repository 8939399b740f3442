"""
config.py - Report configuration from the command line and environment.

Usage:
    wallet-earnings <url> <username> <password> <wallet> [<wallet> ...] [--days 10]

A password of "-" is read from the EARNINGS_RPC_PASSWORD environment variable.
"""

import argparse
import os
from dataclasses import dataclass, field
from typing import List, Optional, Set
from urllib.parse import urlparse

from earnings.aggregator import validate_report_days
from earnings.errors import ConfigurationError
from earnings.rpc import DEFAULT_TIMEOUT, DEFAULT_TX_COUNT
from earnings.wallets import normalize_wallets

DEFAULT_REPORT_DAYS = 10
PASSWORD_ENV = "EARNINGS_RPC_PASSWORD"


@dataclass
class ReportConfig:
    url: str
    username: str
    password: str
    wallets: Set[str] = field(default_factory=set)
    report_days: int = DEFAULT_REPORT_DAYS
    tx_count: int = DEFAULT_TX_COUNT
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False


class ReportArgumentParser(argparse.ArgumentParser):
    """Reports usage errors as ConfigurationError instead of exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ReportArgumentParser(
        prog="wallet-earnings",
        description="Report generated-coin earnings of one or more wallets",
    )
    parser.add_argument("url", help="Wallet node RPC URL, e.g. http://localhost:8332")
    parser.add_argument("username", help="RPC user name")
    parser.add_argument("password", help=f"RPC password ('-' reads ${PASSWORD_ENV})")
    parser.add_argument("wallets", nargs="+", metavar="wallet", help="Wallet name(s)")
    parser.add_argument("--days", default=str(DEFAULT_REPORT_DAYS),
                        help=f"Report period in days (default: {DEFAULT_REPORT_DAYS})")
    parser.add_argument("--count", type=int, default=DEFAULT_TX_COUNT,
                        help=f"Transactions to list per wallet (default: {DEFAULT_TX_COUNT})")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _resolve_password(password: str) -> str:
    if password != "-":
        return password
    value = os.environ.get(PASSWORD_ENV)
    if not value:
        raise ConfigurationError(f"{PASSWORD_ENV} environment variable is required")
    return value


def load_config(argv: Optional[List[str]] = None,
                parser: Optional[argparse.ArgumentParser] = None) -> ReportConfig:
    """Parse and validate the command line. Raises ConfigurationError."""
    parser = parser or build_parser()
    args = parser.parse_args(argv)

    parsed = urlparse(args.url)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigurationError(f"Invalid URL {args.url!r}")
    if args.count < 1:
        raise ConfigurationError(f"Transaction count must be positive, got {args.count}")

    return ReportConfig(
        url=args.url,
        username=args.username,
        password=_resolve_password(args.password),
        wallets=normalize_wallets(args.wallets),
        report_days=validate_report_days(args.days),
        tx_count=args.count,
        timeout=args.timeout,
        verbose=args.verbose,
    )
