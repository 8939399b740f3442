"""
cli.py - Command-line entry point.

Exit codes:
    0  report printed
    1  usage / configuration error
    2  fetch failure
    3  no transactions returned
"""

import logging
import sys
from datetime import datetime
from typing import List, Optional

from earnings.aggregator import aggregate
from earnings.config import build_parser, load_config
from earnings.errors import ConfigurationError, EmptyResultError, FetchError
from earnings.report import render_report
from earnings.rpc import RpcTransactionSource
from earnings.wallets import fetch_wallets

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FETCH = 2
EXIT_EMPTY = 3


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)-10s] %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        config = load_config(argv, parser)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        print(file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    setup_logging(config.verbose)

    source = RpcTransactionSource(
        config.url, config.username, config.password,
        count=config.tx_count, timeout=config.timeout,
    )
    try:
        txs = fetch_wallets(source, config.wallets)
        result = aggregate(txs, config.report_days, datetime.now())
    except FetchError as e:
        logger.error("Fetch failed for wallet %s: %s", e.wallet_id, e)
        return EXIT_FETCH
    except EmptyResultError as e:
        logger.error("%s", e)
        return EXIT_EMPTY

    sys.stdout.write(render_report(result, config.wallets, len(txs)))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
