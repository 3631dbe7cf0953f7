from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pricemerge.adapters.feed import PriceFeedError
from pricemerge.app import export_prices, merge_price_feed, union_price_files
from pricemerge.config import (
    ConfigurationError,
    MergeConfig,
    SplitIdentity,
    configure_logging,
    get_merge_config,
)
from pricemerge.domain.validation import InvalidPriceRecordError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge time-bounded price records")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every reconciled price at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    union = subparsers.add_parser("union", help="Merge two price feed files without a database")
    union.add_argument("current", type=Path, help="Feed with the current prices (.json/.csv)")
    union.add_argument("new", type=Path, help="Feed with the new prices (.json/.csv)")
    union.add_argument(
        "--output",
        type=Path,
        help="Where to write the merged prices (omit to log a summary only)",
    )
    _add_merge_options(union)

    merge = subparsers.add_parser("merge", help="Merge a price feed into the catalog database")
    merge.add_argument("feed", type=Path, help="Feed with the new prices (.json/.csv)")
    _add_merge_options(merge)

    export = subparsers.add_parser("export", help="Export stored prices to a feed file")
    export.add_argument("--output", type=Path, required=True, help="Target .json/.csv file")
    export.add_argument(
        "--product",
        action="append",
        dest="products",
        default=None,
        help="Product code to export (repeatable; defaults to all products)",
    )

    return parser.parse_args(list(argv))


def _add_merge_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--split-identity",
        choices=[member.value for member in SplitIdentity],
        default=None,
        help="Reuse the original id for split remainders or assign fresh ids "
        "(defaults to config)",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip well-formedness checks on input records",
    )


def _merge_config(args: argparse.Namespace) -> MergeConfig:
    base = get_merge_config()
    split_identity = (
        SplitIdentity(args.split_identity) if args.split_identity else base.split_identity
    )
    validate = base.validate and not args.no_validate
    return MergeConfig(split_identity=split_identity, validate=validate)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "union":
            result = union_price_files(
                parsed_args.current,
                parsed_args.new,
                output_path=parsed_args.output,
                config=_merge_config(parsed_args),
            )
            log.info(
                "Union finished: prices=%s, buckets=%s, split=%s, purged=%s",
                len(result.prices),
                result.stats.buckets,
                result.stats.split,
                result.stats.purged,
            )
        elif parsed_args.command == "merge":
            merge_price_feed(parsed_args.feed, config=_merge_config(parsed_args))
        elif parsed_args.command == "export":
            written = export_prices(parsed_args.output, product_codes=parsed_args.products)
            log.info("Exported %s price(s) to %s", written, parsed_args.output)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ConfigurationError, InvalidPriceRecordError, PriceFeedError):
        log.exception("Input validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during price merge")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
