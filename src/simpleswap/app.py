# src/simpleswap/app.py
"""
Command Line Entry Point

A thin command line over SimpleSwapClient, mainly for checking credentials
and inspecting exchanges by hand. Results are printed to stdout as JSON.

    python -m simpleswap currency btc
    python -m simpleswap ranges btc eth --fixed
    python -m simpleswap exchanges --limit 10 --since 2024-01-01T00:00:00

Files that USE this module:
- python -m simpleswap (module entry point)
- simpleswap console script

Files that this module USES:
- simpleswap.shared.logging_conf (setup_logging for logging configuration)
- simpleswap.config (settings for logging and API key)
- simpleswap.client (SimpleSwapClient)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from simpleswap.client import SimpleSwapClient
from simpleswap.domain.errors import SimpleSwapError
from simpleswap.domain.models import ExchangeRequest, ExchangesRequest, RangesRequest
from simpleswap.shared.logging_conf import setup_logging

log = logging.getLogger(__name__)


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    if isinstance(result, BaseModel):
        return result.model_dump(by_alias=True)
    if is_dataclass(result):
        return asdict(result)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simpleswap", description="SimpleSwap API client")
    parser.add_argument("--api-key", help="API key (defaults to SIMPLESWAP_API_KEY)")
    parser.add_argument("--base-url", help="API address (defaults to SIMPLESWAP_BASE_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("currency", help="show one currency")
    p.add_argument("symbol")

    sub.add_parser("currencies", help="list all currencies")

    p = sub.add_parser("exchange", help="show one exchange")
    p.add_argument("exchange_id")

    p = sub.add_parser("exchanges", help="list exchanges")
    p.add_argument("--limit", type=int, default=0)
    p.add_argument("--offset", type=int, default=0)
    p.add_argument("--since", type=datetime.fromisoformat, help="ISO timestamp, inclusive")
    p.add_argument("--until", type=datetime.fromisoformat, help="ISO timestamp, inclusive")

    p = sub.add_parser("ranges", help="show min/max amount for a pair")
    p.add_argument("currency_from")
    p.add_argument("currency_to")
    p.add_argument("--fixed", action="store_true", help="fixed-rate instead of floating")

    p = sub.add_parser("create", help="create an exchange")
    p.add_argument("currency_from")
    p.add_argument("currency_to")
    p.add_argument("amount", type=float)
    p.add_argument("address_to")
    p.add_argument("--fixed", action="store_true", help="fixed-rate instead of floating")
    p.add_argument("--extra-id-to", default="")
    p.add_argument("--refund-address", default="")
    p.add_argument("--refund-extra-id", default="")

    return parser


def run(client: SimpleSwapClient, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the client and return its result."""
    if args.command == "currency":
        return client.get_currency(args.symbol)
    if args.command == "currencies":
        return client.get_all_currencies()
    if args.command == "exchange":
        return client.get_exchange(args.exchange_id)
    if args.command == "exchanges":
        return client.get_exchanges(ExchangesRequest(
            limit=args.limit,
            offset=args.offset,
            min_time=args.since,
            max_time=args.until,
        ))
    if args.command == "ranges":
        return client.get_ranges(RangesRequest(args.currency_from, args.currency_to, fixed=args.fixed))
    if args.command == "create":
        return client.create_exchange(ExchangeRequest(
            currency_from=args.currency_from,
            currency_to=args.currency_to,
            amount=args.amount,
            fixed=args.fixed,
            address_to=args.address_to,
            extra_id_to=args.extra_id_to,
            user_refund_address=args.refund_address,
            user_refund_extra_id=args.refund_extra_id,
        ))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run one API call and print the result.

    Returns:
        Process exit code: 0 on success, 1 on API or configuration errors
    """
    from simpleswap.config import settings

    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_to_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    args = build_parser().parse_args(argv)

    try:
        client = SimpleSwapClient(api_key=args.api_key, base_url=args.base_url)
    except ValueError as e:
        log.error("%s", e)
        return 1

    with client:
        try:
            result = run(client, args)
        except SimpleSwapError as e:
            log.error("SimpleSwap %s failed: %s (trace_id=%s)", args.command, e, e.trace_id or "-")
            return 1

    json.dump(_to_jsonable(result), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
