"""CLI entry point for Alpha Vantage forex queries.

Usage:
    python -m scripts.fetch_forex --function daily --from USD --to COP [--outputsize full] [--mock]
    python -m scripts.fetch_forex --function intraday --from EUR --to USD --interval 5 --datatype csv
"""

import argparse
import json
import logging
import os
import sys

from forex import AlphaVantageResolver, ForexClient, MockResolver
from forex.resolver import ALPHA_VANTAGE_BASE_URL

logger = logging.getLogger(__name__)

FUNCTIONS = ["exchange-rate", "intraday", "daily", "weekly", "monthly"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query Alpha Vantage forex functions")
    parser.add_argument("--function", required=True, choices=FUNCTIONS, help="Forex function")
    parser.add_argument("--from", dest="from_code", required=True, help="Source currency code")
    parser.add_argument("--to", dest="to_code", required=True, help="Destination currency code")
    parser.add_argument("--interval", type=int, help="Minutes between points (intraday only)")
    parser.add_argument("--outputsize", choices=["compact", "full"], help="Series length")
    parser.add_argument("--datatype", choices=["map", "json", "csv"], help="Response format")
    parser.add_argument("--mock", action="store_true", help="Use mock resolver (for testing)")
    return parser


def run(client: ForexClient, args: argparse.Namespace):
    if args.function == "exchange-rate":
        return client.exchange_rate(args.from_code, args.to_code, datatype=args.datatype)
    settings = {"outputsize": args.outputsize, "datatype": args.datatype}
    if args.function == "intraday":
        return client.intraday(args.from_code, args.to_code, args.interval, **settings)
    return getattr(client, args.function)(args.from_code, args.to_code, **settings)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args()
    if args.function == "intraday" and args.interval is None:
        parser.error("--interval is required for intraday")
    if args.function == "exchange-rate" and args.outputsize:
        parser.error("--outputsize does not apply to exchange-rate")

    if args.mock:
        resolver = MockResolver()
    else:
        api_key = os.environ.get("ALPHA_VANTAGE_API_KEY")
        if not api_key:
            logger.error("ALPHA_VANTAGE_API_KEY not set. Use --mock for testing.")
            sys.exit(1)
        base_url = os.environ.get("ALPHA_VANTAGE_BASE_URL", ALPHA_VANTAGE_BASE_URL)
        resolver = AlphaVantageResolver(api_key, base_url=base_url)

    result = run(ForexClient(resolver), args)
    logger.info("Fetched %s for %s/%s", args.function, args.from_code, args.to_code)
    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
