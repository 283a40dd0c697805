"""CLI to query the profile_data_agg API and run the dashboard chain.

Usage:
  poetry run profile-agg-cli health
  poetry run profile-agg-cli country France
  poetry run profile-agg-cli exchange eur
  poetry run profile-agg-cli dashboard --html
"""
import argparse
import asyncio
import json
import sys
from urllib.parse import quote

import httpx

from profile_data_agg.client import (ChainError, DashboardClient,
                                     load_and_render)


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _print_response(r: httpx.Response) -> int:
    """Print the JSON body; error bodies are printed too but exit non-zero."""
    print_json(r.json())
    return 0 if r.is_success else 1


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    return _print_response(client.get("/"))


def cmd_user(client: httpx.Client, _: argparse.Namespace) -> int:
    return _print_response(client.get("/api/user"))


def cmd_country(client: httpx.Client, args: argparse.Namespace) -> int:
    return _print_response(client.get(f"/api/country/{quote(args.name, safe='')}"))


def cmd_exchange(client: httpx.Client, args: argparse.Namespace) -> int:
    return _print_response(client.get(f"/api/exchange/{quote(args.currency, safe='')}"))


def cmd_news(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"/api/news/{quote(args.name, safe='')}")
    data = r.json()
    if isinstance(data, list):
        print(f"Found {len(data)} headlines for {args.name}", file=sys.stderr)
    print_json(data)
    return 0 if r.is_success else 1


def cmd_dashboard(base_url: str, args: argparse.Namespace) -> int:
    """Run the user -> country -> exchange -> news chain once."""

    async def run() -> int:
        async with DashboardClient(base_url, timeout=args.timeout) as client:
            if args.html:
                print(await load_and_render(client))
                return 0
            try:
                dashboard = await client.load_dashboard()
            except ChainError as e:
                print(f"Error: {e.message}" + (f" ({e.detail})" if e.detail else ""), file=sys.stderr)
                return 1
            print_json(
                {
                    "user": dashboard.user.model_dump(by_alias=True),
                    "country": dashboard.country.model_dump(by_alias=True),
                    "exchange": dashboard.exchange.model_dump(by_alias=True, exclude_none=True),
                    "news": [n.model_dump(by_alias=True) for n in dashboard.news],
                }
            )
            return 0

    try:
        return asyncio.run(run())
    except KeyboardInterrupt:
        print("\nStopped by user", file=sys.stderr)
        return 130


def main() -> int:
    parser = argparse.ArgumentParser(description="Query the profile data aggregator API")
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:3000",
        help="API base URL (default: http://127.0.0.1:3000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("health", help="GET /")
    sub.add_parser("user", help="GET /api/user")
    p = sub.add_parser("country", help="GET /api/country/{name}")
    p.add_argument("name", help="Country name, e.g. France")
    p = sub.add_parser("exchange", help="GET /api/exchange/{currency}")
    p.add_argument("currency", help="Currency code, e.g. EUR")
    p = sub.add_parser("news", help="GET /api/news/{name}")
    p.add_argument("name", help="Country name, e.g. France")
    p = sub.add_parser("dashboard", help="Run the full lookup chain")
    p.add_argument("--html", action="store_true", help="Print rendered HTML cards")

    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    if args.command == "dashboard":
        return cmd_dashboard(base_url, args)

    handlers = {
        "health": cmd_health,
        "user": cmd_user,
        "country": cmd_country,
        "exchange": cmd_exchange,
        "news": cmd_news,
    }
    try:
        with httpx.Client(base_url=base_url, timeout=args.timeout) as client:
            return handlers[args.command](client, args)
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1
    except ValueError:
        print("Response was not JSON", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
