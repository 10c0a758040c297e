"""Command line entry point: print the dashboard or serve the relay."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys

from dotenv import load_dotenv

from .config import DashboardConfig
from .credentials import Credential, CredentialStore
from .dashboard import Dashboard
from .render import render_dashboard


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vercel-status",
        description="Deployment overview across one or more Vercel teams.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    show = subparsers.add_parser("show", help="Fetch deployments and print the dashboard")
    show.add_argument(
        "--team",
        dest="teams",
        action="append",
        default=[],
        metavar="TEAM_ID",
        help="Team id; repeat for several teams (default: $VERCEL_TEAM_ID)",
    )
    show.add_argument(
        "--token",
        dest="tokens",
        action="append",
        default=[],
        metavar="TOKEN",
        help="API token for the team at the same position (default: $VERCEL_TOKEN)",
    )
    show.add_argument("--relay-url", help="Fetch through a relay instead of the Vercel API")
    show.add_argument("--limit", type=int, help="Deployments to request per team")
    show.add_argument("--timeout", type=float, help="Request timeout in seconds")
    show.add_argument(
        "--all", action="store_true", help="List every deployment instead of the latest five"
    )

    relay = subparsers.add_parser("relay", help="Serve the deployments relay")
    relay.add_argument("--host", default="127.0.0.1")
    relay.add_argument("--port", type=int, default=8000)
    return parser


def _credentials(teams: list[str], tokens: list[str]) -> CredentialStore:
    pairs = itertools.zip_longest(teams, tokens, fillvalue="")
    credentials = [Credential(team_id=team, api_token=token) for team, token in pairs]
    return CredentialStore(credentials)


def _show(args: argparse.Namespace) -> int:
    config = DashboardConfig.from_env(
        relay_url=args.relay_url,
        deployments_limit=args.limit,
        timeout=args.timeout,
    )
    with Dashboard(config, _credentials(args.teams, args.tokens)) as dashboard:
        ok = dashboard.refresh()
        output = render_dashboard(
            dashboard.state,
            dashboard.stats(),
            error=dashboard.error,
            limit_per_project=None if args.all else 5,
        )
    print(output)
    return 0 if ok else 1


def _relay(args: argparse.Namespace) -> int:
    import uvicorn

    from .relay import create_app

    uvicorn.run(create_app(DashboardConfig.from_env()), host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command == "relay":
        return _relay(args)
    if args.command is None:
        base = argv if argv is not None else sys.argv[1:]
        args = parser.parse_args([*base, "show"])
    return _show(args)


if __name__ == "__main__":
    sys.exit(main())
