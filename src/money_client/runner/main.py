"""
CLI main entry point.
"""

import argparse
import getpass
import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..api_client import MoneyClient, MoneyError
from ..config import Config, create_default_config, load_config
from ..schemas import AnalyticsFilters, OperationType
from ..session_store import FileSessionStore, Identity

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="money-client",
        description="Command line access to the money tracking API",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("init-config", help="Write a default config file")

    login_parser = subparsers.add_parser("login", help="Authenticate and store the session")
    login_parser.add_argument("email", type=str, help="Account email")
    login_parser.add_argument(
        "--password",
        type=str,
        default=None,
        help="Password (prompted for if omitted)",
    )

    subparsers.add_parser("logout", help="Forget the stored session")
    subparsers.add_parser("status", help="Show configuration and session state")

    # transactions command
    tx_parser = subparsers.add_parser("transactions", help="List transactions")
    tx_parser.add_argument("--currency-id", type=int, default=None)
    tx_parser.add_argument("--category-id", type=int, default=None)
    tx_parser.add_argument("--period", type=str, default=None)
    tx_parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD")
    tx_parser.add_argument("--end-date", type=str, default=None, help="YYYY-MM-DD")
    tx_parser.add_argument(
        "--operation",
        type=str,
        choices=[op.value for op in OperationType],
        default=None,
    )
    tx_parser.add_argument(
        "--context",
        type=int,
        default=0,
        help="Offset to continue from (default: 0)",
    )
    tx_parser.add_argument(
        "--limit",
        type=int,
        default=15,
        help="Page size (default: 15)",
    )
    tx_parser.add_argument(
        "--all",
        dest="fetch_all",
        action="store_true",
        help="Follow pagination until nothing is left",
    )

    subparsers.add_parser("categories", help="List cost categories")
    subparsers.add_parser("shortcuts", help="List cost shortcuts")
    subparsers.add_parser("notifications", help="List notifications")
    subparsers.add_parser("equity", help="Show equity per currency")

    # analytics command
    analytics_parser = subparsers.add_parser("analytics", help="Basic analytics")
    analytics_parser.add_argument(
        "--period",
        type=str,
        default=None,
        help="Named period; takes precedence over the filters below",
    )
    analytics_parser.add_argument("--start-date", type=str, default=None)
    analytics_parser.add_argument("--end-date", type=str, default=None)
    analytics_parser.add_argument("--pattern", type=str, default=None)

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _client(config: Config, store: FileSessionStore) -> MoneyClient:
    return MoneyClient(base_url=config.api.base_url, session_store=store)


def cmd_init_config(config_path: Path) -> int:
    """Write a default config file unless one exists."""
    if config_path.exists():
        print(f"⚠ Config already exists at {config_path}")
        return 1
    create_default_config(config_path)
    print(f"✓ Wrote default config to {config_path}")
    return 0


def cmd_login(config: Config, email: str, password: str | None) -> int:
    """Authenticate and persist the identity."""
    if password is None:
        password = getpass.getpass("Password: ")

    store = FileSessionStore(config.session_path)
    with _client(config, store) as client:
        response = client.user_auth({"email": email, "password": password})

    if response is None or not isinstance(response.result, dict):
        print("❌ Authentication returned no identity")
        return 1

    store.identity = Identity.from_api_response(response.result)
    store.flush()
    print(f"✓ Logged in as {email}")
    return 0


def cmd_logout(config: Config) -> int:
    """Clear the persisted identity."""
    store = FileSessionStore(config.session_path)
    store.clear()
    store.flush()
    print("✓ Logged out")
    return 0


def cmd_status(config: Config) -> int:
    """Show configuration and session state."""
    store = FileSessionStore(config.session_path)
    print(f"API:      {config.api.base_url}")
    print(f"Session:  {config.session_path}")
    print(f"Logged in: {'yes' if store.get_access_token() else 'no'}")
    return 0


def cmd_transactions(config: Config, args: argparse.Namespace) -> int:
    """List transactions, one page or all of them."""
    filters = {
        "currency_id": args.currency_id,
        "cost_category_id": args.category_id,
        "period": args.period,
        "start_date": args.start_date,
        "end_date": args.end_date,
        "operation": args.operation,
    }

    store = FileSessionStore(config.session_path)
    with _client(config, store) as client:
        if args.fetch_all:
            _print_json(list(client.iter_transactions(limit=args.limit, **filters)))
            return 0

        page = client.transactions_list(context=args.context, limit=args.limit, **filters)

    _print_json({"result": page.result, "left": page.left, "context": page.context})
    return 0


def cmd_list(config: Config, command: str) -> int:
    """Run one of the parameterless listing commands."""
    store = FileSessionStore(config.session_path)
    with _client(config, store) as client:
        if command == "categories":
            response = client.cost_categories_list()
            data = response.result if response else []
        elif command == "shortcuts":
            response = client.cost_shortcuts_list()
            data = response.result if response else []
        elif command == "equity":
            response = client.equity_list()
            data = response.result if response else []
        else:
            data = client.notifications_list()

    _print_json(data)
    return 0


def cmd_analytics(
    config: Config,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    pattern: str | None,
) -> int:
    """Basic analytics by period or by filters."""
    store = FileSessionStore(config.session_path)
    with _client(config, store) as client:
        if period:
            data = client.basic_analytics_by_period(period)
        else:
            filters = AnalyticsFilters(start_date=start_date, end_date=end_date, pattern=pattern)
            data = client.basic_analytics_filtered(filters)

    _print_json(data)
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        return cmd_init_config(parsed.config)

    # Load config
    try:
        config = load_config(parsed.config)
    except Exception as e:
        print(f"❌ Failed to load config: {e}")
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"❌ {error}")
        return 1

    # Route to command
    try:
        if parsed.command == "login":
            return cmd_login(config, parsed.email, parsed.password)
        elif parsed.command == "logout":
            return cmd_logout(config)
        elif parsed.command == "status":
            return cmd_status(config)
        elif parsed.command == "transactions":
            return cmd_transactions(config, parsed)
        elif parsed.command in ("categories", "shortcuts", "notifications", "equity"):
            return cmd_list(config, parsed.command)
        elif parsed.command == "analytics":
            return cmd_analytics(
                config,
                period=parsed.period,
                start_date=parsed.start_date,
                end_date=parsed.end_date,
                pattern=parsed.pattern,
            )
        else:
            parser.print_help()
            return 1
    except MoneyError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
