"""
Command line consumer for the user queries

    user-directory list --search ana --page 1
    user-directory show 3 --locale ru
"""

import argparse
import logging
import sys
from typing import List, Optional

from user_directory.coreutils.config import APIConfig
from user_directory.coreutils.env import env_get
from user_directory.coreutils.logging import setup_logging
from user_directory.errors import MalformedRecord, TransportError
from user_directory.extract.users_api import UsersAPIClient
from user_directory.transformation.transformers import (
    DISPLAY_LABELS,
    format_for_display,
    full_name,
)
from .queries import DEFAULT_PAGE_SIZE, UserQueries, paginate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="user-directory", description="Browse users from the Users API"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List users, optionally filtered")
    list_parser.add_argument(
        "--search", default="", help="Substring of name, username or email"
    )
    list_parser.add_argument("--page", type=int, default=1, help="1-based page number")
    list_parser.add_argument(
        "--page-size", type=int, default=DEFAULT_PAGE_SIZE, help="Users per page"
    )

    show_parser = subparsers.add_parser("show", help="Show one user's details")
    show_parser.add_argument("user_id", type=int, help="User id")
    show_parser.add_argument(
        "--locale", choices=sorted(DISPLAY_LABELS), default="en", help="Label language"
    )

    return parser


def run_list(queries: UserQueries, search: str, page: int, page_size: int) -> None:
    users = queries.search_users(search) if search else queries.fetch_all_users()
    result = paginate(users, page, page_size)

    for user in result.users:
        print(f"{user.id:>4}  {full_name(user)}  @{user.username}  {user.email}")
    print(
        f"Page {result.page}/{max(result.total_pages, 1)} - {result.total} users"
    )


def run_show(queries: UserQueries, user_id: int, locale: str) -> None:
    user = queries.fetch_user_by_id(user_id)
    for label, value in format_for_display(user, locale=locale).items():
        print(f"{label}: {value if value is not None else '-'}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    else:
        level_name = env_get("LOG_LEVEL", "WARNING").upper()
        log_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_level, log_file=args.log_file)

    try:
        config = APIConfig.from_env()
        with UsersAPIClient(config) as client:
            queries = UserQueries(client)
            if args.command == "list":
                run_list(queries, args.search, args.page, args.page_size)
            elif args.command == "show":
                run_show(queries, args.user_id, args.locale)
        return 0

    except (TransportError, MalformedRecord) as e:
        logger.error(f"❌ Could not load users: {e}")
        print("Could not load users. Please try again.", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.error(f"❌ Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
