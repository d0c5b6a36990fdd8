# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from hooklink.adapters.sqlalchemy.unit_of_work import startup
from hooklink.app import find_or_create_comment_user, find_or_create_issue_user
from hooklink.config import ConfigurationError, configure_logging, get_log_level

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the user acting in a GitHub webhook")
    parser.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the local data dir)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    issue_comment = subparsers.add_parser(
        "issue-comment", help="Link the author of an issue_comment payload"
    )
    issue_comment.add_argument(
        "payload",
        type=str,
        help="Path to the JSON payload, or - to read it from stdin",
    )

    issues = subparsers.add_parser("issues", help="Link the author of an issues payload")
    issues.add_argument(
        "payload",
        type=str,
        help="Path to the JSON payload, or - to read it from stdin",
    )

    return parser.parse_args(list(argv))


def _load_payload(source: str) -> dict[str, Any]:
    try:
        if source == "-":
            loaded = json.load(sys.stdin)
        else:
            with Path(source).open(encoding="utf-8") as handle:
                loaded = json.load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read payload {source}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("Webhook payload must be a JSON object")
    return loaded


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else get_log_level())
        payload = _load_payload(parsed_args.payload)
        if parsed_args.command == "issue-comment":
            link = find_or_create_comment_user
        elif parsed_args.command == "issues":
            link = find_or_create_issue_user
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.database_uri:
            startup(database_uri=parsed_args.database_uri, force=True)
        result = link(payload)
    except ValueError:
        log.exception("Invalid webhook payload")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while linking user")
        sys.exit(1)

    if result.user is None:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(1)
    print(f"{result.user.id} github_id={result.user.github_id}")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
