from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cinemap.app import bootstrap_catalogue, publish_views, sync_movie_lists
from cinemap.config import configure_logging, get_storage_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise instead of exiting so ``main`` owns the exit code."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValueError(message)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = _ArgumentParser(description="Synchronise movie lists into a by-country catalogue")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Data directory (defaults to CINEMAP_DATA_DIR or the user data dir)",
    )
    parser.add_argument(
        "--views-dir",
        type=Path,
        help="Directory for published views (defaults to CINEMAP_VIEWS_DIR or <data>/views)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Sync CSV lists into the central database")
    sync.add_argument(
        "--offline",
        action="store_true",
        help="Skip TMDB and queue every new movie for manual entry",
    )
    sync.add_argument(
        "--build-views",
        action="store_true",
        help="Publish the by-country views after syncing",
    )

    subparsers.add_parser("views", help="Publish by-country views for every stored list")

    bootstrap = subparsers.add_parser(
        "bootstrap",
        help="Seed the central database from a published by-country view",
    )
    bootstrap.add_argument(
        "--from-view",
        type=Path,
        required=True,
        help="Path of the view JSON file to import",
    )
    bootstrap.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing database",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    storage = get_storage_config(data_dir=parsed_args.data_dir, views_dir=parsed_args.views_dir)

    try:
        if parsed_args.command == "sync":
            sync_movie_lists(
                storage=storage,
                offline=parsed_args.offline,
                build_views=parsed_args.build_views,
            )
        elif parsed_args.command == "views":
            written = publish_views(storage=storage)
            log.info("Published %d views to %s", len(written), storage.views_path)
        elif parsed_args.command == "bootstrap":
            bootstrap_catalogue(parsed_args.from_view, storage=storage, force=parsed_args.force)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


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
