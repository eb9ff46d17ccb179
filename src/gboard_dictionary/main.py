"""Command-line entry point.

Loads ``.env`` and configuration, sets up logging and runs one dictionary
operation against a file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from gboard_dictionary.config.settings import AppSettings, SettingsManager
from gboard_dictionary.core import dictionary_store as store
from gboard_dictionary.models.enums import FileVariant
from gboard_dictionary.models.record import DictionaryRecord
from gboard_dictionary.utils.constants import APP_NAME, APP_VERSION
from gboard_dictionary.utils.exceptions import GBoardDictionaryError
from gboard_dictionary.utils.logging_config import get_logger, setup_logging

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gboard-dictionary",
        description="Inspect and edit Gboard personal dictionary files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "-f", "--file", type=Path,
        help="dictionary file (defaults to storage.default_path / $GBOARD_DICTIONARY_PATH)",
    )
    parser.add_argument(
        "-c", "--categories", action="store_true",
        help="use the 'with categories' file variant",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="create an empty dictionary file")
    sub.add_parser("list", help="print every record")

    get = sub.add_parser("get", help="print the record for a key")
    get.add_argument("key")

    add = sub.add_parser("add", help="insert a record")
    add.add_argument("key")
    add.add_argument("value")
    add.add_argument("--lang", default="", help="language code, e.g. en or es-ES")
    add.add_argument("--category", default="")

    remove = sub.add_parser("remove", help="delete every record with a key")
    remove.add_argument("key")

    sub.add_parser("categories", help="list categories (with-categories files)")
    sub.add_parser("languages", help="list language codes (with-categories files)")
    return parser


def run(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the parsed command, printing results to stdout."""
    path = args.file or (Path(settings.storage.default_path) if settings.storage.default_path else None)
    if path is None:
        print("No dictionary file given (use --file or set storage.default_path).", file=sys.stderr)
        return 2

    variant = FileVariant.WITH_CATEGORIES if args.categories else FileVariant.PLAIN
    with_category = variant is FileVariant.WITH_CATEGORIES
    command = args.command

    if command == "init":
        created = store.create(path, variant, settings)
        print(f"Created {path}" if created else f"{path} already exists")
    elif command == "list":
        reader = store.read_all_with_category if with_category else store.read_all
        for record in reader(path, settings):
            print(record.serialize(variant))
    elif command == "get":
        reader = store.read_one_with_category if with_category else store.read_one
        record = reader(args.key, path, settings)
        if record is None:
            print(f"'{args.key}' not found", file=sys.stderr)
            return 1
        print(record.serialize(variant))
    elif command == "add":
        record = DictionaryRecord(args.key, args.value, args.lang, args.category)
        inserter = store.insert_with_category if with_category else store.insert
        inserter(record, path, settings)
        print(f"Added '{record.key}'")
    elif command == "remove":
        deleter = store.delete_with_category if with_category else store.delete
        removed = deleter(args.key, path, settings)
        print(f"Removed {removed} record(s)")
    elif command == "categories":
        for category in sorted(store.list_categories(path, settings)):
            print(category)
    elif command == "languages":
        for code in sorted(store.list_language_codes(path, settings)):
            print(code)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Application main function."""
    load_dotenv()

    args = build_parser().parse_args(argv)

    settings = SettingsManager().load()

    level = logging.DEBUG if args.verbose else getattr(
        logging, settings.logging.level.upper(), logging.INFO
    )
    setup_logging(level=level)
    logger.debug("%s %s starting: %s", APP_NAME, APP_VERSION, args.command)

    try:
        return run(args, settings)
    except (GBoardDictionaryError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
