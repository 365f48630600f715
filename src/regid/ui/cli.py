from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from regid.adapters.openmrs import identifiers_to_payload
from regid.app import remove_identifier_field, sync_identifier_fields
from regid.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from regid.domain.model import FormIdentifiers

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Derive patient identifier form fields")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser(
        "sync",
        help="Add missing primary, required and default identifier fields",
    )
    sync.add_argument(
        "--catalog",
        type=str,
        required=True,
        help="JSON file with the identifier-type catalog",
    )
    sync.add_argument(
        "--config",
        type=str,
        help="Registration config JSON (defaults to $REGID_CONFIG_PATH when set)",
    )
    sync.add_argument(
        "--form",
        type=str,
        help="JSON file with current form identifiers and initial identifiers",
    )

    remove = subparsers.add_parser("remove", help="Remove one identifier field from a form")
    remove.add_argument(
        "--form",
        type=str,
        required=True,
        help="JSON file with current form identifiers",
    )
    remove.add_argument(
        "--field",
        type=str,
        required=True,
        help="Field name of the identifier to remove, e.g. openmrsId",
    )

    return parser.parse_args(list(argv))


def _print_identifiers(identifiers: FormIdentifiers) -> None:
    sys.stdout.write(json.dumps(identifiers_to_payload(identifiers), indent=2, sort_keys=True))
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "sync":
            identifiers = sync_identifier_fields(
                catalog_path=parsed_args.catalog,
                config_path=parsed_args.config,
                form_path=parsed_args.form,
            )
        elif parsed_args.command == "remove":
            identifiers = remove_identifier_field(
                form_path=parsed_args.form,
                field_name=parsed_args.field,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ConfigurationError, ValidationError, ValueError, OSError):
        log.exception("Could not read identifier input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while deriving identifiers")
        sys.exit(1)

    _print_identifiers(identifiers)


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
