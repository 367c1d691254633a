import argparse
import configparser
import logging
import sys
from typing import List

from pydantic import ValidationError

from sparts_cli.config import get_config
from sparts_cli.container import get_supplier_api, get_supplier_view, setup_container
from sparts_cli.utils.display import ErrorDisplay

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sparts",
        description="Query and register suppliers on the sparts ledger.",
    )
    p.add_argument("--config", default=None, help="Path to the configuration file (default: sparts.conf, or sparts.<SPARTS_ENV>.conf).")
    p.add_argument("--debug", action="store_true", help="Show the underlying cause of ledger errors.")

    sub = p.add_subparsers(dest="resource", required=True)
    supplier = sub.add_parser("supplier", help="Supplier operations.")
    actions = supplier.add_subparsers(dest="action", required=True)

    actions.add_parser("list", help="List all suppliers known to the ledger.")

    get = actions.add_parser("get", help="Show a single supplier and its parts.")
    get.add_argument("uuid", help="UUID of the supplier.")

    create = actions.add_parser("create", help="Register a new supplier with the ledger.")
    create.add_argument("--name", required=True, help="Full name of the supplier.")
    create.add_argument("--short-id", required=True, help="1-5 alphanumeric characters, unique across suppliers.")
    create.add_argument("--uuid", default="", help="UUID to use, one is generated when missing or malformed.")
    create.add_argument("--passwd", default="", help="Optional password/status.")
    create.add_argument("--url", default="", help="Optional url or short description.")
    return p


def setup_logging() -> None:
    loglevel = logging.getLevelName(get_config().app.loglevel.upper())

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel.upper()}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )


def run(args: argparse.Namespace) -> bool:
    if args.action == "list":
        return get_supplier_view().display_supplier_list()
    if args.action == "get":
        return get_supplier_view().display_supplier(args.uuid)
    if args.action == "create":
        result = get_supplier_api().create_supplier(
            name=args.name,
            short_id=args.short_id,
            uuid=args.uuid,
            passwd=args.passwd,
            url=args.url,
        )
        return get_supplier_view().display_create_result(result)
    raise ValueError(f"Unknown action {args.action}")


def main(argv: List[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = get_config(args.config)
    except (FileNotFoundError, ValidationError, configparser.Error) as e:
        ErrorDisplay(debug=args.debug).display_error_msg("Could not load configuration.", str(e))
        return 1

    if args.debug:
        config.app.debug = True

    setup_logging()
    setup_container()
    logger.debug(f"Using ledger at {config.ledger.base_url}")

    return 0 if run(args) else 1


if __name__ == "__main__":
    sys.exit(main())
