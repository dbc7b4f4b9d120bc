"""CLI for inspecting how an address page renders."""

import argparse
import base64
import json
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from explorer.config import Config
from explorer.eth.abi import InvalidAbiError, entry_to_dict, load_abi, read_only_entries
from explorer.log import get_logger, setup_logging
from explorer.models import ADDRESS_BYTE_COUNT, Address, Token
from explorer.views import address_view

logger = get_logger(__name__)


def load_address(path: Path) -> Address:
    """Load an address document from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Validated Address

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the document is not a valid address
    """
    if not path.exists():
        raise FileNotFoundError(f"Address file not found: {path}")
    return Address.model_validate_json(path.read_text())


def show_address(
    config: Config,
    address_path: Path,
    usd_value: Optional[Decimal] = None,
    qr_output: Optional[Path] = None,
) -> None:
    """Print every derived value for an address.

    Args:
        config: Configuration object
        address_path: Address JSON document
        usd_value: Exchange rate of the native coin
        qr_output: Write the QR code PNG to this path if given
    """
    address = load_address(address_path)
    token = Token(usd_value=usd_value, symbol=config.coin_symbol)

    rows = [
        ("title", address_view.address_title(address)),
        ("hash", address_view.address_hash(address)),
        ("checksum", address_view.checksum_hash(address) if address.hash.byte_count == ADDRESS_BYTE_COUNT else ""),
        ("trimmed", address_view.trimmed_hash(address)),
        ("name", address_view.display_name(address)),
        ("primary_name", address_view.primary_name(address) or ""),
        ("balance", address_view.balance(address, config)),
        ("balance_usd", address_view.formatted_usd(address, token, config) or ""),
        ("balance_block", address_view.balance_block_number(address)),
        ("contract", address_view.is_contract(address)),
        ("verified", address_view.smart_contract_verified(address)),
        ("read_only_functions", address_view.smart_contract_with_read_only_functions(address)),
    ]
    for key, value in rows:
        print(f"{key}: {value}")

    for entry in address_view.read_only_functions(address):
        print(f"  {entry.selector} {entry.signature}")

    if qr_output:
        qr_output.write_bytes(base64.b64decode(address_view.qr_code(address, config)))
        print(f"QR code written to {qr_output}")


def show_read_functions(abi_path: Path, as_json: bool = False) -> None:
    """Print the read-only functions of an ABI file.

    Args:
        abi_path: ABI JSON file
        as_json: Print the entries as a JSON array instead of a listing
    """
    entries = read_only_entries(load_abi(abi_path))

    if as_json:
        print(json.dumps([entry_to_dict(entry) for entry in entries], indent=2))
        return

    if not entries:
        print("No read-only functions")
        return
    for entry in entries:
        print(f"{entry.selector} {entry.signature}")


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Render block explorer address page values",
        prog="explorer",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show
    show_parser = subparsers.add_parser("show", help="Show derived values for an address JSON document")
    show_parser.add_argument("address", type=Path, help="Path to address JSON")
    show_parser.add_argument("--usd-value", type=_decimal, help="USD value of one native coin")
    show_parser.add_argument("--qr-output", type=Path, help="Write the QR code PNG to this file")

    # read-functions
    abi_parser = subparsers.add_parser("read-functions", help="List read-only functions of an ABI")
    abi_parser.add_argument("abi", type=Path, help="Path to ABI JSON")
    abi_parser.add_argument("--json", action="store_true", help="Output JSON")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Load config
    try:
        config = Config.from_env()
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config)

    try:
        if args.command == "show":
            show_address(config, args.address, args.usd_value, args.qr_output)
        elif args.command == "read-functions":
            show_read_functions(args.abi, args.json)
    except (FileNotFoundError, InvalidAbiError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
