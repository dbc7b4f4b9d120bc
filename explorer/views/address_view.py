"""View helpers for rendering an address page.

Each helper takes an already-loaded Address (with its smart contract and
names preloaded where relevant) and returns a display value. Helpers never
mutate their input and never touch the network or the database.
"""

import base64
import io
from typing import Optional

import segno

from explorer.config import DEFAULT_CONFIG, Config
from explorer.eth.abi import has_read_only_entry, read_only_entries
from explorer.log import get_logger
from explorer.models import AbiEntry, Address, Token
from explorer.utils.formatting import (
    checksum_hash as format_checksum_hash,
    format_block_number,
    format_hash,
    format_usd_value,
    format_wei_value,
    trim_hash,
    wei_to_usd,
)

logger = get_logger(__name__)


def address_hash(address: Address) -> str:
    """String version of an address's hash, e.g. ``0x8bf3...415b``."""
    return format_hash(address.hash)


def trimmed_hash(address: Address) -> str:
    return trim_hash(address_hash(address))


def checksum_hash(address: Address) -> str:
    return format_checksum_hash(address.hash)


def balance(address: Address, config: Optional[Config] = None) -> str:
    """Native coin balance, e.g. ``0.00001 POA``; empty when not fetched."""
    config = config or DEFAULT_CONFIG
    if address.fetched_balance is None:
        return ""
    return format_wei_value(address.fetched_balance, config.coin_symbol, config.native_decimals)


def formatted_usd(
    address: Address,
    token: Optional[Token],
    config: Optional[Config] = None,
) -> Optional[str]:
    """USD value of the address balance.

    Args:
        address: Address with fetched_balance in wei
        token: Exchange rate snapshot for the native coin
        config: Formatting settings, defaults to Config()

    Returns:
        Formatted string like ``$0.000005 USD``, or None when either the
        balance or the exchange rate is unavailable
    """
    config = config or DEFAULT_CONFIG
    if address.fetched_balance is None:
        return None
    if token is None or token.usd_value is None:
        return None

    usd = wei_to_usd(address.fetched_balance, token.usd_value, config.native_decimals)
    return format_usd_value(usd, config.usd_decimal_places)


def qr_code(address: Address, config: Optional[Config] = None) -> str:
    """Base64-encoded PNG of a QR code for the address hash."""
    config = config or DEFAULT_CONFIG
    content = address_hash(address)

    qr = segno.make_qr(content, error=config.qr_error_level.lower())
    buffer = io.BytesIO()
    qr.save(buffer, kind="png", scale=config.qr_scale, border=config.qr_border)

    logger.debug(f"Generated QR code version {qr.version} for {content}")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


def is_contract(address: Address) -> bool:
    """True when the address has deployed bytecode."""
    return bool(address.contract_code)


def address_title(address: Address) -> str:
    return "Contract Address" if is_contract(address) else "Address"


def smart_contract_verified(address: Address) -> bool:
    return address.smart_contract is not None


def smart_contract_with_read_only_functions(address: Address) -> bool:
    """True when the verified contract exposes view, pure or constant functions."""
    if not smart_contract_verified(address):
        return False
    return has_read_only_entry(address.smart_contract.abi)


def read_only_functions(address: Address) -> list[AbiEntry]:
    """Read-only functions of the verified contract, in ABI order."""
    if not smart_contract_verified(address):
        return []
    return read_only_entries(address.smart_contract.abi)


def balance_block_number(address: Address) -> str:
    return format_block_number(address.fetched_balance_block_number)


def primary_name(address: Address) -> Optional[str]:
    """Name flagged as primary, or None.

    Names are scanned in stored order; if several are flagged primary the
    first one wins.
    """
    primaries = [address_name for address_name in address.names if address_name.primary]
    if not primaries:
        return None
    if len(primaries) > 1:
        logger.warning(
            f"Address {address_hash(address)} has {len(primaries)} primary names, "
            f"using {primaries[0].name!r}"
        )
    return primaries[0].name


def display_name(address: Address) -> str:
    """Primary name when set, otherwise the address hash."""
    return primary_name(address) or address_hash(address)
