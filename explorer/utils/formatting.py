"""Utility functions for formatting blockchain data.

Amounts are arbitrary precision, so every Decimal operation runs in a local
context wide enough to keep all digits of its operands.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from web3 import Web3

from explorer.models import ADDRESS_BYTE_COUNT, Hash

# Native coin uses 18 decimals (wei -> ether)
NATIVE_DECIMALS = 18


def wei_to_eth(wei: int, decimals: int = NATIVE_DECIMALS) -> Decimal:
    """Convert wei to ether.

    Args:
        wei: Amount in wei (smallest unit of the native coin)
        decimals: Number of decimals of the native coin

    Returns:
        Decimal: Amount in ether, exact
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(wei))))
        return Decimal(wei).scaleb(-decimals)


def wei_to_usd(wei: int, usd_value: Decimal, decimals: int = NATIVE_DECIMALS) -> Decimal:
    """Exact USD value of a wei amount at the given rate."""
    ether = wei_to_eth(wei, decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(wei))) + len(usd_value.as_tuple().digits))
        return ether * usd_value


def format_usd_value(value: Decimal, decimal_places: int = 6) -> str:
    """Format a USD amount, e.g. ``$1,234.500000 USD``.

    Rounds half up to exactly ``decimal_places`` fractional digits.
    """
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # integer digits + fractional digits + one for a rounding carry
        ctx.prec = max(ctx.prec, value.adjusted() + decimal_places + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"${rounded:,f} USD"


def format_wei_value(wei: int, symbol: str, decimals: int = NATIVE_DECIMALS) -> str:
    """Format a wei amount in ether units with trailing zeros removed.

    Examples:
        10_000_000_000_000 wei -> "0.00001 POA"
        2_000_000_000_000_000_000 wei -> "2 POA"
    """
    ether = wei_to_eth(wei, decimals)
    if ether == 0:
        return f"0 {symbol}"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(wei)))
        normalized = ether.normalize()
    return f"{normalized:,f} {symbol}"


def format_hash(hash_: Hash) -> str:
    """Lowercase 0x-prefixed hex of a hash."""
    return hash_.to_hex()


def trim_hash(hex_string: str) -> str:
    """Shorten a hex string to its first 6 and last 6 characters."""
    if len(hex_string) <= 12:
        return hex_string
    return f"{hex_string[:6]}–{hex_string[-6:]}"


def checksum_hash(hash_: Hash) -> str:
    """EIP-55 mixed-case rendering of an address hash.

    Raises:
        ValueError: If the hash is not an address-sized hash
    """
    if hash_.byte_count != ADDRESS_BYTE_COUNT:
        raise ValueError(
            f"Checksum requires a {ADDRESS_BYTE_COUNT}-byte hash, got {hash_.byte_count}"
        )
    return Web3.to_checksum_address(hash_.to_hex())


def format_block_number(block_number: Optional[int]) -> str:
    """Plain decimal block number, empty string when unknown."""
    if block_number is None:
        return ""
    return str(block_number)
