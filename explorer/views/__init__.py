"""View helpers consumed by the page rendering layer."""

from explorer.views.address_view import (
    address_hash,
    address_title,
    balance,
    balance_block_number,
    checksum_hash,
    display_name,
    formatted_usd,
    is_contract,
    primary_name,
    qr_code,
    read_only_functions,
    smart_contract_verified,
    smart_contract_with_read_only_functions,
    trimmed_hash,
)

__all__ = [
    'address_hash',
    'address_title',
    'balance',
    'balance_block_number',
    'checksum_hash',
    'display_name',
    'formatted_usd',
    'is_contract',
    'primary_name',
    'qr_code',
    'read_only_functions',
    'smart_contract_verified',
    'smart_contract_with_read_only_functions',
    'trimmed_hash',
]
