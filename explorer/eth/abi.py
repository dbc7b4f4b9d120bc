"""ABI parsing into typed descriptors."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Union

from pydantic import ValidationError

from explorer.log import get_logger
from explorer.models import AbiEntry

logger = get_logger(__name__)


class InvalidAbiError(ValueError):
    """Raised when an ABI document cannot be parsed."""
    pass


def parse_abi(raw_abi: Any) -> tuple[AbiEntry, ...]:
    """Parse a raw ABI (list of JSON mappings) into typed entries.

    Args:
        raw_abi: ABI as decoded from JSON

    Returns:
        Tuple of AbiEntry in ABI order

    Raises:
        InvalidAbiError: If the ABI is not a list or an entry is malformed
    """
    if not isinstance(raw_abi, list):
        raise InvalidAbiError(f"ABI must be a list, got {type(raw_abi).__name__}")

    entries = []
    for index, raw_entry in enumerate(raw_abi):
        try:
            entries.append(AbiEntry.model_validate(raw_entry))
        except ValidationError as e:
            raise InvalidAbiError(f"Invalid ABI entry at index {index}: {e}") from e

    logger.debug(f"Parsed ABI ({len(entries)} entries)")
    return tuple(entries)


def load_abi(abi_path: Union[str, Path]) -> tuple[AbiEntry, ...]:
    """Load and parse an ABI from a JSON file.

    Args:
        abi_path: Path to the ABI JSON file

    Returns:
        Tuple of AbiEntry

    Raises:
        FileNotFoundError: If ABI file doesn't exist
        InvalidAbiError: If ABI file is invalid JSON or not a valid ABI
    """
    abi_path = Path(abi_path)
    if not abi_path.exists():
        raise FileNotFoundError(f"ABI file not found: {abi_path.absolute()}")

    try:
        with open(abi_path, "r") as f:
            raw_abi = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidAbiError(f"Invalid JSON in ABI file {abi_path}: {e}") from e

    return parse_abi(raw_abi)


def read_only_entries(abi: Iterable[AbiEntry]) -> list[AbiEntry]:
    """Read-only functions of an ABI, in ABI order."""
    return [entry for entry in abi if entry.is_read_only]


def has_read_only_entry(abi: Iterable[AbiEntry]) -> bool:
    """True if any entry is a read-only function. Stops at the first match."""
    return any(entry.is_read_only for entry in abi)


def entry_to_dict(entry: AbiEntry) -> Dict[str, Any]:
    """Serialize an entry back to its ABI JSON shape."""
    return entry.model_dump(by_alias=True, exclude_none=True, mode="json")
