"""Pydantic models for the chain records rendered on address pages.

These are read-only snapshots handed over by the data layer. Every model is
frozen; malformed input (mismatched hash length, negative balances, unknown
ABI state mutability) is rejected at construction with a ValidationError.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)
from web3 import Web3

# Address hashes on this chain are 20 bytes
ADDRESS_BYTE_COUNT = 20


def _hex_to_bytes(value: Any) -> Any:
    """Decode 0x-prefixed hex strings, pass anything else through."""
    if isinstance(value, str):
        return Web3.to_bytes(hexstr=value)
    return value


class Hash(BaseModel):
    """Fixed-length byte identifier.

    Attributes:
        byte_count: Expected number of bytes
        bytes: Raw bytes, must be exactly byte_count long
    """
    model_config = ConfigDict(frozen=True)

    byte_count: int = Field(ge=0)
    bytes: bytes

    @field_validator("bytes", mode="before")
    @classmethod
    def decode_hex(cls, v: Any) -> Any:
        """Accept 0x-prefixed hex strings for the raw bytes."""
        return _hex_to_bytes(v)

    @model_validator(mode="after")
    def check_byte_count(self) -> "Hash":
        """Ensure the byte sequence matches the declared length."""
        if len(self.bytes) != self.byte_count:
            raise ValueError(
                f"Expected {self.byte_count} bytes, got {len(self.bytes)}"
            )
        return self

    @classmethod
    def cast(cls, value: Union[str, bytes], byte_count: Optional[int] = None) -> "Hash":
        """Build a hash from a hex string or raw bytes.

        Args:
            value: 0x-prefixed hex string or raw bytes
            byte_count: Expected length; defaults to the decoded length

        Returns:
            Hash instance
        """
        raw = _hex_to_bytes(value)
        if byte_count is None:
            byte_count = len(raw)
        return cls(byte_count=byte_count, bytes=raw)

    def to_hex(self) -> str:
        """Lowercase 0x-prefixed hex, two digits per byte."""
        return Web3.to_hex(self.bytes)

    def __str__(self) -> str:
        return self.to_hex()


class StateMutability(str, Enum):
    """Solidity function state mutability."""
    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"


READ_ONLY_MUTABILITIES = frozenset({StateMutability.PURE, StateMutability.VIEW})


class AbiParameter(BaseModel):
    """Function input or output parameter."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str
    components: tuple["AbiParameter", ...] = ()

    @property
    def canonical_type(self) -> str:
        """Type as used in signatures, with tuple components expanded."""
        if self.type.startswith("tuple"):
            inner = ",".join(c.canonical_type for c in self.components)
            return f"({inner}){self.type[len('tuple'):]}"
        return self.type

    @model_serializer(mode="wrap")
    def drop_empty_components(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Only tuple parameters carry components in ABI JSON."""
        data = handler(self)
        if not self.components:
            data.pop("components", None)
        return data


class AbiEntry(BaseModel):
    """Typed descriptor for one entry of a contract ABI.

    Attributes:
        type: Entry kind ("function", "event", "constructor", "fallback", ...)
        name: Function or event name
        inputs: Ordered input parameters
        outputs: Ordered output parameters
        constant: Legacy read-only flag (pre-0.4.16 compilers)
        payable: Legacy payable flag
        state_mutability: Declared state mutability, if any
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = "function"
    name: Optional[str] = None
    inputs: tuple[AbiParameter, ...] = ()
    outputs: tuple[AbiParameter, ...] = ()
    constant: Optional[bool] = None
    payable: Optional[bool] = None
    state_mutability: Optional[StateMutability] = Field(default=None, alias="stateMutability")

    @property
    def is_function(self) -> bool:
        return self.type == "function"

    @property
    def is_read_only(self) -> bool:
        """True for functions that cannot alter chain state."""
        if not self.is_function:
            return False
        return self.constant is True or self.state_mutability in READ_ONLY_MUTABILITIES

    @property
    def signature(self) -> str:
        """Canonical signature, e.g. ``balanceOf(address)``."""
        types = ",".join(p.canonical_type for p in self.inputs)
        return f"{self.name or ''}({types})"

    @property
    def selector(self) -> str:
        """4-byte function selector as 0x-prefixed hex."""
        return Web3.to_hex(Web3.keccak(text=self.signature)[:4])


class SmartContract(BaseModel):
    """Verified contract metadata attached to an address."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    abi: tuple[AbiEntry, ...] = ()


class AddressName(BaseModel):
    """Human-readable label attached to an address."""
    model_config = ConfigDict(frozen=True)

    name: str
    primary: bool = False


class Token(BaseModel):
    """Exchange rate snapshot for the native coin."""
    model_config = ConfigDict(frozen=True)

    usd_value: Optional[Decimal] = Field(default=None, ge=0)
    symbol: Optional[str] = None


class Address(BaseModel):
    """Account or contract address with its preloaded associations.

    Attributes:
        hash: Address identifier
        fetched_balance: Balance in wei, None if never fetched
        fetched_balance_block_number: Block the balance was fetched at
        contract_code: Deployed bytecode, None for plain accounts
        smart_contract: Verified contract metadata, None if unverified
        names: Candidate display names in stored order
    """
    model_config = ConfigDict(frozen=True)

    hash: Hash
    fetched_balance: Optional[int] = Field(default=None, ge=0)
    fetched_balance_block_number: Optional[int] = Field(default=None, ge=0)
    contract_code: Optional[bytes] = None
    smart_contract: Optional[SmartContract] = None
    names: tuple[AddressName, ...] = ()

    @field_validator("hash", mode="before")
    @classmethod
    def cast_hash(cls, v: Any) -> Any:
        """Accept a 20-byte hex string or raw bytes for the hash."""
        if isinstance(v, (str, bytes)):
            return Hash.cast(v, ADDRESS_BYTE_COUNT)
        return v

    @field_validator("contract_code", mode="before")
    @classmethod
    def decode_code(cls, v: Any) -> Any:
        return _hex_to_bytes(v)
