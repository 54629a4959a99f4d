"""
chainkey_core.account
---------------------
Account identifiers and their SS58 text form.

An AccountId is 32 raw bytes (public-key shaped; not checked for validity).
Its text form is base-58 of

    [prefix][32 id bytes][checksum]

where checksum is the first 2 bytes of BLAKE2b-512("SS58PRE" || prefix || id).

The prefix byte takes part in the checksum but is not compared against the
codec's prefix on decode: any checksum-consistent string is accepted. Use
AccountCodec.decode_with_prefix() to inspect it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from cryptography.hazmat.primitives.asymmetric import ed25519
from .constants import (
    SS58_PREFIX, SS58_DOMAIN, ACCOUNT_ID_LEN, CHECKSUM_LEN, ENCODED_ACCOUNT_LEN,
)
from .errors import MalformedAccountId, WrongAccountIdLength, AccountIdChecksumMismatch
from .hashing import blake2b_512
from .utils import b58e, b58d, hex_to_bytes, bytes_to_hex


def ss58_checksum(payload: bytes) -> bytes:
    return blake2b_512(SS58_DOMAIN + payload)[:CHECKSUM_LEN]


@dataclass(frozen=True, order=True)
class AccountId:
    raw: bytes

    def __post_init__(self):
        # memoryview refuses ints, which bytes() would take as a length
        raw = memoryview(self.raw).tobytes()
        if len(raw) != ACCOUNT_ID_LEN:
            raise ValueError(f"AccountId needs {ACCOUNT_ID_LEN} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    # --------- raw / SCALE ----------
    # A SCALE-encoded [u8; 32] is the bytes themselves, no length prefix.
    @classmethod
    def from_bytes(cls, data: bytes) -> "AccountId":
        return cls(data)

    def to_bytes(self) -> bytes:
        return self.raw

    def __bytes__(self) -> bytes:
        return self.raw

    # --------- hex ----------
    @classmethod
    def from_hex(cls, text: str) -> "AccountId":
        return cls(hex_to_bytes(text))

    def to_hex(self) -> str:
        return bytes_to_hex(self.raw)

    @classmethod
    def from_public_key(cls, public_key: ed25519.Ed25519PublicKey) -> "AccountId":
        return cls(public_key.public_bytes_raw())

    # --------- SS58 text ----------
    @classmethod
    def from_text(cls, text: str) -> "AccountId":
        """Decode SS58 text. Raises a BadAccountId subclass on any malformed input."""
        return DEFAULT_CODEC.decode(text)

    def to_text(self, prefix: Optional[int] = None) -> str:
        codec = DEFAULT_CODEC if prefix is None else AccountCodec(prefix)
        return codec.encode(self)

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class AccountCodec:
    """SS58 codec for a single-byte address prefix (42 unless configured)."""
    prefix: int = SS58_PREFIX

    def __post_init__(self):
        if not 0 <= self.prefix <= 0xFF:
            raise ValueError(f"SS58 prefix must fit in one byte: {self.prefix}")

    def encode(self, account: AccountId) -> str:
        payload = bytes([self.prefix]) + account.raw
        return b58e(payload + ss58_checksum(payload))

    def decode_with_prefix(self, text: str) -> Tuple[int, AccountId]:
        try:
            data = b58d(text)
        except ValueError as exc:
            raise MalformedAccountId(str(exc)) from exc

        if len(data) != ENCODED_ACCOUNT_LEN:
            raise WrongAccountIdLength(len(data))

        payload, checksum = data[:-CHECKSUM_LEN], data[-CHECKSUM_LEN:]
        if checksum != ss58_checksum(payload):
            raise AccountIdChecksumMismatch()

        return payload[0], AccountId(payload[1:])

    def decode(self, text: str) -> AccountId:
        _, account = self.decode_with_prefix(text)
        return account


DEFAULT_CODEC = AccountCodec()
