"""
chainkey Core Package
=====================
Deterministic key and address primitives for clients of a Substrate-style runtime.

Provides:
- storage_key(): twox-128 storage keys for (module, item) pairs
- AccountId / AccountCodec: 32-byte account IDs and their SS58 text form
- BadAccountId: the error raised for undecodable account text
"""

from .account import AccountId, AccountCodec, DEFAULT_CODEC
from .config import CodecConfig, load_codec_config, load_codec
from .errors import (
    BadAccountId,
    MalformedAccountId,
    WrongAccountIdLength,
    AccountIdChecksumMismatch,
)
from .hashing import hash64, blake2b_512
from .storage_key import storage_key, storage_key_bytes, storage_key_hex

__all__ = [
    "AccountId",
    "AccountCodec",
    "DEFAULT_CODEC",
    "CodecConfig",
    "load_codec_config",
    "load_codec",
    "BadAccountId",
    "MalformedAccountId",
    "WrongAccountIdLength",
    "AccountIdChecksumMismatch",
    "hash64",
    "blake2b_512",
    "storage_key",
    "storage_key_bytes",
    "storage_key_hex",
]
