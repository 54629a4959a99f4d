"""
chainkey_core.storage_key
-------------------------
Storage keys for runtime items ("twox-128" of "<module> <item>").

Two xxHash64 digests of the same input, seeded 0 and 1, are laid out as
little-endian 8-byte blocks (seed 0 first) and the 16 bytes are read back as
a big-endian 128-bit integer. ("A", "B C") and ("A B", "C") share one input
and therefore one key; names are not checked for embedded spaces.
"""

from __future__ import annotations
from .constants import STORAGE_KEY_SEEDS, STORAGE_KEY_SEPARATOR
from .hashing import hash64
from .utils import bytes_to_hex


def _module_item_bytes(module: str, item: str) -> bytes:
    return module.encode("utf-8") + STORAGE_KEY_SEPARATOR + item.encode("utf-8")

def storage_key_bytes(module: str, item: str) -> bytes:
    data = _module_item_bytes(module, item)
    return b"".join(hash64(seed, data).to_bytes(8, "little") for seed in STORAGE_KEY_SEEDS)

def storage_key(module: str, item: str) -> int:
    """
    Derive the 128-bit storage key for `item` in runtime `module`.

    Total for any pair of strings, empty ones included. Non-ASCII names are
    hashed as their raw UTF-8 bytes without normalization.
    """
    return int.from_bytes(storage_key_bytes(module, item), "big")

def storage_key_hex(module: str, item: str) -> str:
    return bytes_to_hex(storage_key_bytes(module, item))
