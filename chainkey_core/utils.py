"""
chainkey_core.utils
-------------------
Text helpers around the raw byte forms: base-58 (Bitcoin alphabet) and hex.
"""

from __future__ import annotations
import base58

_B58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def b58e(b: bytes) -> str:
    return base58.b58encode(b).decode("ascii")

def b58d(s: str) -> bytes:
    # base58.b58decode strips trailing whitespace; reject it along with any other stray character
    for ch in s:
        if ch not in _B58_CHARS:
            raise ValueError(f"Invalid character {ch!r}")
    return base58.b58decode(s)

def hex_to_bytes(s: str) -> bytes:
    if s[:2] in ("0x", "0X"):
        s = s[2:]
    return bytes.fromhex(s)

def bytes_to_hex(b: bytes) -> str:
    return "0x" + b.hex()
