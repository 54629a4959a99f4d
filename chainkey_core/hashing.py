"""
chainkey_core.hashing
---------------------
The two hash primitives behind storage keys and account checksums:

- hash64(): seeded xxHash64, non-cryptographic, used for storage keys
- blake2b_512(): BLAKE2b with a 64-byte digest, used for SS58 checksums
"""

from __future__ import annotations
import xxhash
from cryptography.hazmat.primitives import hashes


def hash64(seed: int, data: bytes) -> int:
    return xxhash.xxh64(data, seed=seed).intdigest()

def blake2b_512(data: bytes) -> bytes:
    h = hashes.Hash(hashes.BLAKE2b(64))
    h.update(data)
    return h.finalize()
