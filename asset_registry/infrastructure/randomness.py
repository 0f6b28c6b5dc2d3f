"""Seeded Randomness Beacon — domain-tagged, deterministic 32-byte values.

Invariants:
    - random(subject, block) is a pure function of (seed, subject, block)
    - Output is always 32 bytes
    - Same subject within one block returns the same value

Design Decisions:
    - BLAKE2b-256 over seed || len(subject) || subject || block (u64 LE):
      length prefix keeps (subject, block) pairs from aliasing
"""

import hashlib
import struct


class SeededRandomness:
    """Deterministic randomness source (a RandomnessSource)."""

    OUTPUT_SIZE: int = 32

    def __init__(self, seed: bytes):
        self._seed = bytes(seed)

    @classmethod
    def from_hex(cls, seed_hex: str) -> "SeededRandomness":
        return cls(bytes.fromhex(seed_hex))

    def random(self, subject: bytes, block_number: int) -> bytes:
        digest = hashlib.blake2b(digest_size=self.OUTPUT_SIZE)
        digest.update(self._seed)
        digest.update(struct.pack("<I", len(subject)))
        digest.update(subject)
        digest.update(struct.pack("<Q", block_number))
        return digest.digest()
