"""Identity Generation — derives an asset identity and attribute from beacon randomness.

Invariants:
    - generate_identity is PURE: identical inputs always yield identical output
    - Payload layout: random value (raw) || extrinsic index (u32 LE) || block number (u64 LE)
    - The payload IS the identity — no hashing step
    - Attribute: even leading byte -> A, odd leading byte -> B
    - Uniqueness NOT guaranteed here; the caller checks the registry

Design Decisions:
    - struct over hand-rolled byte math: fixed-width little-endian layout is explicit
    - Same randomness + same extrinsic index + same block collide by construction;
      the service surfaces that as DuplicateIdentityError
"""

import struct

from asset_registry.core.domain_types import Attribute, Identity


# Domain-separation tag for the randomness beacon
IDENTITY_SUBJECT: bytes = b"dna"

_INDEX_FORMAT = "<I"    # u32
_BLOCK_FORMAT = "<Q"    # u64


def encode_payload(
    random_value: bytes, extrinsic_index: int, block_number: int,
) -> bytes:
    """Canonical serialization of the three generator inputs."""
    return (
        bytes(random_value)
        + struct.pack(_INDEX_FORMAT, extrinsic_index)
        + struct.pack(_BLOCK_FORMAT, block_number)
    )


def derive_attribute(payload: bytes) -> Attribute:
    """Parity of the first byte decides the attribute."""
    if not payload:
        raise ValueError("cannot derive attribute from an empty payload")
    return Attribute.A if payload[0] % 2 == 0 else Attribute.B


def generate_identity(
    random_value: bytes, extrinsic_index: int, block_number: int,
) -> tuple[Identity, Attribute]:
    """Build a candidate identity and its attribute. Pure."""
    payload = encode_payload(random_value, extrinsic_index, block_number)
    return Identity(payload), derive_attribute(payload)
