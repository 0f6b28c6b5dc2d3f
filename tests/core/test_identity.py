"""Identity Generation — tests for the pure payload and attribute derivation.

Tests cover:
    - Payload layout: random || u32 LE index || u64 LE block
    - Determinism: identical inputs give identical output
    - Distinct extrinsic index or block gives a distinct identity
    - Attribute parity across many sampled payloads of both parities
    - Empty payload is rejected
"""

import pytest

from asset_registry.core.domain_types import Attribute
from asset_registry.core.identity import (
    IDENTITY_SUBJECT, derive_attribute, encode_payload, generate_identity,
)


RANDOM = bytes(range(32))


def test_payload_layout_is_random_then_index_then_block():
    payload = encode_payload(RANDOM, 3, 7)
    assert payload[:32] == RANDOM
    assert payload[32:36] == b"\x03\x00\x00\x00"
    assert payload[36:] == b"\x07\x00\x00\x00\x00\x00\x00\x00"
    assert len(payload) == 44


def test_payload_is_the_identity_without_hashing():
    identity, _ = generate_identity(RANDOM, 1, 2)
    assert identity == encode_payload(RANDOM, 1, 2)


def test_generate_identity_is_deterministic():
    assert generate_identity(RANDOM, 5, 9) == generate_identity(RANDOM, 5, 9)


def test_same_inputs_collide():
    first, _ = generate_identity(RANDOM, 0, 1)
    second, _ = generate_identity(RANDOM, 0, 1)
    assert first == second


def test_different_extrinsic_index_differs():
    first, _ = generate_identity(RANDOM, 0, 1)
    second, _ = generate_identity(RANDOM, 1, 1)
    assert first != second


def test_different_block_differs():
    first, _ = generate_identity(RANDOM, 0, 1)
    second, _ = generate_identity(RANDOM, 0, 2)
    assert first != second


@pytest.mark.parametrize("first_byte", range(0, 256, 7))
def test_attribute_follows_first_byte_parity(first_byte):
    payload = bytes([first_byte]) + b"\xff" * 43
    expected = Attribute.A if first_byte % 2 == 0 else Attribute.B
    assert derive_attribute(payload) is expected


def test_attribute_ignores_trailing_bytes():
    assert derive_attribute(b"\x02" + b"\x01" * 10) is Attribute.A
    assert derive_attribute(b"\x02" + b"\x00" * 10) is Attribute.A
    assert derive_attribute(b"\x03" + b"\x00" * 10) is Attribute.B


def test_generated_attribute_matches_payload():
    even = bytes([0x10]) + RANDOM[1:]
    odd = bytes([0x11]) + RANDOM[1:]
    assert generate_identity(even, 0, 1)[1] is Attribute.A
    assert generate_identity(odd, 0, 1)[1] is Attribute.B


def test_derive_attribute_rejects_empty_payload():
    with pytest.raises(ValueError):
        derive_attribute(b"")


def test_identity_subject_is_dna_tag():
    assert IDENTITY_SUBJECT == b"dna"
