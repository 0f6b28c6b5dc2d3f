"""Asset Record — registry entry with explicit, versioned byte layout.

Invariants:
    - identity is non-empty and doubles as the primary key
    - price is u32; stored, never validated beyond range
    - attribute is derived from identity (derive_attribute) at creation
    - created_at never changes after creation; transfer touches owner only
    - decode(encode(asset)) == asset

Byte layout (all integers little-endian), version 1:
    offset  size  field
    0       1     layout version (0x01)
    1       4     identity length N (u32)
    5       N     identity bytes
    5+N     4     price (u32)
    9+N     1     attribute (0 = A, 1 = B)
    10+N    2     owner length M (u16)
    12+N    M     owner (UTF-8)
    12+N+M  8     created_at (u64)

Design Decisions:
    - Frozen dataclass: equality and hashing derived from all fields; the owner
      change produces a new record via with_owner()
    - Explicit encode/decode: this is the blob AssetRecord.record persists;
      the version byte keeps older rows readable when the layout grows
"""

import struct
from dataclasses import dataclass, replace

from asset_registry.core.domain_types import AccountId, Attribute, Identity


LAYOUT_VERSION: int = 1
PRICE_MAX: int = 2**32 - 1

_ATTRIBUTE_CODES = {Attribute.A: 0, Attribute.B: 1}
_CODE_ATTRIBUTES = {code: attr for attr, code in _ATTRIBUTE_CODES.items()}


@dataclass(frozen=True)
class Asset:
    """One registry entry."""
    identity: Identity
    price: int
    attribute: Attribute
    owner: AccountId
    created_at: int

    def __post_init__(self) -> None:
        if not self.identity:
            raise ValueError("identity cannot be empty")
        if not 0 <= self.price <= PRICE_MAX:
            raise ValueError(f"price out of u32 range: {self.price}")
        if self.created_at < 0:
            raise ValueError(f"created_at must be non-negative: {self.created_at}")

    def with_owner(self, owner: AccountId) -> "Asset":
        return replace(self, owner=owner)

    def encode(self) -> bytes:
        owner = self.owner.encode("utf-8")
        return b"".join((
            struct.pack("<BI", LAYOUT_VERSION, len(self.identity)),
            self.identity,
            struct.pack("<IB", self.price, _ATTRIBUTE_CODES[self.attribute]),
            struct.pack("<H", len(owner)),
            owner,
            struct.pack("<Q", self.created_at),
        ))

    @classmethod
    def decode(cls, data: bytes) -> "Asset":
        """Inverse of encode(). Raises ValueError on truncated or unknown layouts."""
        try:
            version, id_len = struct.unpack_from("<BI", data, 0)
            if version != LAYOUT_VERSION:
                raise ValueError(f"unsupported asset layout version {version}")
            offset = 5
            identity = data[offset:offset + id_len]
            if len(identity) != id_len:
                raise ValueError("truncated asset record: identity")
            offset += id_len
            price, attr_code = struct.unpack_from("<IB", data, offset)
            offset += 5
            (owner_len,) = struct.unpack_from("<H", data, offset)
            offset += 2
            owner_raw = data[offset:offset + owner_len]
            if len(owner_raw) != owner_len:
                raise ValueError("truncated asset record: owner")
            owner = owner_raw.decode("utf-8")
            offset += owner_len
            (created_at,) = struct.unpack_from("<Q", data, offset)
            offset += 8
        except struct.error as e:
            raise ValueError(f"truncated asset record: {e}") from e
        if offset != len(data):
            raise ValueError(f"{len(data) - offset} trailing bytes in asset record")
        if attr_code not in _CODE_ATTRIBUTES:
            raise ValueError(f"unknown attribute code {attr_code}")
        return cls(
            identity=Identity(bytes(identity)),
            price=price,
            attribute=_CODE_ATTRIBUTES[attr_code],
            owner=AccountId(owner),
            created_at=created_at,
        )
