"""Asset Schemas — Pydantic models for the registry API boundary.

Invariants:
    - Account ids: 1-64 chars, stripped, non-empty
    - Responses never expose raw bytes (hex only)
"""

from pydantic import BaseModel, Field, field_validator

from asset_registry.core.asset import Asset
from asset_registry.core.domain_types import Attribute


ACCOUNT_ID_MAX_LENGTH: int = 64


class TransferRequest(BaseModel):
    """Transfer body — the recipient account."""
    to: str = Field(min_length=1, max_length=ACCOUNT_ID_MAX_LENGTH)

    @field_validator("to")
    @classmethod
    def strip_to(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("to cannot be empty or whitespace")
        return v


class AssetResponse(BaseModel):
    """Public view of one registry entry."""
    identity: str
    price: int
    attribute: Attribute
    owner: str
    created_at: int

    @classmethod
    def from_domain(cls, asset: Asset) -> "AssetResponse":
        return cls(
            identity=asset.identity.hex(),
            price=asset.price,
            attribute=asset.attribute,
            owner=asset.owner,
            created_at=asset.created_at,
        )


class OwnedAssetsResponse(BaseModel):
    """Owner index view."""
    account: str
    identities: list[str]
    count: int
    capacity: int


class RegistryStatsResponse(BaseModel):
    """Counter and block position."""
    total_created: int
    max_owned: int
    block_number: int
    extrinsics_in_block: int
