"""AssetRecord ORM — persists one registry entry keyed by its identity bytes.

Invariants:
    - identity is the primary key (raw payload bytes, never hex)
    - record holds Asset.encode(); to_domain() decodes it and is the only read path
    - owner mirrors the decoded record's owner, kept as a column so accounts
      can be queried without decoding every row

Design Decisions:
    - Versioned blob over one column per field: the layout version byte lets
      older rows be read after the record grows
    - to_domain()/from_domain()/update_from() are the only conversion points
"""

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from asset_registry.core.asset import Asset
from asset_registry.db.base import Base


class AssetRecord(Base):
    """Registry row — identity -> encoded asset."""
    __tablename__ = "assets"

    identity: Mapped[bytes] = mapped_column(
        LargeBinary(64), primary_key=True,
    )
    owner: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    record: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def to_domain(self) -> Asset:
        return Asset.decode(bytes(self.record))

    def update_from(self, asset: Asset) -> None:
        # identity is the key and never changes
        self.owner = asset.owner
        self.record = asset.encode()

    @classmethod
    def from_domain(cls, asset: Asset) -> "AssetRecord":
        return cls(
            identity=bytes(asset.identity),
            owner=asset.owner,
            record=asset.encode(),
        )
