"""OwnerIndexEntry ORM — persists the bounded identity list of one account.

Invariants:
    - One row per account; created on first membership, never deleted
    - identities holds hex strings in stored order (swap_remove order preserved)
    - len(identities) <= max_owned enforced before write (core/owner_index.py)
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from asset_registry.core.domain_types import Identity
from asset_registry.core.owner_index import OwnedIdentities
from asset_registry.db.base import Base


class OwnerIndexEntry(Base):
    """Owner index row — account -> [identity hex, ...]."""
    __tablename__ = "owner_index"

    account: Mapped[str] = mapped_column(String(64), primary_key=True)
    identities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    def to_domain(self, capacity: int) -> OwnedIdentities:
        return OwnedIdentities(
            capacity=capacity,
            members=[Identity(bytes.fromhex(h)) for h in self.identities],
        )

    @staticmethod
    def encode_members(index: OwnedIdentities) -> list[str]:
        return [identity.hex() for identity in index.members]
