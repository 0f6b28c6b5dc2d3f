"""SQL Registry Store — typed get/put over the three logical stores with atomic batch commit.

Invariants:
    - Reads never write; the only write path is commit_batch
    - commit_batch applies assets, owner indexes and counters in ONE transaction:
      all rows commit together or the session rolls back
    - Unknown accounts read as an empty index; a missing counter row reads as 0
    - Owner index rows are created on first membership and never deleted
    - last_block only moves forward, even if a batch carries an older block
    - A primary-key race on a new asset (another writer inserted the same
      identity first) surfaces as DuplicateIdentityError, not a generic 503

Design Decisions:
    - Reads and the commit share the caller's AsyncSession, so validation and
      writes see the same snapshot under the host's single-writer discipline
    - JSON identities list reassigned (not mutated in place) so SQLAlchemy
      detects the change without MutableList
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.core.asset import Asset
from asset_registry.core.domain_types import AccountId, Identity
from asset_registry.core.errors import DatabaseError, DuplicateIdentityError
from asset_registry.core.owner_index import OwnedIdentities
from asset_registry.core.repository_protocols import WriteBatch
from asset_registry.models.asset import AssetRecord
from asset_registry.models.counter import (
    LAST_BLOCK_KEY, RegistryCounter, TOTAL_CREATED_KEY,
)
from asset_registry.models.owner_index import OwnerIndexEntry

logger = logging.getLogger(__name__)


class SqlRegistryStore:
    """RegistryStore backed by SQLAlchemy async ORM."""

    def __init__(self, db: AsyncSession, max_owned: int):
        self.db = db
        self.max_owned = max_owned

    # ─── Registry (identity -> asset) ────────────────────────────

    async def get_asset(self, identity: Identity) -> Asset | None:
        row = await self.db.get(AssetRecord, bytes(identity))
        return row.to_domain() if row else None

    async def contains_asset(self, identity: Identity) -> bool:
        result = await self.db.execute(
            select(AssetRecord.identity).where(
                AssetRecord.identity == bytes(identity),
            ),
        )
        return result.scalar_one_or_none() is not None

    # ─── Owner index (account -> bounded identities) ────────────

    async def get_owner_index(self, account: AccountId) -> OwnedIdentities:
        row = await self.db.get(OwnerIndexEntry, account)
        if not row:
            return OwnedIdentities(capacity=self.max_owned)
        return row.to_domain(self.max_owned)

    # ─── Counters (scalars) ──────────────────────────────────────

    async def get_total_created(self) -> int:
        return await self._get_counter(TOTAL_CREATED_KEY)

    async def get_last_block(self) -> int:
        return await self._get_counter(LAST_BLOCK_KEY)

    async def _get_counter(self, name: str) -> int:
        row = await self.db.get(RegistryCounter, name)
        return row.value if row else 0

    # ─── Atomic commit ───────────────────────────────────────────

    async def commit_batch(self, batch: WriteBatch) -> None:
        """Apply every staged write in one transaction."""
        if batch.is_empty:
            return
        inserted: list[Identity] = []
        try:
            for asset in batch.assets:
                if await self._stage_asset(asset):
                    inserted.append(asset.identity)
            for account, index in batch.owner_indexes.items():
                await self._stage_owner_index(account, index)
            if batch.total_created is not None:
                await self._stage_counter(TOTAL_CREATED_KEY, batch.total_created)
            if batch.block_number is not None:
                await self._stage_last_block(batch.block_number)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if inserted:
                logger.warning(
                    "Asset insert lost a primary-key race",
                    extra={"identity": inserted[0].hex()},
                )
                raise DuplicateIdentityError(inserted[0]) from e
            logger.error(f"Registry batch violated a constraint: {e}")
            raise DatabaseError("Registry batch rolled back", "commit") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Registry batch commit failed: {e}")
            raise DatabaseError("Registry batch rolled back", "commit") from e

    async def _stage_asset(self, asset: Asset) -> bool:
        """Stage one asset; True when it is a new row."""
        row = await self.db.get(AssetRecord, bytes(asset.identity))
        if row is None:
            self.db.add(AssetRecord.from_domain(asset))
            return True
        row.update_from(asset)
        return False

    async def _stage_owner_index(
        self, account: AccountId, index: OwnedIdentities,
    ) -> None:
        members = OwnerIndexEntry.encode_members(index)
        row = await self.db.get(OwnerIndexEntry, account)
        if row is None:
            self.db.add(OwnerIndexEntry(account=account, identities=members))
        else:
            row.identities = members

    async def _stage_counter(self, name: str, value: int) -> None:
        row = await self.db.get(RegistryCounter, name)
        if row is None:
            self.db.add(RegistryCounter(name=name, value=value))
        else:
            row.value = value

    async def _stage_last_block(self, block_number: int) -> None:
        current = await self._get_counter(LAST_BLOCK_KEY)
        if block_number > current:
            await self._stage_counter(LAST_BLOCK_KEY, block_number)
