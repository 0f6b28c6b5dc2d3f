"""Registry Service — create and transfer, each one all-or-nothing commit.

Invariants:
    - Every precondition is checked (core/enforce_ownership.py) before any write
    - Exactly one store.commit_batch per successful call; zero on failure
    - Notifications emitted only after commit_batch returned
    - One service instance per unit of work: it is bound to one ExecutionContext
    - Every committed batch records its block number, so a restarted host can
      resume past every block whose identities are already stored

Design Decisions:
    - Impureim sandwich: read state (impure) -> plan (pure core) -> commit (impure)
    - Errors returned by the core are raised here so the host's session
      manager rolls back and the API maps them to the REST envelope
    - Collaborators injected at construction (store, time, randomness, context,
      events) rather than looked up globally
"""

import logging

from asset_registry.core.asset import Asset
from asset_registry.core.domain_types import AccountId, Identity
from asset_registry.core.enforce_ownership import (
    CreatePlan, TransferPlan, plan_create, plan_transfer,
)
from asset_registry.core.errors import AssetNotFoundError, RegistryError
from asset_registry.core.events import Created, Transferred
from asset_registry.core.identity import IDENTITY_SUBJECT, generate_identity
from asset_registry.core.repository_protocols import (
    EventSink,
    ExecutionContext,
    RandomnessSource,
    RegistryStore,
    TimeSource,
    WriteBatch,
)

logger = logging.getLogger(__name__)


class RegistryService:
    """Orchestrates identity generation, counter, registry and owner index."""

    def __init__(
        self,
        store: RegistryStore,
        context: ExecutionContext,
        randomness: RandomnessSource,
        clock: TimeSource,
        events: EventSink,
    ):
        self.store = store
        self.context = context
        self.randomness = randomness
        self.clock = clock
        self.events = events

    # ─── Commands ────────────────────────────────────────────────

    async def create(self, caller: AccountId) -> Asset:
        """Create a new asset owned by caller."""
        block_number = self.context.block_number
        random_value = self.randomness.random(IDENTITY_SUBJECT, block_number)
        identity, attribute = generate_identity(
            random_value, self.context.extrinsic_index, block_number,
        )

        plan = plan_create(
            caller=caller,
            identity=identity,
            attribute=attribute,
            created_at=self.clock.now(),
            identity_exists=await self.store.contains_asset(identity),
            current_total=await self.store.get_total_created(),
            owner_index=await self.store.get_owner_index(caller),
        )
        if isinstance(plan, RegistryError):
            self._log_rejection("create", caller, plan)
            raise plan

        await self.store.commit_batch(self._create_batch(caller, plan))
        logger.info(
            "Create committed",
            extra={
                "caller": caller,
                "identity": identity.hex(),
                "total_created": plan.next_total,
                "block_number": block_number,
                "extrinsic_index": self.context.extrinsic_index,
            },
        )
        self.events.emit(Created(identity=identity, owner=caller))
        return plan.asset

    async def transfer(
        self, caller: AccountId, to: AccountId, identity: Identity,
    ) -> Asset:
        """Move identity from caller to `to`."""
        asset = await self.store.get_asset(identity)
        plan = plan_transfer(
            caller=caller,
            recipient=to,
            identity=identity,
            asset=asset,
            sender_index=await self.store.get_owner_index(caller),
            recipient_index=await self.store.get_owner_index(to),
        )
        if isinstance(plan, RegistryError):
            self._log_rejection("transfer", caller, plan)
            raise plan

        await self.store.commit_batch(self._transfer_batch(caller, to, plan))
        logger.info(
            "Transfer committed",
            extra={
                "caller": caller,
                "recipient": to,
                "identity": identity.hex(),
                "block_number": self.context.block_number,
                "extrinsic_index": self.context.extrinsic_index,
            },
        )
        self.events.emit(
            Transferred(sender=caller, recipient=to, identity=identity),
        )
        return plan.asset

    # ─── Queries ─────────────────────────────────────────────────

    async def get_asset(self, identity: Identity) -> Asset:
        asset = await self.store.get_asset(identity)
        if asset is None:
            raise AssetNotFoundError(identity)
        return asset

    async def assets_owned(self, account: AccountId) -> list[Identity]:
        index = await self.store.get_owner_index(account)
        return list(index.members)

    async def total_created(self) -> int:
        return await self.store.get_total_created()

    # ─── Helpers ─────────────────────────────────────────────────

    def _create_batch(self, caller: AccountId, plan: CreatePlan) -> WriteBatch:
        batch = WriteBatch()
        batch.put_asset(plan.asset)
        batch.put_owner_index(caller, plan.owner_index)
        batch.put_total_created(plan.next_total)
        batch.put_block_number(self.context.block_number)
        return batch

    def _transfer_batch(
        self, caller: AccountId, to: AccountId, plan: TransferPlan,
    ) -> WriteBatch:
        batch = WriteBatch()
        batch.put_asset(plan.asset)
        batch.put_owner_index(caller, plan.sender_index)
        batch.put_owner_index(to, plan.recipient_index)
        batch.put_block_number(self.context.block_number)
        return batch

    def _log_rejection(
        self, operation: str, caller: AccountId, error: RegistryError,
    ) -> None:
        logger.warning(
            f"{operation} rejected: {error.message}",
            extra={
                "caller": caller,
                "error_code": error.code,
                "identity": error.context.identity,
                "block_number": self.context.block_number,
                "extrinsic_index": self.context.extrinsic_index,
            },
        )
