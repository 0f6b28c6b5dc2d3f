"""Boundary Protocols — contracts between the registry core and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage accessed through RegistryStore; mutations only via commit_batch
    - Time, randomness and block position are injected, never read from the OS

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Storage methods are async (implementations do IO); time/randomness/context
      are synchronous because they must be deterministic and non-blocking
"""

from dataclasses import dataclass, field
from typing import Protocol

from asset_registry.core.asset import Asset
from asset_registry.core.domain_types import AccountId, Identity
from asset_registry.core.events import RegistryEvent
from asset_registry.core.owner_index import OwnedIdentities


@dataclass
class WriteBatch:
    """Staged writes applied all-or-nothing by RegistryStore.commit_batch."""
    assets: list[Asset] = field(default_factory=list)
    owner_indexes: dict[AccountId, OwnedIdentities] = field(default_factory=dict)
    total_created: int | None = None
    block_number: int | None = None

    def put_asset(self, asset: Asset) -> None:
        self.assets.append(asset)

    def put_owner_index(self, account: AccountId, index: OwnedIdentities) -> None:
        self.owner_indexes[account] = index

    def put_total_created(self, value: int) -> None:
        self.total_created = value

    def put_block_number(self, block_number: int) -> None:
        self.block_number = block_number

    @property
    def is_empty(self) -> bool:
        return (
            not self.assets
            and not self.owner_indexes
            and self.total_created is None
            and self.block_number is None
        )


class RegistryStore(Protocol):
    """Typed key-value access to the three logical stores — implemented by shell."""
    async def get_asset(self, identity: Identity) -> Asset | None: ...
    async def contains_asset(self, identity: Identity) -> bool: ...
    async def get_owner_index(self, account: AccountId) -> OwnedIdentities: ...
    async def get_total_created(self) -> int: ...
    async def get_last_block(self) -> int: ...
    async def commit_batch(self, batch: WriteBatch) -> None: ...


class TimeSource(Protocol):
    """Monotonic moment reading."""
    def now(self) -> int: ...


class RandomnessSource(Protocol):
    """Domain-tagged verifiable randomness."""
    def random(self, subject: bytes, block_number: int) -> bytes: ...


class ExecutionContext(Protocol):
    """Position of the current call within the block sequence."""
    @property
    def block_number(self) -> int: ...

    @property
    def extrinsic_index(self) -> int: ...


class EventSink(Protocol):
    """Receives notifications after a successful commit."""
    def emit(self, event: RegistryEvent) -> None: ...
