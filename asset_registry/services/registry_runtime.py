"""Registry Runtime — host-side wiring of block position, beacon, clock and event sink.

Invariants:
    - Mutating calls run one at a time under `lock` (single-writer discipline)
    - Every mutating call reserves a fresh extrinsic index, accepted or rejected
    - Read-only services see the current position but reserve nothing
    - After resume(), the current block is strictly greater than every block
      a committed batch was written in, so a restart never replays a position
      whose identity is already stored

Design Decisions:
    - Module-level singleton initialized on startup, same lifecycle as db_manager
      (single-process uvicorn; block position is not shared across workers)
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.config import Settings
from asset_registry.core.domain_types import BlockNumber, ExtrinsicIndex
from asset_registry.infrastructure.block_context import BlockContext, ExtrinsicPosition
from asset_registry.infrastructure.clock import BlockClock
from asset_registry.infrastructure.event_log import EventLog
from asset_registry.infrastructure.randomness import SeededRandomness
from asset_registry.services.registry_service import RegistryService
from asset_registry.services.registry_store import SqlRegistryStore

logger = logging.getLogger(__name__)


class RegistryRuntime:
    """Owns the collaborators shared by every RegistryService instance."""

    def __init__(
        self,
        max_owned: int,
        randomness: SeededRandomness,
        chain: BlockContext | None = None,
        events: EventLog | None = None,
        genesis_timestamp_ms: int = 0,
        block_time_ms: int = 6_000,
    ):
        self.max_owned = max_owned
        self.randomness = randomness
        self.chain = chain or BlockContext()
        self.events = events or EventLog()
        self.genesis_timestamp_ms = genesis_timestamp_ms
        self.block_time_ms = block_time_ms
        self.lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegistryRuntime":
        return cls(
            max_owned=settings.max_owned,
            randomness=SeededRandomness.from_hex(settings.randomness_seed),
            events=EventLog(max_events=settings.event_log_size),
            genesis_timestamp_ms=settings.genesis_timestamp_ms,
            block_time_ms=settings.block_time_ms,
        )

    async def resume(self, db: AsyncSession) -> int:
        """Move past the last block recorded in the store. Returns the current block."""
        last_block = await SqlRegistryStore(db, self.max_owned).get_last_block()
        if last_block >= self.chain.block_number:
            self.chain = BlockContext(block_number=last_block + 1)
            logger.info(
                "Block position resumed from store",
                extra={"block_number": self.chain.block_number},
            )
        return self.chain.block_number

    def open_service(self, db: AsyncSession) -> RegistryService:
        """Service for one mutating call. Caller must hold `lock`."""
        return self._service(db, self.chain.begin_extrinsic())

    def read_service(self, db: AsyncSession) -> RegistryService:
        position = ExtrinsicPosition(
            BlockNumber(self.chain.block_number),
            ExtrinsicIndex(self.chain.extrinsics_in_block),
        )
        return self._service(db, position)

    def advance_block(self) -> int:
        block_number = self.chain.advance_block()
        logger.info("Block advanced", extra={"block_number": block_number})
        return block_number

    def _service(
        self, db: AsyncSession, position: ExtrinsicPosition,
    ) -> RegistryService:
        return RegistryService(
            store=SqlRegistryStore(db, self.max_owned),
            context=position,
            randomness=self.randomness,
            clock=BlockClock(
                position, self.genesis_timestamp_ms, self.block_time_ms,
            ),
            events=self.events,
        )


# Singleton (initialized on startup)
runtime: RegistryRuntime | None = None


def init_runtime(settings: Settings) -> RegistryRuntime:
    global runtime
    runtime = RegistryRuntime.from_settings(settings)
    return runtime


def get_runtime() -> RegistryRuntime:
    """FastAPI dependency for the registry runtime."""
    if not runtime:
        raise RuntimeError("Registry runtime not initialized")
    return runtime
