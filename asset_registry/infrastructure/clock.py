"""Block Clock — monotonic moment derived from block position."""

from asset_registry.core.repository_protocols import ExecutionContext


class BlockClock:
    """now() = genesis_ms + block_number * block_time_ms (a TimeSource)."""

    def __init__(
        self, context: ExecutionContext,
        genesis_timestamp_ms: int = 0, block_time_ms: int = 6_000,
    ):
        if block_time_ms <= 0:
            raise ValueError(f"block_time_ms must be positive, got {block_time_ms}")
        self._context = context
        self._genesis = genesis_timestamp_ms
        self._block_time = block_time_ms

    def now(self) -> int:
        return self._genesis + self._context.block_number * self._block_time
