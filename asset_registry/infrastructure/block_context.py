"""Block Context — hands out (block number, extrinsic index) positions to callers.

Invariants:
    - Positions are strictly ordered: index increases within a block, resets on advance
    - block_number starts at 1 and only increases
    - ExtrinsicPosition is immutable; one per unit of work

Design Decisions:
    - Host-owned, in-memory: the surrounding executor decides block boundaries;
      the registry core only reads the position it was handed
"""

from dataclasses import dataclass

from asset_registry.core.domain_types import BlockNumber, ExtrinsicIndex


U32_MAX: int = 2**32 - 1


@dataclass(frozen=True)
class ExtrinsicPosition:
    """Position of one call inside the block sequence (an ExecutionContext)."""
    block_number: BlockNumber
    extrinsic_index: ExtrinsicIndex


class BlockContext:
    """Sequential block/extrinsic counter for the host executor."""

    def __init__(self, block_number: int = 1):
        if block_number < 0:
            raise ValueError(f"block_number must be non-negative, got {block_number}")
        self._block_number = block_number
        self._next_index = 0

    @property
    def block_number(self) -> int:
        return self._block_number

    @property
    def extrinsics_in_block(self) -> int:
        return self._next_index

    def begin_extrinsic(self) -> ExtrinsicPosition:
        """Reserve the next extrinsic index in the current block."""
        if self._next_index > U32_MAX:
            raise OverflowError("extrinsic index exhausted for this block")
        position = ExtrinsicPosition(
            BlockNumber(self._block_number), ExtrinsicIndex(self._next_index),
        )
        self._next_index += 1
        return position

    def advance_block(self) -> int:
        """Close the current block and open the next one."""
        self._block_number += 1
        self._next_index = 0
        return self._block_number

    def snapshot(self) -> dict:
        return {
            "block_number": self._block_number,
            "extrinsics_in_block": self._next_index,
        }
