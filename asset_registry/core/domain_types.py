"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Identity wraps the raw payload bytes — never a hex string in domain logic
    - AccountId wraps the verified caller string supplied by the auth layer
    - Attribute has exactly two members, derived from identity parity

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Identity = NewType("Identity", bytes)
AccountId = NewType("AccountId", str)


# ─── Value Types ─────────────────────────────────────────────────

Moment = NewType("Moment", int)             # milliseconds from the time source
BlockNumber = NewType("BlockNumber", int)   # u64
ExtrinsicIndex = NewType("ExtrinsicIndex", int)  # u32


# ─── Enums ───────────────────────────────────────────────────────

class Attribute(str, Enum):
    """Binary classification of an asset — even leading byte is A, odd is B."""
    A = "A"
    B = "B"


class EventType(str, Enum):
    """Notifications emitted after a successful commit."""
    CREATED = "created"
    TRANSFERRED = "transferred"


def identity_from_hex(value: str) -> Identity:
    """Parse a hex-encoded identity. Raises ValueError on malformed input."""
    raw = bytes.fromhex(value)
    if not raw:
        raise ValueError("identity cannot be empty")
    return Identity(raw)
