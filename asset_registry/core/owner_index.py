"""Owner Index — capacity-bounded collection of identities held by one account.

Invariants:
    - try_push never grows the collection past capacity (refuses instead of dropping)
    - Membership is meaningful, order is not (swap_remove may reorder)
    - An identity appears at most once per index

Design Decisions:
    - Dataclass over raw list: capacity travels with the members so no caller
      can append without the bound check
    - try_push returns bool rather than raising: callers map False to
      CapacityExceededError with their own context
    - copy() before mutation: the service mutates working copies and only the
      commit makes them visible
"""

from dataclasses import dataclass, field

from asset_registry.core.domain_types import Identity


@dataclass
class OwnedIdentities:
    """Bounded per-account identity collection — pure dataclass, no IO."""

    capacity: int
    members: list[Identity] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        # Loading above capacity is allowed (max_owned lowered after the fact):
        # the index then only shrinks until it is back under the bound.

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, identity: object) -> bool:
        return identity in self.members

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.capacity

    @property
    def remaining(self) -> int:
        return max(self.capacity - len(self.members), 0)

    def try_push(self, identity: Identity) -> bool:
        """Append identity unless at capacity. Returns False when full."""
        if self.is_full:
            return False
        self.members.append(identity)
        return True

    def swap_remove(self, identity: Identity) -> bool:
        """Unordered removal: last member fills the vacated slot.

        Returns False if identity is not a member.
        """
        try:
            position = self.members.index(identity)
        except ValueError:
            return False
        last = self.members.pop()
        if position < len(self.members):
            self.members[position] = last
        return True

    def copy(self) -> "OwnedIdentities":
        return OwnedIdentities(capacity=self.capacity, members=list(self.members))
