"""Registry Events — notifications emitted after a successful commit.

Invariants:
    - Events are constructed only after the commit returned
    - to_dict() is JSON-safe (identity as hex)
"""

from dataclasses import dataclass

from asset_registry.core.domain_types import AccountId, EventType, Identity


@dataclass(frozen=True)
class Created:
    identity: Identity
    owner: AccountId

    def to_dict(self) -> dict:
        return {
            "type": EventType.CREATED.value,
            "identity": self.identity.hex(),
            "owner": self.owner,
        }


@dataclass(frozen=True)
class Transferred:
    sender: AccountId
    recipient: AccountId
    identity: Identity

    def to_dict(self) -> dict:
        return {
            "type": EventType.TRANSFERRED.value,
            "from": self.sender,
            "to": self.recipient,
            "identity": self.identity.hex(),
        }


RegistryEvent = Created | Transferred
