"""Ownership Enforcement — pure precondition checks for create and transfer.

Invariants:
    - Validators are PURE: they return an error instance or a plan, never mutate inputs
    - Transfer checks run in a fixed order; first failure wins:
      NotFound (registry) -> NotOwner -> SelfTransfer -> NotFound (index) -> CapacityExceeded
    - A returned plan already satisfies every invariant; the shell only persists it

Design Decisions:
    - Plans carry working copies of the owner indexes: the shell's stored objects
      are untouched until commit, so a rejected call leaves nothing behind
    - Recipient capacity is enforced on transfer exactly like on create
"""

from dataclasses import dataclass

from asset_registry.core.asset import Asset
from asset_registry.core.counter import next_counter
from asset_registry.core.domain_types import AccountId, Attribute, Identity
from asset_registry.core.errors import (
    AssetNotFoundError,
    CapacityExceededError,
    CounterOverflowError,
    DuplicateIdentityError,
    ErrorContext,
    NotOwnerError,
    RegistryError,
    SelfTransferError,
)
from asset_registry.core.owner_index import OwnedIdentities


@dataclass(frozen=True)
class CreatePlan:
    """Everything create() commits in one batch."""
    asset: Asset
    owner_index: OwnedIdentities
    next_total: int


@dataclass(frozen=True)
class TransferPlan:
    """Everything transfer() commits in one batch."""
    asset: Asset
    sender_index: OwnedIdentities
    recipient_index: OwnedIdentities


def plan_create(
    caller: AccountId,
    identity: Identity,
    attribute: Attribute,
    created_at: int,
    identity_exists: bool,
    current_total: int,
    owner_index: OwnedIdentities,
) -> CreatePlan | RegistryError:
    """Validate a creation and build the commit plan."""
    ctx = ErrorContext(caller=caller, identity=identity.hex())
    if identity_exists:
        return DuplicateIdentityError(identity, ctx)

    next_total = next_counter(current_total)
    if isinstance(next_total, CounterOverflowError):
        next_total.context = ctx
        return next_total

    updated = owner_index.copy()
    if not updated.try_push(identity):
        return CapacityExceededError(caller, updated.capacity, ctx)

    asset = Asset(
        identity=identity, price=0, attribute=attribute,
        owner=caller, created_at=created_at,
    )
    return CreatePlan(asset=asset, owner_index=updated, next_total=next_total)


def plan_transfer(
    caller: AccountId,
    recipient: AccountId,
    identity: Identity,
    asset: Asset | None,
    sender_index: OwnedIdentities,
    recipient_index: OwnedIdentities,
) -> TransferPlan | RegistryError:
    """Validate a transfer and build the commit plan."""
    ctx = ErrorContext(caller=caller, identity=identity.hex())
    if asset is None:
        return AssetNotFoundError(identity, ctx)
    if asset.owner != caller:
        return NotOwnerError(caller, ctx)
    if caller == recipient:
        return SelfTransferError(ctx)

    sender = sender_index.copy()
    if not sender.swap_remove(identity):
        return AssetNotFoundError(identity, ctx)

    receiver = recipient_index.copy()
    if not receiver.try_push(identity):
        return CapacityExceededError(recipient, receiver.capacity, ctx)

    return TransferPlan(
        asset=asset.with_owner(recipient),
        sender_index=sender,
        recipient_index=receiver,
    )
