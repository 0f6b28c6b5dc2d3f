"""Ownership Enforcement — tests for the pure create/transfer planners.

Tests cover:
    - plan_create error order: duplicate -> overflow -> capacity
    - plan_create never mutates the stored index
    - plan_transfer error order: not found -> not owner -> self -> index -> capacity
    - plan_transfer builds swap-removed sender and pushed recipient indexes
"""

from asset_registry.core.asset import Asset
from asset_registry.core.counter import COUNTER_MAX
from asset_registry.core.domain_types import AccountId, Attribute, Identity
from asset_registry.core.enforce_ownership import (
    CreatePlan, TransferPlan, plan_create, plan_transfer,
)
from asset_registry.core.errors import (
    AssetNotFoundError, CapacityExceededError, CounterOverflowError,
    DuplicateIdentityError, NotOwnerError, SelfTransferError,
)
from asset_registry.core.owner_index import OwnedIdentities


ALICE = AccountId("alice")
BOB = AccountId("bob")
ID1 = Identity(b"\x01")
ID2 = Identity(b"\x02")
ID3 = Identity(b"\x03")


def _create(**overrides):
    args = dict(
        caller=ALICE, identity=ID1, attribute=Attribute.B, created_at=6_000,
        identity_exists=False, current_total=0,
        owner_index=OwnedIdentities(capacity=2),
    )
    args.update(overrides)
    return plan_create(**args)


def _owned(owner: AccountId, identity: Identity = ID1) -> Asset:
    return Asset(
        identity=identity, price=0, attribute=Attribute.B,
        owner=owner, created_at=6_000,
    )


# ─── plan_create ─────────────────────────────────────────────────

def test_plan_create_builds_asset_index_and_counter():
    plan = _create(current_total=4)
    assert isinstance(plan, CreatePlan)
    assert plan.asset.owner == ALICE
    assert plan.asset.price == 0
    assert plan.asset.attribute is Attribute.B
    assert plan.asset.created_at == 6_000
    assert plan.owner_index.members == [ID1]
    assert plan.next_total == 5


def test_plan_create_does_not_mutate_stored_index():
    stored = OwnedIdentities(capacity=2, members=[ID2])
    _create(owner_index=stored)
    assert stored.members == [ID2]


def test_plan_create_duplicate_wins_over_everything():
    full = OwnedIdentities(capacity=1, members=[ID2])
    result = _create(identity_exists=True, current_total=COUNTER_MAX, owner_index=full)
    assert isinstance(result, DuplicateIdentityError)
    assert result.context.identity == ID1.hex()


def test_plan_create_overflow_before_capacity():
    full = OwnedIdentities(capacity=1, members=[ID2])
    result = _create(current_total=COUNTER_MAX, owner_index=full)
    assert isinstance(result, CounterOverflowError)
    assert result.context.caller == ALICE


def test_plan_create_capacity_exceeded():
    full = OwnedIdentities(capacity=2, members=[ID2, ID3])
    result = _create(owner_index=full)
    assert isinstance(result, CapacityExceededError)
    assert result.capacity == 2
    assert full.members == [ID2, ID3]


# ─── plan_transfer ───────────────────────────────────────────────

def _transfer(**overrides):
    args = dict(
        caller=ALICE, recipient=BOB, identity=ID1, asset=_owned(ALICE),
        sender_index=OwnedIdentities(capacity=2, members=[ID1, ID2]),
        recipient_index=OwnedIdentities(capacity=2),
    )
    args.update(overrides)
    return plan_transfer(**args)


def test_plan_transfer_moves_identity():
    sender = OwnedIdentities(capacity=2, members=[ID1, ID2])
    plan = _transfer(sender_index=sender)
    assert isinstance(plan, TransferPlan)
    assert plan.asset.owner == BOB
    assert plan.sender_index.members == [ID2]
    assert plan.recipient_index.members == [ID1]
    assert sender.members == [ID1, ID2]


def test_plan_transfer_missing_asset():
    assert isinstance(_transfer(asset=None), AssetNotFoundError)


def test_plan_transfer_not_owner():
    result = _transfer(caller=BOB, recipient=AccountId("carol"))
    assert isinstance(result, NotOwnerError)


def test_plan_transfer_not_owner_checked_before_self_transfer():
    result = _transfer(caller=BOB, recipient=BOB)
    assert isinstance(result, NotOwnerError)


def test_plan_transfer_self_transfer():
    assert isinstance(_transfer(recipient=ALICE), SelfTransferError)


def test_plan_transfer_identity_missing_from_sender_index():
    result = _transfer(sender_index=OwnedIdentities(capacity=2, members=[ID2]))
    assert isinstance(result, AssetNotFoundError)


def test_plan_transfer_recipient_at_capacity():
    full = OwnedIdentities(capacity=2, members=[ID2, ID3])
    result = _transfer(
        sender_index=OwnedIdentities(capacity=2, members=[ID1]),
        recipient_index=full,
    )
    assert isinstance(result, CapacityExceededError)
    assert result.account == BOB
    assert full.members == [ID2, ID3]
