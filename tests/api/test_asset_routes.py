"""Asset Routes — HTTP contract for create, transfer and lookups.

Tests cover:
    - POST /assets creates an asset for the header caller (201)
    - Missing caller header -> 401; over-long caller header -> 400 VALIDATION_ERROR
    - Registry errors map to the structured envelope with their HTTP status
    - Transfer moves ownership visible through GET /owners/{account}/assets
    - Malformed identity -> 400 INVALID_IDENTITY; blank recipient -> 400
    - Stats, events and block advancement
"""

from asset_registry.api.routes.caller import parse_identity
from asset_registry.schemas.asset import ACCOUNT_ID_MAX_LENGTH


def _headers(account: str) -> dict:
    return {"X-Account-Id": account}


async def _create(client, account: str) -> dict:
    res = await client.post("/api/v1/assets", headers=_headers(account))
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_returns_asset(client):
    body = await _create(client, "alice")
    assert body["owner"] == "alice"
    assert body["price"] == 0
    assert body["attribute"] in ("A", "B")
    assert len(bytes.fromhex(body["identity"])) == 44


async def test_create_requires_caller_header(client):
    res = await client.post("/api/v1/assets")
    assert res.status_code == 401


async def test_create_rejects_blank_caller(client):
    res = await client.post("/api/v1/assets", headers=_headers("   "))
    assert res.status_code == 401


async def test_create_rejects_overlong_caller(client):
    res = await client.post(
        "/api/v1/assets", headers=_headers("a" * (ACCOUNT_ID_MAX_LENGTH + 1)),
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "header.X-Account-Id"
    assert str(ACCOUNT_ID_MAX_LENGTH) in error["details"][0]["message"]


async def test_caller_at_max_length_is_accepted(client):
    body = await _create(client, "a" * ACCOUNT_ID_MAX_LENGTH)
    assert len(body["owner"]) == ACCOUNT_ID_MAX_LENGTH


async def test_get_asset_by_identity(client):
    created = await _create(client, "alice")
    res = await client.get(f"/api/v1/assets/{created['identity']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_get_missing_asset_returns_404_envelope(client):
    res = await client.get("/api/v1/assets/deadbeef")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


async def test_get_malformed_identity_returns_400(client):
    res = await client.get("/api/v1/assets/not-hex")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_IDENTITY"


async def test_capacity_exceeded_returns_409(client):
    await _create(client, "alice")
    await _create(client, "alice")
    res = await client.post("/api/v1/assets", headers=_headers("alice"))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CAPACITY_EXCEEDED"


async def test_transfer_moves_asset_between_owner_indexes(client):
    created = await _create(client, "alice")

    res = await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "bob"}, headers=_headers("alice"),
    )
    assert res.status_code == 200
    assert res.json()["owner"] == "bob"

    alice = (await client.get("/api/v1/owners/alice/assets")).json()
    bob = (await client.get("/api/v1/owners/bob/assets")).json()
    assert alice["identities"] == []
    assert bob["identities"] == [created["identity"]]
    assert bob["capacity"] == 2


async def test_transfer_by_non_owner_returns_403(client):
    created = await _create(client, "alice")
    res = await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "carol"}, headers=_headers("bob"),
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "NOT_OWNER"


async def test_transfer_to_self_returns_400(client):
    created = await _create(client, "alice")
    res = await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "alice"}, headers=_headers("alice"),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_TRANSFER"


async def test_transfer_to_full_recipient_returns_409(client):
    created = await _create(client, "alice")
    await _create(client, "bob")
    await _create(client, "bob")

    res = await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "bob"}, headers=_headers("alice"),
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CAPACITY_EXCEEDED"

    alice = (await client.get("/api/v1/owners/alice/assets")).json()
    assert alice["identities"] == [created["identity"]]


async def test_transfer_blank_recipient_returns_400(client):
    created = await _create(client, "alice")
    res = await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "  "}, headers=_headers("alice"),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unknown_owner_has_empty_index(client):
    res = await client.get("/api/v1/owners/nobody/assets")
    assert res.status_code == 200
    assert res.json()["count"] == 0


async def test_stats_track_counter_and_block_position(client):
    await _create(client, "alice")
    await client.post("/api/v1/assets", headers=_headers("alice"))
    await client.post("/api/v1/assets", headers=_headers("alice"))  # rejected

    stats = (await client.get("/api/v1/registry/stats")).json()
    assert stats["total_created"] == 2
    assert stats["max_owned"] == 2
    assert stats["block_number"] == 1
    assert stats["extrinsics_in_block"] == 3


async def test_events_record_successes_only(client):
    created = await _create(client, "alice")
    await client.post(
        f"/api/v1/assets/{created['identity']}/transfer",
        json={"to": "alice"}, headers=_headers("alice"),
    )
    events = (await client.get("/api/v1/registry/events")).json()["events"]
    assert events == [
        {"type": "created", "identity": created["identity"], "owner": "alice"},
    ]


async def test_advance_block_resets_extrinsic_index(client):
    await _create(client, "alice")
    res = await client.post("/api/v1/registry/blocks")
    assert res.json() == {"block_number": 2}

    stats = (await client.get("/api/v1/registry/stats")).json()
    assert stats["block_number"] == 2
    assert stats["extrinsics_in_block"] == 0


async def test_created_at_follows_block_clock(client):
    first = await _create(client, "alice")
    await client.post("/api/v1/registry/blocks")
    second = await _create(client, "alice")
    assert second["created_at"] - first["created_at"] == 6_000


def test_parse_identity_accepts_hex():
    assert parse_identity("0a0b") == b"\x0a\x0b"
