"""Caller & Identity Extraction — request-boundary helpers shared by route modules.

Invariants:
    - X-Account-Id is the verified caller set by the upstream auth layer;
      missing or blank -> 401, never a default account
    - Over-long X-Account-Id is malformed, not anonymous -> 400 VALIDATION_ERROR
    - Identity path params must be non-empty hex -> else InvalidIdentityError (400)
"""

from fastapi import Header, HTTPException, status
from fastapi.exceptions import RequestValidationError

from asset_registry.core.domain_types import AccountId, Identity, identity_from_hex
from asset_registry.core.errors import InvalidIdentityError
from asset_registry.schemas.asset import ACCOUNT_ID_MAX_LENGTH


async def get_caller(
    x_account_id: str | None = Header(None, alias="X-Account-Id"),
) -> AccountId:
    """FastAPI dependency: verified caller identity from the auth layer."""
    caller = (x_account_id or "").strip()
    if not caller:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Account-Id header",
        )
    if len(caller) > ACCOUNT_ID_MAX_LENGTH:
        raise RequestValidationError([{
            "loc": ("header", "X-Account-Id"),
            "msg": f"X-Account-Id exceeds {ACCOUNT_ID_MAX_LENGTH} characters",
            "type": "string_too_long",
        }])
    return AccountId(caller)


def parse_identity(raw: str) -> Identity:
    """Decode a hex identity from the URL path."""
    try:
        return identity_from_hex(raw)
    except ValueError:
        raise InvalidIdentityError(raw)
