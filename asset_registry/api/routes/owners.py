"""Owner Routes — read-only view of the per-account owner index."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.core.domain_types import AccountId
from asset_registry.infrastructure.database import get_db
from asset_registry.schemas.asset import ACCOUNT_ID_MAX_LENGTH, OwnedAssetsResponse
from asset_registry.services.registry_runtime import RegistryRuntime, get_runtime

router = APIRouter(prefix="/api/v1/owners", tags=["owners"])


@router.get("/{account}/assets", response_model=OwnedAssetsResponse)
async def list_owned_assets(
    account: str = Path(min_length=1, max_length=ACCOUNT_ID_MAX_LENGTH),
    db: AsyncSession = Depends(get_db),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Identities held by an account (empty for unknown accounts)."""
    identities = await runtime.read_service(db).assets_owned(AccountId(account))
    return OwnedAssetsResponse(
        account=account,
        identities=[identity.hex() for identity in identities],
        count=len(identities),
        capacity=runtime.max_owned,
    )
