"""Asset Routes — create, transfer and look up registry entries.

Invariants:
    - Mutating routes hold runtime.lock for the whole read-validate-commit cycle
    - Routes never contain registry rules (delegate to RegistryService)
    - RegistryError propagates to the global handler (rollback happens in get_db)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.api.routes.caller import get_caller, parse_identity
from asset_registry.core.domain_types import AccountId
from asset_registry.infrastructure.database import get_db
from asset_registry.schemas.asset import AssetResponse, TransferRequest
from asset_registry.services.registry_runtime import RegistryRuntime, get_runtime

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/assets", tags=["assets"])


@router.post(
    "", response_model=AssetResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_asset(
    caller: AccountId = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Create a new asset owned by the caller."""
    async with runtime.lock:
        service = runtime.open_service(db)
        asset = await service.create(caller)
    return AssetResponse.from_domain(asset)


@router.post("/{identity_hex}/transfer", response_model=AssetResponse)
async def transfer_asset(
    identity_hex: str,
    body: TransferRequest,
    caller: AccountId = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Transfer an asset owned by the caller to another account."""
    identity = parse_identity(identity_hex)
    async with runtime.lock:
        service = runtime.open_service(db)
        asset = await service.transfer(caller, AccountId(body.to), identity)
    return AssetResponse.from_domain(asset)


@router.get("/{identity_hex}", response_model=AssetResponse)
async def get_asset(
    identity_hex: str,
    db: AsyncSession = Depends(get_db),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Look up one asset by its hex identity."""
    identity = parse_identity(identity_hex)
    asset = await runtime.read_service(db).get_asset(identity)
    return AssetResponse.from_domain(asset)
