"""Registry Routes — counter, recorded notifications, and block advancement.

Invariants:
    - Block advancement takes runtime.lock: no mutating call straddles two blocks
    - Events are returned oldest-first, at most `limit`
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.infrastructure.database import get_db
from asset_registry.schemas.asset import RegistryStatsResponse
from asset_registry.services.registry_runtime import RegistryRuntime, get_runtime

router = APIRouter(prefix="/api/v1/registry", tags=["registry"])


@router.get("/stats", response_model=RegistryStatsResponse)
async def registry_stats(
    db: AsyncSession = Depends(get_db),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Total created, capacity and current block position."""
    total = await runtime.read_service(db).total_created()
    return RegistryStatsResponse(
        total_created=total,
        max_owned=runtime.max_owned,
        block_number=runtime.chain.block_number,
        extrinsics_in_block=runtime.chain.extrinsics_in_block,
    )


@router.get("/events")
async def list_events(
    limit: int = Query(50, ge=1, le=1_000),
    runtime: RegistryRuntime = Depends(get_runtime),
):
    """Notifications recorded since startup."""
    return {
        "events": [event.to_dict() for event in runtime.events.recent(limit)],
        "pagination": {"limit": limit},
    }


@router.post("/blocks")
async def advance_block(runtime: RegistryRuntime = Depends(get_runtime)):
    """Close the current block and open the next one."""
    async with runtime.lock:
        block_number = runtime.advance_block()
    return {"block_number": block_number}
