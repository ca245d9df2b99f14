"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from healthy_coaching.api.schemas import FoodIn, FoodOut
from healthy_coaching.catalog_seed import seed_catalog

if TYPE_CHECKING:
    from healthy_coaching.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.put("/foods/{food_id}", dependencies=[Depends(require_admin)])
async def upsert_food(food_id: str, payload: FoodIn, request: Request) -> FoodOut:
    """Create or replace a catalog food."""
    container: AppContainer = request.app.state.container
    saved = container.catalog_service.upsert_food(payload.to_food(food_id))
    return FoodOut.from_food(saved)


@router.post("/catalog/seed", dependencies=[Depends(require_admin)])
async def seed(request: Request) -> dict[str, int]:
    """Load the built-in Indonesian food catalog."""
    container: AppContainer = request.app.state.container
    return {"seeded": seed_catalog(container.catalog_service)}


@router.post("/catalog/invalidate", dependencies=[Depends(require_admin)])
async def invalidate_catalog(request: Request) -> dict[str, str]:
    """Drop cached catalog reads."""
    container: AppContainer = request.app.state.container
    container.catalog_service.invalidate()
    return {"status": "ok"}
