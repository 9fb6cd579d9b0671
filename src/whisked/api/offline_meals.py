"""Offline meal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from whisked.domain.meals import OfflineMeal

if TYPE_CHECKING:
    from whisked.containers import AppContainer

router = APIRouter(prefix="/offline-meals", tags=["offline"])


@router.get("")
async def list_offline_meals(request: Request) -> list[OfflineMeal]:
    """Return saved meals, newest first."""
    container: AppContainer = request.app.state.container
    return await container.offline_meal_service.fetch_all()


@router.get("/count")
async def count_offline_meals(request: Request) -> dict[str, int]:
    container: AppContainer = request.app.state.container
    return {"count": await container.offline_meal_service.count()}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_offline_meals(request: Request) -> None:
    container: AppContainer = request.app.state.container
    await container.offline_meal_service.clear_all()


@router.get("/{meal_id}")
async def get_offline_meal(meal_id: str, request: Request) -> OfflineMeal:
    """Return a saved meal."""
    container: AppContainer = request.app.state.container
    saved = await container.offline_meal_service.fetch(meal_id)
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return saved


@router.put("/{meal_id}")
async def save_offline_meal(meal_id: str, request: Request) -> OfflineMeal:
    """Fetch a meal from TheMealDB and keep a copy for offline use."""
    container: AppContainer = request.app.state.container
    meal = await container.meal_service.fetch_meal_detail(meal_id)
    return await container.offline_meal_service.save(meal)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_offline_meal(meal_id: str, request: Request) -> None:
    container: AppContainer = request.app.state.container
    await container.offline_meal_service.delete(meal_id)
