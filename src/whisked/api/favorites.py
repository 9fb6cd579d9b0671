"""Favorite meal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from whisked.domain.meals import FavoriteRecord

if TYPE_CHECKING:
    from whisked.containers import AppContainer

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(request: Request) -> list[FavoriteRecord]:
    """Return favorites in the order they were added."""
    container: AppContainer = request.app.state.container
    return await container.favorites_service.fetch_all()


@router.get("/count")
async def count_favorites(request: Request) -> dict[str, int]:
    container: AppContainer = request.app.state.container
    return {"count": await container.favorites_service.count()}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_favorites(request: Request) -> None:
    """Remove every favorite."""
    container: AppContainer = request.app.state.container
    await container.favorites_service.clear_all()


@router.get("/{meal_id}")
async def favorite_status(meal_id: str, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    favorite = await container.favorites_service.is_favorite(meal_id)
    return {"meal_id": meal_id, "favorite": favorite}


@router.put("/{meal_id}")
async def add_favorite(meal_id: str, request: Request) -> dict[str, object]:
    """Mark a meal as favorite."""
    container: AppContainer = request.app.state.container
    await container.favorites_service.add(meal_id)
    return {"meal_id": meal_id, "favorite": True}


@router.delete("/{meal_id}")
async def remove_favorite(meal_id: str, request: Request) -> dict[str, object]:
    """Unmark a favorite meal."""
    container: AppContainer = request.app.state.container
    await container.favorites_service.remove(meal_id)
    return {"meal_id": meal_id, "favorite": False}


@router.post("/{meal_id}/toggle")
async def toggle_favorite(meal_id: str, request: Request) -> dict[str, object]:
    """Flip the favorite state of a meal."""
    container: AppContainer = request.app.state.container
    favorite = await container.favorites_service.toggle(meal_id)
    return {"meal_id": meal_id, "favorite": favorite}
