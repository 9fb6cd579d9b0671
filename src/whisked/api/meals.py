"""Meal and category endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from whisked.domain.meals import MealCategory, MealDetail, MealSummary

if TYPE_CHECKING:
    from whisked.containers import AppContainer

router = APIRouter(tags=["meals"])


@router.get("/categories")
async def list_categories(request: Request) -> list[MealCategory]:
    """Return all meal categories."""
    container: AppContainer = request.app.state.container
    return await container.meal_service.fetch_categories()


@router.get("/categories/{category}/meals")
async def list_meals(category: str, request: Request) -> list[MealSummary]:
    """Return meals in a category."""
    container: AppContainer = request.app.state.container
    return await container.meal_service.fetch_meals_by_category(category)


@router.get("/meals/search")
async def search_meals(
    request: Request, q: str = Query(min_length=1)
) -> list[MealDetail]:
    """Return meals whose name matches the query."""
    container: AppContainer = request.app.state.container
    return await container.meal_service.search_meals(q)


@router.get("/meals/{meal_id}")
async def meal_detail(meal_id: str, request: Request) -> MealDetail:
    """Return a single meal with its ingredients."""
    container: AppContainer = request.app.state.container
    return await container.meal_service.fetch_meal_detail(meal_id)
