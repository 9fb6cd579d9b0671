"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from whisked.adapters.mealdb_client import HttpxMealDbClient
from whisked.adapters.supabase_favorites_repository import SupabaseFavoritesRepository
from whisked.adapters.supabase_offline_meal_repository import (
    SupabaseOfflineMealRepository,
)
from whisked.config import Settings
from whisked.services.favorites import FavoritesService
from whisked.services.meals import MealService
from whisked.services.offline_meals import OfflineMealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    favorites_service: FavoritesService
    offline_meal_service: OfflineMealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    mealdb_client = HttpxMealDbClient.create(
        base_url=resolved_settings.mealdb_base_url,
        timeout_seconds=resolved_settings.mealdb_timeout_seconds,
    )
    meal_service = MealService(client=mealdb_client, debug=resolved_settings.debug)
    favorites_service = FavoritesService(SupabaseFavoritesRepository(supabase_client))
    offline_meal_service = OfflineMealService(
        SupabaseOfflineMealRepository(supabase_client)
    )

    async def close_resources() -> None:
        await mealdb_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_service=meal_service,
        favorites_service=favorites_service,
        offline_meal_service=offline_meal_service,
        close_resources=close_resources,
    )
