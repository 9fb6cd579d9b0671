"""Meal retrieval service bridging TheMealDB to domain models."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from whisked.adapters.mealdb_client import MealDbClient
from whisked.domain.meals import MealCategory, MealDetail, MealSummary
from whisked.services.mapping import (
    map_categories,
    map_error,
    map_meal_detail,
    map_meal_summaries,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable

_T = TypeVar("_T")

_logger = logging.getLogger(__name__)


@dataclass
class MealService:
    """Fetches meals and categories and returns domain objects."""

    client: MealDbClient
    debug: bool = False

    async def fetch_categories(self) -> list[MealCategory]:
        """Return all categories."""
        raws = await self._call(self.client.get_category_list(), action="categories")
        return map_categories(raws)

    async def fetch_meals_by_category(self, category: str) -> list[MealSummary]:
        """Return meal summaries for a category."""
        raws = await self._call(
            self.client.get_meals(category), action=f"meals:{category}"
        )
        return map_meal_summaries(raws)

    async def fetch_meal_detail(self, meal_id: str) -> MealDetail:
        """Return the full meal for an id."""
        raw = await self._call(
            self.client.get_meal_detail(meal_id), action=f"detail:{meal_id}"
        )
        return map_meal_detail(raw)

    async def search_meals(self, name: str) -> list[MealDetail]:
        """Return full meals whose name matches."""
        raws = await self._call(self.client.search_meals(name), action=f"search:{name}")
        return [map_meal_detail(raw) for raw in raws]

    async def _call(self, call: "Awaitable[_T]", *, action: str) -> _T:
        """Await a transport call, translating failures to domain errors."""
        try:
            return await call
        except asyncio.CancelledError:
            _logger.debug("Meal %s cancelled", action)
            raise
        except Exception as exc:
            error = map_error(exc)
            if self.debug and not error.is_silent:
                _logger.warning("Meal %s failed: %r", action, error)
            if error is exc:
                raise
            raise error from exc
