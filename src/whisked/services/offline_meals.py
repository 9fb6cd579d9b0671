"""Offline copies of saved meals."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from whisked.adapters.mealdb_models import RawMealDetail
from whisked.domain.meals import MealDetail, OfflineMeal
from whisked.services.mapping import map_meal_detail, to_raw_meal_detail
from whisked.services.storage import KeyedLocks, call_repository


@dataclass(frozen=True)
class OfflineMealRow:
    """A stored meal in TheMealDB shape with its save time."""

    meal: RawMealDetail
    saved_at: datetime


class OfflineMealRepository(Protocol):
    """Persistence interface for offline meals."""

    def upsert(self, meal: RawMealDetail, saved_at: datetime) -> None:
        """Store a meal, replacing any previous copy."""

    def delete(self, meal_id: str) -> None:
        """Remove a stored meal if present."""

    def get(self, meal_id: str) -> OfflineMealRow | None:
        """Return a stored meal by id, if present."""

    def list_all(self) -> list[OfflineMealRow]:
        """Return every stored meal, newest first."""

    def count(self) -> int:
        """Return the number of stored meals."""

    def delete_all(self) -> None:
        """Remove every stored meal."""


@dataclass
class OfflineMealService:
    """Saves full meals so they can be read without the network.

    Meals are stored in the flat twenty-slot TheMealDB shape, so at most
    twenty ingredients survive a save.
    """

    repository: OfflineMealRepository
    locks: KeyedLocks = field(default_factory=KeyedLocks)

    async def save(self, meal: MealDetail) -> OfflineMeal:
        """Store a meal and return the saved copy."""
        raw = to_raw_meal_detail(meal)
        saved_at = datetime.now(tz=UTC)
        async with self.locks.hold(meal.id):
            await call_repository("save", meal.id, self.repository.upsert, raw, saved_at)
        return OfflineMeal(meal=map_meal_detail(raw), saved_at=saved_at)

    async def delete(self, meal_id: str) -> None:
        async with self.locks.hold(meal_id):
            await call_repository("delete", meal_id, self.repository.delete, meal_id)

    async def fetch(self, meal_id: str) -> OfflineMeal | None:
        """Return a stored meal, if present."""
        row = await call_repository("fetch", meal_id, self.repository.get, meal_id)
        return _to_offline_meal(row) if row is not None else None

    async def fetch_all(self) -> list[OfflineMeal]:
        """Return stored meals, most recently saved first."""
        rows = await call_repository("fetch_all", None, self.repository.list_all)
        rows = sorted(rows, key=lambda row: row.saved_at, reverse=True)
        return [_to_offline_meal(row) for row in rows]

    async def count(self) -> int:
        return await call_repository("count", None, self.repository.count)

    async def clear_all(self) -> None:
        await call_repository("clear_all", None, self.repository.delete_all)


def _to_offline_meal(row: OfflineMealRow) -> OfflineMeal:
    return OfflineMeal(meal=map_meal_detail(row.meal), saved_at=row.saved_at)
