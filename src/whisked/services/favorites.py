"""Favorite meals store."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from whisked.domain.meals import FavoriteRecord
from whisked.services.storage import KeyedLocks, call_repository


class FavoritesRepository(Protocol):
    """Persistence interface for favorite meal ids."""

    def insert_if_absent(self, meal_id: str, created_at: datetime) -> bool:
        """Insert a favorite unless present; return whether a row was added."""

    def delete(self, meal_id: str) -> bool:
        """Delete a favorite if present; return whether a row was removed."""

    def exists(self, meal_id: str) -> bool:
        """Return whether the meal id is a favorite."""

    def list_all(self) -> list[FavoriteRecord]:
        """Return every favorite, oldest first."""

    def count(self) -> int:
        """Return the number of favorites."""

    def delete_all(self) -> None:
        """Remove every favorite."""


@dataclass
class FavoritesService:
    """Application service for favoriting meals.

    Calls touching a single meal id are serialized per id, so two racing
    toggles of the same meal never both insert.
    """

    repository: FavoritesRepository
    locks: KeyedLocks = field(default_factory=KeyedLocks)

    async def add(self, meal_id: str) -> None:
        """Mark a meal as favorite; no-op when it already is."""
        async with self.locks.hold(meal_id):
            await call_repository(
                "add",
                meal_id,
                self.repository.insert_if_absent,
                meal_id,
                datetime.now(tz=UTC),
            )

    async def remove(self, meal_id: str) -> None:
        """Unmark a meal; no-op when it is not a favorite."""
        async with self.locks.hold(meal_id):
            await call_repository("remove", meal_id, self.repository.delete, meal_id)

    async def toggle(self, meal_id: str) -> bool:
        """Flip the favorite state and return the new state."""
        async with self.locks.hold(meal_id):
            present = await call_repository(
                "toggle", meal_id, self.repository.exists, meal_id
            )
            if present:
                await call_repository(
                    "toggle", meal_id, self.repository.delete, meal_id
                )
                return False
            await call_repository(
                "toggle",
                meal_id,
                self.repository.insert_if_absent,
                meal_id,
                datetime.now(tz=UTC),
            )
            return True

    async def is_favorite(self, meal_id: str) -> bool:
        return await call_repository(
            "is_favorite", meal_id, self.repository.exists, meal_id
        )

    async def fetch_all(self) -> list[FavoriteRecord]:
        """Return favorites in the order they were added."""
        records = await call_repository("fetch_all", None, self.repository.list_all)
        return sorted(records, key=lambda record: (record.created_at, record.meal_id))

    async def fetch_ids(self) -> set[str]:
        records = await call_repository("fetch_ids", None, self.repository.list_all)
        return {record.meal_id for record in records}

    async def count(self) -> int:
        return await call_repository("count", None, self.repository.count)

    async def clear_all(self) -> None:
        """Remove every favorite."""
        await call_repository("clear_all", None, self.repository.delete_all)
