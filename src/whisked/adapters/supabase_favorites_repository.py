"""Supabase-backed favorites repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from whisked.domain.meals import FavoriteRecord
from whisked.services.favorites import FavoritesRepository

_TABLE = "favorites"


@dataclass
class SupabaseFavoritesRepository(FavoritesRepository):
    """Supabase implementation for favorite meal ids.

    ``meal_id`` is the table's primary key, so inserts cannot duplicate.
    """

    client: Client

    def insert_if_absent(self, meal_id: str, created_at: datetime) -> bool:
        """Insert a favorite row unless one exists for the meal id."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                {"meal_id": meal_id, "created_at": created_at.isoformat()},
                on_conflict="meal_id",
                ignore_duplicates=True,
            )
            .execute()
        )
        return bool(response.data)

    def delete(self, meal_id: str) -> bool:
        """Delete the favorite row for a meal id."""
        response = self.client.table(_TABLE).delete().eq("meal_id", meal_id).execute()
        return bool(response.data)

    def exists(self, meal_id: str) -> bool:
        """Return whether a favorite row exists."""
        response = (
            self.client.table(_TABLE)
            .select("meal_id")
            .eq("meal_id", meal_id)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def list_all(self) -> list[FavoriteRecord]:
        """Return every favorite, oldest first."""
        response = (
            self.client.table(_TABLE)
            .select("meal_id, created_at")
            .order("created_at")
            .order("meal_id")
            .execute()
        )
        return [_parse_favorite(row) for row in response.data or []]

    def count(self) -> int:
        """Return the number of favorite rows."""
        response = (
            self.client.table(_TABLE).select("meal_id", count="exact").execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def delete_all(self) -> None:
        """Delete every favorite row."""
        self.client.table(_TABLE).delete().not_.is_("meal_id", "null").execute()


def _parse_favorite(row: dict[str, object]) -> FavoriteRecord:
    """Parse a favorites row into a domain record."""
    return FavoriteRecord(
        meal_id=str(row["meal_id"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
