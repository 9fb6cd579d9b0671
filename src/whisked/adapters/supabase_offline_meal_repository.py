"""Supabase-backed repository for offline meals."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from whisked.adapters.mealdb_models import RawMealDetail
from whisked.services.offline_meals import OfflineMealRepository, OfflineMealRow

_TABLE = "offline_meals"


@dataclass
class SupabaseOfflineMealRepository(OfflineMealRepository):
    """Stores meals as TheMealDB JSON payloads keyed by meal id."""

    client: Client

    def upsert(self, meal: RawMealDetail, saved_at: datetime) -> None:
        """Store a meal, replacing the previous copy."""
        self.client.table(_TABLE).upsert(
            {
                "meal_id": meal.id_meal,
                "payload": meal.to_payload(),
                "saved_at": saved_at.isoformat(),
            },
            on_conflict="meal_id",
        ).execute()

    def delete(self, meal_id: str) -> None:
        self.client.table(_TABLE).delete().eq("meal_id", meal_id).execute()

    def get(self, meal_id: str) -> OfflineMealRow | None:
        """Return a stored meal, if present."""
        response = (
            self.client.table(_TABLE)
            .select("payload, saved_at")
            .eq("meal_id", meal_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_all(self) -> list[OfflineMealRow]:
        """Return stored meals, newest first."""
        response = (
            self.client.table(_TABLE)
            .select("payload, saved_at")
            .order("saved_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count(self) -> int:
        response = (
            self.client.table(_TABLE).select("meal_id", count="exact").execute()
        )
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])

    def delete_all(self) -> None:
        self.client.table(_TABLE).delete().not_.is_("meal_id", "null").execute()


def _parse_row(row: dict[str, object]) -> OfflineMealRow:
    """Parse an offline meal row."""
    return OfflineMealRow(
        meal=RawMealDetail.model_validate(row["payload"]),
        saved_at=datetime.fromisoformat(str(row["saved_at"])),
    )
