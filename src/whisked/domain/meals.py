"""Meal domain models."""

from dataclasses import dataclass, field
from datetime import datetime

from whisked.domain.ingredients import Ingredient


@dataclass(frozen=True)
class MealCategory:
    """A browsable meal category."""

    id: str
    name: str
    description: str
    thumbnail_url: str


@dataclass(frozen=True)
class MealSummary:
    """Meal as listed inside a category."""

    id: str
    name: str
    thumbnail_url: str


@dataclass(frozen=True)
class MealDetail:
    """Full meal with instructions and compacted ingredients."""

    id: str
    name: str
    instructions: str
    thumbnail_url: str
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FavoriteRecord:
    """A favorited meal id and when it was favorited."""

    meal_id: str
    created_at: datetime


@dataclass(frozen=True)
class OfflineMeal:
    """A meal saved locally for offline viewing."""

    meal: MealDetail
    saved_at: datetime
