"""Ingredient records and the fixed-width ingredient slot codec."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INGREDIENT_SLOTS = 20

IngredientSlot = tuple[str | None, str | None]

_EMPTY_SLOT: IngredientSlot = (None, None)


@dataclass(frozen=True)
class Ingredient:
    """A single ingredient line of a recipe."""

    name: str
    measure: str

    @property
    def id(self) -> str:
        """Key built from name and measure; not guaranteed unique."""
        return f"{self.name}-{self.measure}"

    @property
    def display_text(self) -> str:
        """Human-readable line, measure first."""
        return f"{self.measure} {self.name}"


def unflatten(slots: Iterable[IngredientSlot]) -> list[Ingredient]:
    """Compact positional (name, measure) slots into an ingredient list.

    A slot is kept only when both values are non-empty after trimming.
    Missing values count as empty. Slot order is preserved.
    """
    ingredients: list[Ingredient] = []
    for name, measure in slots:
        cleaned_name = (name or "").strip()
        cleaned_measure = (measure or "").strip()
        if cleaned_name and cleaned_measure:
            ingredients.append(Ingredient(name=cleaned_name, measure=cleaned_measure))
    return ingredients


def flatten(ingredients: Sequence[Ingredient]) -> tuple[IngredientSlot, ...]:
    """Spread an ingredient list over exactly ``INGREDIENT_SLOTS`` slots.

    Entries past the last slot are dropped. Values are written as-is.
    """
    filled = [
        (ingredient.name, ingredient.measure)
        for ingredient in ingredients[:INGREDIENT_SLOTS]
    ]
    padding = [_EMPTY_SLOT] * (INGREDIENT_SLOTS - len(filled))
    return tuple(filled + padding)
