"""Pydantic models for TheMealDB JSON payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from whisked.domain.ingredients import INGREDIENT_SLOTS, IngredientSlot, unflatten


def _ingredient_key(position: int) -> str:
    return f"strIngredient{position}"


def _measure_key(position: int) -> str:
    return f"strMeasure{position}"


class RawCategory(BaseModel):
    """Category entry from ``categories.php``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_category: str = Field(alias="idCategory")
    str_category: str = Field(alias="strCategory")
    str_category_description: str = Field(default="", alias="strCategoryDescription")
    str_category_thumb: str = Field(default="", alias="strCategoryThumb")


class RawMealSummary(BaseModel):
    """Meal entry from ``filter.php``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_meal: str = Field(alias="idMeal")
    str_meal: str = Field(alias="strMeal")
    str_meal_thumb: str = Field(default="", alias="strMealThumb")


class RawMealDetail(BaseModel):
    """Meal entry from ``lookup.php`` and ``search.php``.

    The API spreads ingredients over twenty numbered ``strIngredientN`` /
    ``strMeasureN`` keys. They are held here as ``slots``: a tuple of exactly
    twenty ``(ingredient, measure)`` pairs where position N-1 holds key N.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_meal: str = Field(alias="idMeal")
    str_meal: str = Field(alias="strMeal")
    str_instructions: str = Field(default="", alias="strInstructions")
    str_meal_thumb: str = Field(default="", alias="strMealThumb")
    slots: tuple[IngredientSlot, ...]

    @model_validator(mode="before")
    @classmethod
    def _collect_slots(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "slots" in data:
            return data
        collected = dict(data)
        collected["slots"] = tuple(
            (data.get(_ingredient_key(position)), data.get(_measure_key(position)))
            for position in range(1, INGREDIENT_SLOTS + 1)
        )
        return collected

    @field_validator("str_instructions", "str_meal_thumb", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("slots")
    @classmethod
    def _exact_slot_count(
        cls, value: tuple[IngredientSlot, ...]
    ) -> tuple[IngredientSlot, ...]:
        if len(value) != INGREDIENT_SLOTS:
            raise ValueError(f"expected {INGREDIENT_SLOTS} ingredient slots")
        return value

    @property
    def ingredient_pairs(self) -> list[tuple[str, str]]:
        """Non-empty (name, measure) pairs in slot order."""
        return [(item.name, item.measure) for item in unflatten(self.slots)]

    def to_payload(self) -> dict[str, str | None]:
        """Serialize back to the flat TheMealDB shape."""
        payload: dict[str, str | None] = {
            "idMeal": self.id_meal,
            "strMeal": self.str_meal,
            "strInstructions": self.str_instructions,
            "strMealThumb": self.str_meal_thumb,
        }
        for position, (ingredient, measure) in enumerate(self.slots, start=1):
            payload[_ingredient_key(position)] = ingredient
            payload[_measure_key(position)] = measure
        return payload


class CategoriesResponse(BaseModel):
    """Envelope of ``categories.php``."""

    categories: list[RawCategory] | None = None


class MealsResponse(BaseModel):
    """Envelope of ``filter.php``."""

    meals: list[RawMealSummary] | None = None


class MealDetailResponse(BaseModel):
    """Envelope of ``lookup.php`` and ``search.php``."""

    meals: list[RawMealDetail] | None = None
