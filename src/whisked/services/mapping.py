"""Translation from TheMealDB payloads and failures into domain types."""

from collections.abc import Iterable

import httpx

from whisked.adapters.mealdb_client import (
    TransportError,
    TransportErrorKind,
    classify_httpx_error,
)
from whisked.adapters.mealdb_models import RawCategory, RawMealDetail, RawMealSummary
from whisked.domain.errors import MealServiceError, MealServiceErrorKind
from whisked.domain.ingredients import Ingredient, flatten
from whisked.domain.meals import MealCategory, MealDetail, MealSummary

_DIRECT_KINDS = {
    TransportErrorKind.NO_CONNECTION: MealServiceErrorKind.NO_CONNECTION,
    TransportErrorKind.TIMEOUT: MealServiceErrorKind.TIMEOUT,
    TransportErrorKind.DECODING_ERROR: MealServiceErrorKind.INVALID_RESPONSE,
    TransportErrorKind.ENCODING_ERROR: MealServiceErrorKind.INVALID_RESPONSE,
    TransportErrorKind.NO_DATA: MealServiceErrorKind.INVALID_RESPONSE,
    TransportErrorKind.MEAL_NOT_FOUND: MealServiceErrorKind.MEAL_NOT_FOUND,
    TransportErrorKind.EMPTY_RESPONSE: MealServiceErrorKind.NO_MEALS_FOUND,
    TransportErrorKind.CANCELLED: MealServiceErrorKind.CANCELLED,
    TransportErrorKind.UNKNOWN: MealServiceErrorKind.UNKNOWN,
}


def map_category(raw: RawCategory) -> MealCategory:
    """Map a raw category to the domain."""
    return MealCategory(
        id=raw.id_category,
        name=raw.str_category,
        description=raw.str_category_description,
        thumbnail_url=raw.str_category_thumb,
    )


def map_categories(raws: Iterable[RawCategory]) -> list[MealCategory]:
    return [map_category(raw) for raw in raws]


def map_meal_summary(raw: RawMealSummary) -> MealSummary:
    """Map a raw meal listing entry to the domain."""
    return MealSummary(
        id=raw.id_meal,
        name=raw.str_meal,
        thumbnail_url=raw.str_meal_thumb,
    )


def map_meal_summaries(raws: Iterable[RawMealSummary]) -> list[MealSummary]:
    return [map_meal_summary(raw) for raw in raws]


def map_ingredient_pairs(pairs: Iterable[tuple[str, str]]) -> tuple[Ingredient, ...]:
    """Wrap already-compacted (name, measure) pairs as domain ingredients."""
    return tuple(Ingredient(name=name, measure=measure) for name, measure in pairs)


def map_meal_detail(raw: RawMealDetail) -> MealDetail:
    """Map a raw meal record to the domain, compacting its ingredient slots."""
    return MealDetail(
        id=raw.id_meal,
        name=raw.str_meal,
        instructions=raw.str_instructions,
        thumbnail_url=raw.str_meal_thumb,
        ingredients=map_ingredient_pairs(raw.ingredient_pairs),
    )


def to_raw_meal_detail(detail: MealDetail) -> RawMealDetail:
    """Spread a domain meal back over the twenty TheMealDB slots."""
    return RawMealDetail(
        id_meal=detail.id,
        str_meal=detail.name,
        str_instructions=detail.instructions,
        str_meal_thumb=detail.thumbnail_url,
        slots=flatten(detail.ingredients),
    )


def map_error(exc: Exception) -> MealServiceError:
    """Translate any failure raised below the service into a domain error."""
    if isinstance(exc, MealServiceError):
        return exc
    if isinstance(exc, (httpx.HTTPError, httpx.InvalidURL)):
        exc = classify_httpx_error(exc)
    if not isinstance(exc, TransportError):
        return MealServiceError.network_error(str(exc) or type(exc).__name__)

    if exc.kind is TransportErrorKind.HTTP_ERROR and exc.status_code is not None:
        return MealServiceError.server_error(exc.status_code)
    if exc.kind is TransportErrorKind.INVALID_URL:
        return MealServiceError.network_error(f"Invalid URL: {exc.detail}")
    kind = _DIRECT_KINDS.get(exc.kind)
    if kind is not None:
        return MealServiceError(kind)
    return MealServiceError.network_error(exc.detail or exc.kind.value)
