"""TheMealDB API client."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from whisked.adapters.mealdb_models import (
    CategoriesResponse,
    MealDetailResponse,
    MealsResponse,
    RawCategory,
    RawMealDetail,
    RawMealSummary,
)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_CONNECTION_ERRORS = (
    httpx.ConnectError,
    httpx.ReadError,
    httpx.WriteError,
    httpx.RemoteProtocolError,
)


class TransportErrorKind(Enum):
    """Failure categories reported by the transport."""

    INVALID_URL = "invalid_url"
    NO_CONNECTION = "no_connection"
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    DECODING_ERROR = "decoding_error"
    ENCODING_ERROR = "encoding_error"
    NO_DATA = "no_data"
    MEAL_NOT_FOUND = "meal_not_found"
    EMPTY_RESPONSE = "empty_response"
    CANCELLED = "cancelled"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


class TransportError(Exception):
    """Raised by a MealDB client when a call cannot produce a result."""

    def __init__(
        self,
        kind: TransportErrorKind,
        *,
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
        suffix = f" ({status_code})" if status_code is not None else ""
        super().__init__(f"{kind.value}{suffix}: {detail}" if detail else kind.value)


class MealDbClient(Protocol):
    """Interface for TheMealDB API interactions."""

    async def get_category_list(self) -> list[RawCategory]:
        """Return all meal categories."""

    async def get_meals(self, category: str) -> list[RawMealSummary]:
        """Return meal summaries in a category."""

    async def get_meal_detail(self, meal_id: str) -> RawMealDetail:
        """Return the full record for a meal id."""

    async def search_meals(self, name: str) -> list[RawMealDetail]:
        """Return full records of meals whose name matches."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(cls, base_url: str, timeout_seconds: float = 30.0) -> "HttpxMealDbClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_category_list(self) -> list[RawCategory]:
        """Fetch every category."""
        payload = await self._get("categories.php")
        response = _decode(CategoriesResponse, payload)
        if response.categories is None:
            raise TransportError(TransportErrorKind.EMPTY_RESPONSE)
        return response.categories

    async def get_meals(self, category: str) -> list[RawMealSummary]:
        """Fetch meals filtered by category name."""
        payload = await self._get("filter.php", {"c": category})
        response = _decode(MealsResponse, payload)
        if response.meals is None:
            raise TransportError(TransportErrorKind.EMPTY_RESPONSE, detail=category)
        return response.meals

    async def get_meal_detail(self, meal_id: str) -> RawMealDetail:
        """Look up a single meal by id."""
        payload = await self._get("lookup.php", {"i": meal_id})
        response = _decode(MealDetailResponse, payload)
        if not response.meals:
            raise TransportError(TransportErrorKind.MEAL_NOT_FOUND, detail=meal_id)
        return response.meals[0]

    async def search_meals(self, name: str) -> list[RawMealDetail]:
        """Search meals by name."""
        payload = await self._get("search.php", {"s": name})
        response = _decode(MealDetailResponse, payload)
        if response.meals is None:
            raise TransportError(TransportErrorKind.EMPTY_RESPONSE, detail=name)
        return response.meals

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str, params: dict[str, str] | None = None) -> object:
        url = f"{self.base_url.rstrip('/')}/{path}"
        try:
            response = await self.http_client.get(
                url, params=params, timeout=self.timeout_seconds
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise classify_httpx_error(exc) from exc
        if not response.content:
            raise TransportError(TransportErrorKind.NO_DATA, detail=path)
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                TransportErrorKind.DECODING_ERROR, detail=str(exc)
            ) from exc


def classify_httpx_error(exc: Exception) -> TransportError:
    """Translate an httpx exception into a transport error."""
    if isinstance(exc, httpx.HTTPStatusError):
        return TransportError(
            TransportErrorKind.HTTP_ERROR,
            status_code=exc.response.status_code,
            detail=str(exc.request.url),
        )
    if isinstance(exc, httpx.TimeoutException):
        return TransportError(TransportErrorKind.TIMEOUT)
    if isinstance(exc, _CONNECTION_ERRORS):
        return TransportError(TransportErrorKind.NO_CONNECTION, detail=str(exc))
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return TransportError(TransportErrorKind.INVALID_URL, detail=str(exc))
    return TransportError(
        TransportErrorKind.NETWORK_ERROR, detail=str(exc) or type(exc).__name__
    )


def _decode(model: type[_ModelT], payload: object) -> _ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise TransportError(
            TransportErrorKind.DECODING_ERROR, detail=str(exc)
        ) from exc
