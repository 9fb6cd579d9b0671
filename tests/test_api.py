"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from tests.conftest import FailingFavoritesRepository, FakeMealDbClient
from whisked.adapters.mealdb_client import TransportError, TransportErrorKind
from whisked.api.app import create_app, status_for_error
from whisked.domain.errors import MealServiceError, MealServiceErrorKind
from whisked.services.favorites import FavoritesService


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_categories_and_meals(container) -> None:
    client = TestClient(create_app(container))

    categories = client.get("/categories").json()
    meals = client.get("/categories/Dessert/meals").json()

    assert [category["name"] for category in categories] == ["Dessert", "Pasta"]
    assert categories[0]["id"] == "3"
    assert [meal["id"] for meal in meals] == ["52768", "52893"]


def test_meal_detail_includes_ingredients(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/meals/52768")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Apple Frangipan Tart"
    assert body["ingredients"][0] == {"name": "digestive biscuits", "measure": "175g"}
    assert len(body["ingredients"]) == 3


def test_search_requires_query(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/meals/search").status_code == 422
    assert client.get("/meals/search", params={"q": "tart"}).status_code == 200


def test_http_error_is_reported_with_recovery(
    container, mealdb_client: FakeMealDbClient
) -> None:
    mealdb_client.failures["detail"] = TransportError(
        TransportErrorKind.HTTP_ERROR, status_code=404
    )
    client = TestClient(create_app(container))

    response = client.get("/meals/1")

    assert response.status_code == 404
    assert response.json() == {
        "error": "server_error",
        "message": "Server error (404)",
        "failure_reason": "Not found - the requested resource does not exist",
        "recovery_suggestion": (
            "The content you're looking for may have been moved or deleted"
        ),
    }


def test_no_connection_is_service_unavailable(
    container, mealdb_client: FakeMealDbClient
) -> None:
    mealdb_client.failures["categories"] = TransportError(
        TransportErrorKind.NO_CONNECTION
    )
    client = TestClient(create_app(container))

    response = client.get("/categories")

    assert response.status_code == 503
    assert response.json()["error"] == "no_connection"


def test_silent_error_has_empty_body(
    container, mealdb_client: FakeMealDbClient
) -> None:
    mealdb_client.failures["categories"] = TransportError(TransportErrorKind.UNKNOWN)
    client = TestClient(create_app(container))

    response = client.get("/categories")

    assert response.status_code == 499
    assert response.content == b""


def test_favorites_endpoints(container) -> None:
    client = TestClient(create_app(container))

    assert client.post("/favorites/52768/toggle").json() == {
        "meal_id": "52768",
        "favorite": True,
    }
    client.put("/favorites/52893")
    assert client.get("/favorites/52768").json()["favorite"] is True
    assert client.get("/favorites/count").json() == {"count": 2}
    assert [row["meal_id"] for row in client.get("/favorites").json()] == [
        "52768",
        "52893",
    ]

    assert client.post("/favorites/52768/toggle").json()["favorite"] is False
    assert client.delete("/favorites/52893").json()["favorite"] is False
    assert client.get("/favorites/count").json() == {"count": 0}

    client.put("/favorites/1")
    assert client.delete("/favorites").status_code == 204
    assert client.get("/favorites").json() == []


def test_favorites_store_failure(container) -> None:
    container.favorites_service = FavoritesService(FailingFavoritesRepository())
    client = TestClient(create_app(container))

    response = client.put("/favorites/52768")

    assert response.status_code == 503
    assert response.json()["error"] == "persistence_error"


def test_offline_meal_endpoints(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/offline-meals/52768").status_code == 404

    saved = client.put("/offline-meals/52768")
    assert saved.status_code == 200
    assert saved.json()["meal"]["id"] == "52768"

    fetched = client.get("/offline-meals/52768").json()
    assert fetched["meal"]["ingredients"] == saved.json()["meal"]["ingredients"]
    assert client.get("/offline-meals/count").json() == {"count": 1}
    assert len(client.get("/offline-meals").json()) == 1

    assert client.delete("/offline-meals/52768").status_code == 204
    assert client.get("/offline-meals/count").json() == {"count": 0}

    client.put("/offline-meals/52768")
    assert client.delete("/offline-meals").status_code == 204
    assert client.get("/offline-meals").json() == []


def test_status_for_error() -> None:
    assert status_for_error(MealServiceError.server_error(500)) == 500
    assert status_for_error(MealServiceError.server_error(302)) == 502
    assert status_for_error(MealServiceError(MealServiceErrorKind.TIMEOUT)) == 504
    assert (
        status_for_error(MealServiceError(MealServiceErrorKind.NO_MEALS_FOUND)) == 404
    )
    assert status_for_error(MealServiceError(MealServiceErrorKind.CANCELLED)) == 499
