"""장소 REST API 테스트."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.core.errors import GooglePlacesError
from app.core.place_types import PLACE_TYPES
from app.main import create_app
from app.services.places_adapter import PlacesAdapter
from tests.mocks.mock_places_client import MockPlacesClient, make_provider_details, make_provider_place


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "test-key")
    monkeypatch.setenv("DOCS_MODE", "disabled")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def _client(monkeypatch, places_client: MockPlacesClient, **env: str) -> TestClient:
    _set_required_env(monkeypatch, **env)
    app = create_app(places_adapter=PlacesAdapter(places_client, api_key="test-key"))
    return TestClient(app)


def test_search_returns_normalized_places(monkeypatch) -> None:
    places_client = MockPlacesClient(places=[make_provider_place(i) for i in range(1, 4)])
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/search", json={"query": "pizza"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 3
    assert len(body["data"]) == 3
    assert body["message"] == 'Found 3 places for "pizza"'
    assert body["data"][0]["priceLevel"] == 2
    assert body["data"][0]["isOpen"] is True
    assert "locationBias" not in places_client.calls[0][1].to_payload()


def test_search_omits_missing_optional_fields(monkeypatch) -> None:
    places_client = MockPlacesClient(places=[{"id": "only-id"}])
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/search", json={"query": "pizza"})

    assert response.json()["data"] == [
        {
            "id": "only-id",
            "name": "Unknown",
            "address": "Address not available",
            "location": {"lat": 0.0, "lng": 0.0},
            "types": [],
        }
    ]


def test_search_rejects_blank_query(monkeypatch) -> None:
    places_client = MockPlacesClient()
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/search", json={"query": "   "})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert body["field"] == "query"
    assert places_client.calls == []


def test_search_rejects_out_of_range_radius(monkeypatch) -> None:
    places_client = MockPlacesClient()
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/search", json={"query": "pizza", "radius": 60000})

    assert response.status_code == 400
    assert response.json()["field"] == "radius"
    assert places_client.calls == []


def test_search_rejects_malformed_json_body(monkeypatch) -> None:
    places_client = MockPlacesClient()
    client = _client(monkeypatch, places_client)

    response = client.post(
        "/api/places/search", content=b'{"query": "pizza"', headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["field"] == "body"
    assert body["error"].startswith("body: ")
    assert places_client.calls == []


def test_nearby_rejects_invalid_latitude_before_provider_call(monkeypatch) -> None:
    places_client = MockPlacesClient(places=[make_provider_place(1)])
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/nearby", json={"location": {"lat": 200, "lng": 0}, "type": "restaurant"})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["field"] == "location.lat"
    assert places_client.calls == []


def test_nearby_requires_type(monkeypatch) -> None:
    places_client = MockPlacesClient()
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/nearby", json={"location": {"lat": 10, "lng": 10}})

    assert response.status_code == 400
    assert response.json()["field"] == "type"


def test_nearby_uses_default_radius(monkeypatch) -> None:
    places_client = MockPlacesClient(places=[make_provider_place(1)])
    client = _client(monkeypatch, places_client)

    response = client.post("/api/places/nearby", json={"location": {"lat": 10, "lng": 10}, "type": "restaurant"})

    assert response.status_code == 200
    assert response.json()["message"] == "Found 1 restaurant places nearby"
    request = places_client.calls[0][1]
    assert request.location_restriction.circle.radius == 5000
    assert request.included_types == ["restaurant"]


def test_place_types_route_is_not_treated_as_place_id(monkeypatch) -> None:
    places_client = MockPlacesClient()
    client = _client(monkeypatch, places_client)

    response = client.get("/api/places/types")

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == list(PLACE_TYPES)
    assert len(body["data"]) == 29
    assert places_client.calls == []


def test_place_details(monkeypatch) -> None:
    places_client = MockPlacesClient(details=make_provider_details(review_count=8, photo_count=9))
    client = _client(monkeypatch, places_client)

    response = client.get("/api/places/ChIJ-place-1")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Details for Pizza Place 1"
    assert len(body["data"]["reviews"]) == 5
    assert len(body["data"]["photos"]) == 5
    assert body["data"]["phoneNumber"] == "(555) 010-0001"
    assert body["data"]["openingHours"][0].startswith("Monday")


def test_quota_error_maps_to_429(monkeypatch) -> None:
    error = GooglePlacesError("Quota exceeded", status_code=429, status="RESOURCE_EXHAUSTED")
    client = _client(monkeypatch, MockPlacesClient(error=error))

    response = client.post("/api/places/search", json={"query": "pizza"})

    assert response.status_code == 429
    assert response.json() == {
        "success": False,
        "error": "API quota exceeded. Please try again later.",
        "code": "QUOTA_EXCEEDED",
    }


def test_auth_error_maps_to_401(monkeypatch) -> None:
    error = GooglePlacesError("API key not valid. Please pass a valid API key.", status_code=400)
    client = _client(monkeypatch, MockPlacesClient(error=error))

    response = client.post("/api/places/nearby", json={"location": {"lat": 1, "lng": 1}, "type": "bank"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_API_KEY"


def test_unknown_place_maps_to_404(monkeypatch) -> None:
    error = GooglePlacesError("Not found", status_code=404, status="NOT_FOUND")
    client = _client(monkeypatch, MockPlacesClient(error=error))

    response = client.get("/api/places/missing")

    assert response.status_code == 404
    assert response.json()["code"] == "PLACE_NOT_FOUND"


def test_internal_error_details_only_in_development(monkeypatch) -> None:
    error = GooglePlacesError("upstream exploded", status_code=500)

    dev_client = _client(monkeypatch, MockPlacesClient(error=error), APP_ENV="development")
    dev_body = dev_client.post("/api/places/search", json={"query": "pizza"}).json()

    prod_client = _client(monkeypatch, MockPlacesClient(error=error), APP_ENV="production")
    prod_response = prod_client.post("/api/places/search", json={"query": "pizza"})

    assert dev_body["code"] == "INTERNAL_ERROR"
    assert dev_body["details"] == "upstream exploded"
    assert prod_response.status_code == 500
    assert prod_response.json() == {
        "success": False,
        "error": "Internal server error occurred.",
        "code": "INTERNAL_ERROR",
    }
