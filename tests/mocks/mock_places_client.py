"""Google Places API Mock 클라이언트.

실제 API 호출 없이 미리 정의한 제공자 응답을 반환하고, 받은 요청을 기록한다.
"""

from __future__ import annotations

from typing import Any

from app.schemas.google_places import ProviderPlace, SearchNearbyRequest, SearchPlacesResponse, SearchTextRequest
from app.services.places_service import PlacesClientProtocol


def make_provider_place(index: int = 1, **overrides: Any) -> dict[str, Any]:
    """Places API (New) JSON 형태의 샘플 장소를 생성한다."""
    raw: dict[str, Any] = {
        "id": f"ChIJ-place-{index}",
        "name": f"places/ChIJ-place-{index}",
        "displayName": {"text": f"Pizza Place {index}", "languageCode": "en"},
        "formattedAddress": f"{index} Main St, Springfield",
        "location": {"latitude": 37.5 + index * 0.01, "longitude": 127.0 + index * 0.01},
        "rating": 4.5,
        "priceLevel": "PRICE_LEVEL_MODERATE",
        "types": ["restaurant", "food", "point_of_interest"],
        "currentOpeningHours": {"openNow": True},
    }
    raw.update(overrides)
    return raw


def make_provider_details(review_count: int = 2, photo_count: int = 2, **overrides: Any) -> dict[str, Any]:
    """리뷰/사진 개수를 지정할 수 있는 샘플 상세 응답을 생성한다."""
    raw = make_provider_place(
        1,
        currentOpeningHours={
            "openNow": False,
            "weekdayDescriptions": ["Monday: 11:00 AM – 10:00 PM", "Tuesday: 11:00 AM – 10:00 PM"],
        },
        nationalPhoneNumber="(555) 010-0001",
        websiteUri="https://pizza.example.com",
        reviews=[
            {
                "rating": 5 - (i % 3),
                "text": {"text": f"review {i}", "languageCode": "en"},
                "authorAttribution": {"displayName": f"author {i}"},
                "publishTime": f"2024-01-{i + 1:02d}T12:00:00Z",
            }
            for i in range(review_count)
        ],
        photos=[{"name": f"places/ChIJ-place-1/photos/photo-{i}", "widthPx": 800} for i in range(photo_count)],
    )
    raw.update(overrides)
    return raw


class MockPlacesClient(PlacesClientProtocol):
    """Mock Places 제공자 클라이언트.

    `error`가 지정되면 모든 호출에서 해당 예외를 발생시킨다.
    """

    def __init__(
        self,
        places: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._places = places or []
        self._details = details or make_provider_details()
        self._error = error
        self.calls: list[tuple[str, Any]] = []

    async def search_text(self, request: SearchTextRequest) -> SearchPlacesResponse:
        self.calls.append(("search_text", request))
        if self._error is not None:
            raise self._error
        return SearchPlacesResponse.model_validate({"places": self._places})

    async def search_nearby(self, request: SearchNearbyRequest) -> SearchPlacesResponse:
        self.calls.append(("search_nearby", request))
        if self._error is not None:
            raise self._error
        return SearchPlacesResponse.model_validate({"places": self._places})

    async def get_place(self, place_id: str, field_mask: str) -> ProviderPlace:
        self.calls.append(("get_place", (place_id, field_mask)))
        if self._error is not None:
            raise self._error
        return ProviderPlace.model_validate(self._details)
