"""내부 검색 파라미터와 Google Places 요청/응답 사이의 정규화 어댑터.

HTTP API와 MCP 도구 서버가 같은 인스턴스를 주입받아 사용하므로, 두 표면의
정규화 결과는 항상 동일합니다.
"""

from __future__ import annotations

from app.core.config import Settings, get_settings
from app.core.errors import PlacesServiceError
from app.core.logger import get_logger
from app.schemas.google_places import (
    Circle,
    LatLngLiteral,
    LocationArea,
    ProviderPhoto,
    ProviderPlace,
    ProviderReview,
    SearchNearbyRequest,
    SearchTextRequest,
)
from app.schemas.place import (
    ANONYMOUS_AUTHOR,
    UNKNOWN_ADDRESS,
    UNKNOWN_NAME,
    Location,
    PlaceDetails,
    PlaceReview,
    PlaceSearchResult,
)
from app.schemas.search import DEFAULT_RADIUS_METERS, LatLng, NearbyParams, SearchParams
from app.services.google_places_service import GooglePlacesClient
from app.services.places_service import PlacesClientProtocol

logger = get_logger(__name__)

MAX_RESULT_COUNT = 10
MAX_REVIEWS = 5
MAX_PHOTOS = 5
PHOTO_MAX_PX = 400
PHOTO_MEDIA_BASE_URL = "https://places.googleapis.com/v1"

DETAILS_FIELD_MASK = ",".join(
    [
        "id",
        "name",
        "displayName",
        "formattedAddress",
        "location",
        "rating",
        "priceLevel",
        "types",
        "currentOpeningHours",
        "nationalPhoneNumber",
        "websiteUri",
        "reviews",
        "photos",
    ]
)

_PRICE_LEVELS = {
    "PRICE_LEVEL_FREE": 0,
    "PRICE_LEVEL_INEXPENSIVE": 1,
    "PRICE_LEVEL_MODERATE": 2,
    "PRICE_LEVEL_EXPENSIVE": 3,
    "PRICE_LEVEL_VERY_EXPENSIVE": 4,
}


def _circle(location: LatLng, radius: int | float) -> LocationArea:
    return LocationArea(
        circle=Circle(
            center=LatLngLiteral(latitude=location.lat, longitude=location.lng),
            radius=radius,
        )
    )


def build_search_text_request(params: SearchParams) -> SearchTextRequest:
    """텍스트 검색 파라미터를 `searchText` 요청으로 변환합니다.

    location이 없으면 locationBias를 아예 넣지 않습니다 (기본 중심점 없음).
    """
    location_bias = None
    if params.location is not None:
        radius = params.radius if params.radius is not None else DEFAULT_RADIUS_METERS
        location_bias = _circle(params.location, radius)

    return SearchTextRequest(
        text_query=params.query,
        max_result_count=MAX_RESULT_COUNT,
        location_bias=location_bias,
        included_type=params.type or None,
    )


def build_search_nearby_request(params: NearbyParams) -> SearchNearbyRequest:
    """주변 검색 파라미터를 `searchNearby` 요청으로 변환합니다."""
    return SearchNearbyRequest(
        included_types=[params.type],
        max_result_count=MAX_RESULT_COUNT,
        location_restriction=_circle(params.location, params.radius),
    )


def _resolve_place_id(place: ProviderPlace) -> str:
    if place.id:
        return place.id
    if place.name:
        return place.name.rstrip("/").split("/")[-1]
    return ""


def _resolve_price_level(value: str | int | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    return _PRICE_LEVELS.get(value)


def _resolve_location(place: ProviderPlace) -> Location:
    if place.location is None:
        return Location(lat=0.0, lng=0.0)
    return Location(lat=place.location.latitude or 0.0, lng=place.location.longitude or 0.0)


def _search_result_fields(place: ProviderPlace) -> dict:
    display_name = place.display_name.text if place.display_name else None
    hours = place.current_opening_hours
    return {
        "id": _resolve_place_id(place),
        "name": display_name or UNKNOWN_NAME,
        "address": place.formatted_address or UNKNOWN_ADDRESS,
        "location": _resolve_location(place),
        "rating": place.rating,
        "price_level": _resolve_price_level(place.price_level),
        "types": list(place.types or []),
        "is_open": hours.open_now if hours is not None else None,
    }


def to_search_result(place: ProviderPlace) -> PlaceSearchResult:
    """제공자 장소 하나를 검색 결과로 정규화합니다."""
    return PlaceSearchResult(**_search_result_fields(place))


def to_search_results(places: list[ProviderPlace]) -> list[PlaceSearchResult]:
    """검색 응답 전체를 정규화합니다. ID를 알 수 없는 장소는 제외합니다."""
    results = []
    for place in places:
        if not _resolve_place_id(place):
            logger.warning("Skipping provider place without id or resource name")
            continue
        results.append(to_search_result(place))
    return results


def to_review(review: ProviderReview) -> PlaceReview:
    author = review.author_attribution.display_name if review.author_attribution else None
    return PlaceReview(
        rating=review.rating,
        text=(review.text.text if review.text else None) or "",
        author=author or ANONYMOUS_AUTHOR,
        time=review.publish_time,
    )


def photo_media_url(photo: ProviderPhoto, api_key: str) -> str:
    """사진 리소스 이름으로 바로 받을 수 있는 미디어 URL을 만듭니다."""
    return (
        f"{PHOTO_MEDIA_BASE_URL}/{photo.name}/media"
        f"?maxHeightPx={PHOTO_MAX_PX}&maxWidthPx={PHOTO_MAX_PX}&key={api_key}"
    )


def to_place_details(place: ProviderPlace, api_key: str) -> PlaceDetails:
    """제공자 장소 상세를 정규화합니다. 리뷰/사진은 제공자 순서대로 앞의 5개만 남깁니다."""
    hours = place.current_opening_hours
    photos = [photo for photo in (place.photos or []) if photo.name][:MAX_PHOTOS]
    return PlaceDetails(
        **_search_result_fields(place),
        phone_number=place.national_phone_number,
        website=place.website_uri,
        opening_hours=list((hours.weekday_descriptions if hours else None) or []),
        reviews=[to_review(review) for review in (place.reviews or [])[:MAX_REVIEWS]],
        photos=[photo_media_url(photo, api_key) for photo in photos],
    )


class PlacesAdapter:
    """제공자 클라이언트를 감싸 검색/상세 조회 결과를 정규화합니다.

    제공자 오류는 요청 맥락과 함께 로깅한 뒤 `PlacesServiceError`로 감싸서
    다시 발생시킵니다. 원인 예외는 `__cause__`로 보존됩니다.
    """

    def __init__(self, client: PlacesClientProtocol, api_key: str) -> None:
        self._client = client
        self._api_key = api_key

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PlacesAdapter:
        """애플리케이션 설정으로 Google Places 어댑터를 생성합니다."""
        resolved = settings or get_settings()
        return cls(GooglePlacesClient.from_settings(resolved), api_key=resolved.GOOGLE_PLACES_API_KEY)

    async def search_places(self, params: SearchParams) -> list[PlaceSearchResult]:
        request = build_search_text_request(params)
        try:
            response = await self._client.search_text(request)
        except Exception as exc:
            logger.error(
                "Error searching places: query=%s location=%s radius=%s type=%s error=%s",
                params.query,
                params.location,
                params.radius,
                params.type,
                exc,
            )
            raise PlacesServiceError("Failed to search places") from exc
        return to_search_results(response.places)

    async def find_nearby_places(self, params: NearbyParams) -> list[PlaceSearchResult]:
        request = build_search_nearby_request(params)
        try:
            response = await self._client.search_nearby(request)
        except Exception as exc:
            logger.error(
                "Error finding nearby places: location=%s type=%s radius=%s error=%s",
                params.location,
                params.type,
                params.radius,
                exc,
            )
            raise PlacesServiceError("Failed to find nearby places") from exc
        return to_search_results(response.places)

    async def get_place_details(self, place_id: str) -> PlaceDetails:
        try:
            place = await self._client.get_place(place_id, DETAILS_FIELD_MASK)
        except Exception as exc:
            logger.error("Error getting place details: place_id=%s error=%s", place_id, exc)
            raise PlacesServiceError("Failed to get place details") from exc

        if not place.id and not place.name:
            place = place.model_copy(update={"id": place_id})
        return to_place_details(place, self._api_key)
