"""Google Places API (New) 요청/응답 스키마.

제공자 응답 형태 변화는 이 모듈과 어댑터 경계 안에서만 다룹니다.
알 수 없는 필드는 무시합니다.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _GoogleModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="ignore")

    def to_payload(self) -> dict:
        """요청 본문용 dict를 camelCase로 생성합니다."""
        return self.model_dump(by_alias=True, exclude_none=True)


class LatLngLiteral(_GoogleModel):
    latitude: float | None = None
    longitude: float | None = None


class Circle(_GoogleModel):
    center: LatLngLiteral
    radius: int | float


class LocationArea(_GoogleModel):
    circle: Circle


class SearchTextRequest(_GoogleModel):
    """`places:searchText` 요청 본문."""

    text_query: str
    max_result_count: int = 10
    location_bias: LocationArea | None = None
    included_type: str | None = None
    language_code: str | None = None


class SearchNearbyRequest(_GoogleModel):
    """`places:searchNearby` 요청 본문."""

    included_types: list[str] = Field(default_factory=list)
    max_result_count: int = 10
    location_restriction: LocationArea
    language_code: str | None = None


class LocalizedText(_GoogleModel):
    text: str | None = None
    language_code: str | None = None


class OpeningHours(_GoogleModel):
    open_now: bool | None = None
    weekday_descriptions: list[str] | None = None


class AuthorAttribution(_GoogleModel):
    display_name: str | None = None
    uri: str | None = None


class ProviderReview(_GoogleModel):
    rating: float | None = None
    text: LocalizedText | None = None
    author_attribution: AuthorAttribution | None = None
    publish_time: str | None = None


class ProviderPhoto(_GoogleModel):
    name: str | None = None
    width_px: int | None = None
    height_px: int | None = None


class ProviderPlace(_GoogleModel):
    """Places API `Place` 리소스 중 사용하는 필드."""

    id: str | None = None
    name: str | None = None
    display_name: LocalizedText | None = None
    formatted_address: str | None = None
    location: LatLngLiteral | None = None
    rating: float | None = None
    price_level: str | int | None = None
    types: list[str] | None = None
    current_opening_hours: OpeningHours | None = None
    national_phone_number: str | None = None
    website_uri: str | None = None
    reviews: list[ProviderReview] | None = None
    photos: list[ProviderPhoto] | None = None


class SearchPlacesResponse(_GoogleModel):
    """`searchText`/`searchNearby` 공통 응답."""

    places: list[ProviderPlace] = Field(default_factory=list)
