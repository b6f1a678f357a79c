"""Google Places 응답을 표준화한 내부 장소 모델.

모든 모델은 요청 단위로 생성되며 생성 후 변경하지 않습니다.
외부로 직렬화할 때는 camelCase 별칭을 사용하고, 값이 없는 선택 필드는 생략합니다.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNKNOWN_NAME = "Unknown"
UNKNOWN_ADDRESS = "Address not available"
ANONYMOUS_AUTHOR = "Anonymous"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Location(_FrozenModel):
    """장소 위치 좌표."""

    lat: float = Field(default=0.0, description="위도")
    lng: float = Field(default=0.0, description="경도")


class PlaceSearchResult(_FrozenModel):
    """검색 결과 단일 장소."""

    id: str = Field(..., min_length=1, description="제공자가 부여한 장소 ID")
    name: str = Field(default=UNKNOWN_NAME, description="장소 이름")
    address: str = Field(default=UNKNOWN_ADDRESS, description="장소 주소")
    location: Location = Field(default_factory=Location, description="장소 좌표")
    rating: float | None = Field(default=None, description="평점")
    price_level: int | None = Field(default=None, description="가격대 (0~4)")
    types: list[str] = Field(default_factory=list, description="장소 유형 목록")
    is_open: bool | None = Field(default=None, description="현재 영업 여부 (신호가 없으면 생략)")


class PlaceReview(_FrozenModel):
    """장소 리뷰."""

    rating: float | None = Field(default=None, description="리뷰 평점")
    text: str = Field(default="", description="리뷰 본문")
    author: str = Field(default=ANONYMOUS_AUTHOR, description="작성자 표시 이름")
    time: str | None = Field(default=None, description="작성 시각 (RFC 3339)")


class PlaceDetails(PlaceSearchResult):
    """상세 조회 결과."""

    phone_number: str | None = Field(default=None, description="국내 전화번호")
    website: str | None = Field(default=None, description="웹사이트 URL")
    opening_hours: list[str] = Field(default_factory=list, description="요일별 영업시간")
    reviews: list[PlaceReview] = Field(default_factory=list, description="리뷰 (최대 5개)")
    photos: list[str] = Field(default_factory=list, description="사진 미디어 URL (최대 5개)")


def dump_place(place: PlaceSearchResult) -> dict:
    """JSON 직렬화용 dict로 변환합니다."""
    return place.model_dump(mode="json", by_alias=True, exclude_none=True)
