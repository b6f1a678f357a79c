"""장소 검색 요청 파라미터 모델.

HTTP 요청 본문과 MCP 도구 인자 검증에 동일하게 사용합니다.
숫자 필드는 strict 모드로 검증하여 문자열/불리언 입력을 거부합니다.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator

DEFAULT_RADIUS_METERS = 5000
MAX_RADIUS_METERS = 50000
RADIUS_ERROR_MESSAGE = "Radius must be a number between 1 and 50000 meters"


class LatLng(BaseModel):
    """위도/경도 좌표 입력."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, strict=True, description="위도 (-90 ~ 90)")
    lng: float = Field(..., ge=-180, le=180, strict=True, description="경도 (-180 ~ 180)")


def _require_non_blank(value: str | None, message: str) -> str | None:
    if value is not None and not value.strip():
        raise ValueError(message)
    return value


def _check_radius(value: int | float | None) -> int | float | None:
    # 정수 입력은 정수 그대로 제공자 요청까지 전달합니다.
    if value is not None and not 0 < value <= MAX_RADIUS_METERS:
        raise ValueError(RADIUS_ERROR_MESSAGE)
    return value


class SearchParams(BaseModel):
    """텍스트 검색 파라미터.

    Attributes:
        query: 자연어 검색어. 공백 제거 후 1자 이상이어야 합니다.
        location: 검색 결과를 치우치게 할 중심 좌표.
        radius: location 기준 반경(미터). 생략 시 어댑터에서 5000을 사용합니다.
        type: 장소 유형 필터.
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., strict=True, description="자연어 검색어")
    location: LatLng | None = Field(default=None, description="검색 편향 중심 좌표")
    radius: StrictInt | StrictFloat | None = Field(default=None, description="검색 반경 (미터, 최대 50000)")
    type: str | None = Field(default=None, strict=True, description="장소 유형 필터")

    @field_validator("query")
    @classmethod
    def _validate_query(cls, value: str) -> str:
        _require_non_blank(value, "Query parameter is required and must be a non-empty string")
        return value

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str | None) -> str | None:
        return _require_non_blank(value, "Type must be a non-empty string if provided")

    @field_validator("radius")
    @classmethod
    def _validate_radius(cls, value: int | float | None) -> int | float | None:
        return _check_radius(value)


class NearbyParams(BaseModel):
    """주변 검색 파라미터."""

    model_config = ConfigDict(frozen=True)

    location: LatLng = Field(..., description="검색 중심 좌표")
    type: str = Field(..., strict=True, description="장소 유형")
    radius: StrictInt | StrictFloat = Field(
        default=DEFAULT_RADIUS_METERS, description="검색 반경 (미터, 기본 5000, 최대 50000)"
    )

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        _require_non_blank(value, "Type parameter is required and must be a non-empty string")
        return value

    @field_validator("radius")
    @classmethod
    def _validate_radius(cls, value: int | float) -> int | float:
        return _check_radius(value)


class PlaceIdParams(BaseModel):
    """상세 조회 파라미터."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    place_id: str = Field(..., alias="placeId", strict=True, description="검색 결과에서 얻은 장소 ID")

    @field_validator("place_id")
    @classmethod
    def _validate_place_id(cls, value: str) -> str:
        _require_non_blank(value, "Place ID is required")
        return value.strip()
