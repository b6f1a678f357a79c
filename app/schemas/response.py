"""HTTP API 응답 envelope 모델."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.place import PlaceDetails, PlaceSearchResult


class PlacesListResponse(BaseModel):
    """검색/주변 검색 응답."""

    success: bool = Field(default=True, description="성공 여부")
    data: list[PlaceSearchResult] = Field(..., description="정규화된 장소 목록")
    count: int = Field(..., description="결과 개수")
    message: str = Field(..., description="요약 메시지")


class PlaceDetailsResponse(BaseModel):
    """상세 조회 응답."""

    success: bool = Field(default=True, description="성공 여부")
    data: PlaceDetails = Field(..., description="정규화된 장소 상세")
    message: str = Field(..., description="요약 메시지")


class PlaceTypesResponse(BaseModel):
    """지원 장소 유형 응답."""

    success: bool = Field(default=True, description="성공 여부")
    data: list[str] = Field(..., description="장소 유형 목록")
    message: str = Field(..., description="요약 메시지")


class ErrorResponse(BaseModel):
    """오류 응답."""

    success: bool = Field(default=False, description="성공 여부")
    error: str = Field(..., description="오류 메시지")
    code: str = Field(..., description="안정적인 오류 코드")
    field: str | None = Field(default=None, description="검증에 실패한 필드")
    details: str | None = Field(default=None, description="개발 환경에서만 노출되는 원본 오류")


class HealthResponse(BaseModel):
    """헬스 체크 응답."""

    status: str = Field(..., description="서비스 상태")
    timestamp: datetime = Field(..., description="응답 시각 (UTC)")
    service: str = Field(..., description="서비스 이름")
