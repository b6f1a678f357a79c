"""장소 검색 REST API."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_places_adapter
from app.core.logger import get_logger
from app.core.place_types import list_place_types
from app.schemas.response import ErrorResponse, PlaceDetailsResponse, PlacesListResponse, PlaceTypesResponse
from app.schemas.search import NearbyParams, PlaceIdParams, SearchParams
from app.services.places_adapter import PlacesAdapter

router = APIRouter(prefix="/api/places", tags=["places"])
logger = get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    401: {"model": ErrorResponse, "description": "Invalid API key configuration"},
    429: {"model": ErrorResponse, "description": "Provider quota exceeded"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


@router.post(
    "/search",
    response_model=PlacesListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def search_places(
    params: SearchParams,
    adapter: PlacesAdapter = Depends(get_places_adapter),  # noqa: B008
) -> PlacesListResponse:
    """텍스트 쿼리로 장소를 검색합니다."""
    logger.info("Search request received: query=%s", params.query)
    results = await adapter.search_places(params)
    return PlacesListResponse(
        data=results,
        count=len(results),
        message=f'Found {len(results)} places for "{params.query}"',
    )


@router.post(
    "/nearby",
    response_model=PlacesListResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def find_nearby_places(
    params: NearbyParams,
    adapter: PlacesAdapter = Depends(get_places_adapter),  # noqa: B008
) -> PlacesListResponse:
    """특정 유형의 주변 장소를 검색합니다."""
    logger.info("Nearby request received: type=%s radius=%s", params.type, params.radius)
    results = await adapter.find_nearby_places(params)
    return PlacesListResponse(
        data=results,
        count=len(results),
        message=f"Found {len(results)} {params.type} places nearby",
    )


@router.get("/types", response_model=PlaceTypesResponse)
def get_place_types() -> PlaceTypesResponse:
    """검색에 사용할 수 있는 장소 유형 목록을 반환합니다."""
    return PlaceTypesResponse(data=list_place_types(), message="Available place types for search")


@router.get(
    "/{place_id}",
    response_model=PlaceDetailsResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse, "description": "Place not found"}},
)
async def get_place_details(
    place_id: str,
    adapter: PlacesAdapter = Depends(get_places_adapter),  # noqa: B008
) -> PlaceDetailsResponse:
    """장소 상세 정보를 조회합니다."""
    params = PlaceIdParams(place_id=place_id)
    details = await adapter.get_place_details(params.place_id)
    return PlaceDetailsResponse(data=details, message=f"Details for {details.name}")
