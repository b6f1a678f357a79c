"""Places 제공자 클라이언트 추상 프로토콜 정의."""

from abc import ABC, abstractmethod

from app.schemas.google_places import ProviderPlace, SearchNearbyRequest, SearchPlacesResponse, SearchTextRequest


class PlacesClientProtocol(ABC):
    """Places 제공자 호출을 위한 인터페이스를 정의합니다.

    구현체는 실패 시 `GooglePlacesError`를 발생시키고, 응답을 가공하지 않은
    제공자 스키마 그대로 반환합니다.
    """

    @abstractmethod
    async def search_text(self, request: SearchTextRequest) -> SearchPlacesResponse:
        """텍스트 쿼리로 장소를 검색합니다.

        Args:
            request: `places:searchText` 요청 본문

        Returns:
            제공자 검색 응답
        """
        raise NotImplementedError

    @abstractmethod
    async def search_nearby(self, request: SearchNearbyRequest) -> SearchPlacesResponse:
        """원형 영역 안의 장소를 유형으로 검색합니다.

        Args:
            request: `places:searchNearby` 요청 본문

        Returns:
            제공자 검색 응답
        """
        raise NotImplementedError

    @abstractmethod
    async def get_place(self, place_id: str, field_mask: str) -> ProviderPlace:
        """장소 상세 정보를 조회합니다.

        Args:
            place_id: Google Places ID
            field_mask: 요청할 응답 필드 목록 (쉼표 구분)

        Returns:
            제공자 장소 리소스
        """
        raise NotImplementedError
