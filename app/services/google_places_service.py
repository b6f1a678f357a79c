"""Google Places API 클라이언트 구현."""

from __future__ import annotations

import asyncio
from typing import Any

import requests
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.core.errors import GooglePlacesError
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy, to_requests_timeout
from app.schemas.google_places import ProviderPlace, SearchNearbyRequest, SearchPlacesResponse, SearchTextRequest
from app.services.places_service import PlacesClientProtocol

logger = get_logger(__name__)

SEARCH_FIELD_MASK = ",".join(
    [
        "places.id",
        "places.name",
        "places.displayName",
        "places.formattedAddress",
        "places.location",
        "places.rating",
        "places.priceLevel",
        "places.types",
        "places.currentOpeningHours.openNow",
    ]
)


class GooglePlacesClient(PlacesClientProtocol):
    """Google Places API (New) 기반 제공자 클라이언트."""

    _SEARCH_TEXT_PATH = "/places:searchText"
    _SEARCH_NEARBY_PATH = "/places:searchNearby"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://places.googleapis.com/v1",
        timeout_seconds: int = 10,
        language_code: str = "",
    ) -> None:
        if not api_key:
            raise GooglePlacesError("GOOGLE_PLACES_API_KEY is not configured.")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._language_code = language_code.strip() if language_code else ""

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GooglePlacesClient:
        """애플리케이션 설정으로 클라이언트 인스턴스를 생성합니다."""
        resolved = settings or get_settings()
        timeout_policy = get_timeout_policy(resolved)
        return cls(
            api_key=resolved.GOOGLE_PLACES_API_KEY,
            base_url=resolved.GOOGLE_PLACES_BASE_URL,
            timeout_seconds=timeout_policy.google_places_timeout_seconds,
            language_code=resolved.GOOGLE_PLACES_LANGUAGE_CODE,
        )

    async def search_text(self, request: SearchTextRequest) -> SearchPlacesResponse:
        """텍스트 쿼리로 장소를 검색합니다."""
        if self._language_code and request.language_code is None:
            request = request.model_copy(update={"language_code": self._language_code})

        data = await self._request(
            method="POST",
            url=f"{self._base_url}{self._SEARCH_TEXT_PATH}",
            payload=request.to_payload(),
            params=None,
            field_mask=SEARCH_FIELD_MASK,
        )
        response = self._parse(SearchPlacesResponse, data)
        logger.info(
            "Google Places searchText completed: location_bias_applied=%s type_filter_applied=%s candidate_count=%d",
            request.location_bias is not None,
            request.included_type is not None,
            len(response.places),
        )
        return response

    async def search_nearby(self, request: SearchNearbyRequest) -> SearchPlacesResponse:
        """원형 영역 안의 장소를 검색합니다."""
        if self._language_code and request.language_code is None:
            request = request.model_copy(update={"language_code": self._language_code})

        data = await self._request(
            method="POST",
            url=f"{self._base_url}{self._SEARCH_NEARBY_PATH}",
            payload=request.to_payload(),
            params=None,
            field_mask=SEARCH_FIELD_MASK,
        )
        response = self._parse(SearchPlacesResponse, data)
        logger.info(
            "Google Places searchNearby completed: included_types=%s radius=%s candidate_count=%d",
            request.included_types,
            request.location_restriction.circle.radius,
            len(response.places),
        )
        return response

    async def get_place(self, place_id: str, field_mask: str) -> ProviderPlace:
        """장소 상세 정보를 조회합니다."""
        resource = place_id if place_id.startswith("places/") else f"places/{place_id}"
        params = {}
        if self._language_code:
            params["languageCode"] = self._language_code

        data = await self._request(
            method="GET",
            url=f"{self._base_url}/{resource}",
            payload=None,
            params=params or None,
            field_mask=field_mask,
        )
        return self._parse(ProviderPlace, data)

    async def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None,
        params: dict[str, Any] | None,
        field_mask: str,
    ) -> dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._api_key,
            "X-Goog-FieldMask": field_mask,
        }
        request_timeout = to_requests_timeout(self._timeout_seconds)

        def _send() -> requests.Response:
            with requests.Session() as session:
                return session.request(
                    method=method,
                    url=url,
                    json=payload,
                    params=params,
                    headers=headers,
                    timeout=request_timeout,
                )

        try:
            response = await asyncio.to_thread(_send)
        except requests.RequestException as exc:
            logger.error("Google Places API request failed: %s", exc)
            raise GooglePlacesError(f"Google Places API request failed: {exc}") from exc

        if response.status_code >= 400:
            raise self._build_error(response)

        try:
            return response.json() or {}
        except ValueError as exc:
            logger.error("Google Places API response parse failed: %s", exc)
            raise GooglePlacesError("Invalid Google Places API response.", status_code=response.status_code) from exc

    @staticmethod
    def _build_error(response: requests.Response) -> GooglePlacesError:
        """Google 오류 본문(`{"error": {"code", "message", "status"}}`)을 예외로 변환합니다."""
        body = (response.text or "")[:200]
        status: str | None = None
        message = f"Google Places API error ({response.status_code})."
        try:
            error = (response.json() or {}).get("error") or {}
        except ValueError:
            error = {}
        if isinstance(error, dict):
            status = error.get("status")
            if error.get("message"):
                message = f"Google Places API error ({response.status_code}): {error['message']}"

        logger.error("Google Places API error: status=%s body=%s", response.status_code, body)
        return GooglePlacesError(message, status_code=response.status_code, status=status)

    @staticmethod
    def _parse(model: type, data: dict[str, Any]):
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.error("Google Places API response schema mismatch: %s", exc)
            raise GooglePlacesError("Unexpected Google Places API response shape.") from exc
