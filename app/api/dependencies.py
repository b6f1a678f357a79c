"""API 의존성 모음."""

from fastapi import Request

from app.services.places_adapter import PlacesAdapter


def get_places_adapter(request: Request) -> PlacesAdapter:
    """애플리케이션 생성 시 주입된 `PlacesAdapter`를 제공합니다."""
    return request.app.state.places_adapter
