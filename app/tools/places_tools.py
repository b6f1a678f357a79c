"""AI 에이전트용 장소 도구 정의와 디스패처.

HTTP API와 같은 검증 모델과 같은 `PlacesAdapter`를 사용합니다.
도구 실행 실패는 전송 계층으로 예외를 올리지 않고 오류 플래그가 붙은 결과로 돌려줍니다.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from mcp import types
from pydantic import ValidationError

from app.core.errors import describe_validation_errors
from app.core.logger import get_logger
from app.core.place_types import list_place_types
from app.schemas.place import dump_place
from app.schemas.search import NearbyParams, PlaceIdParams, SearchParams
from app.services.places_adapter import PlacesAdapter

logger = get_logger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]

_LOCATION_SCHEMA = {
    "type": "object",
    "properties": {
        "lat": {
            "type": "number",
            "description": "Latitude coordinate",
            "minimum": -90,
            "maximum": 90,
        },
        "lng": {
            "type": "number",
            "description": "Longitude coordinate",
            "minimum": -180,
            "maximum": 180,
        },
    },
    "required": ["lat", "lng"],
}

_RADIUS_SCHEMA = {
    "type": "number",
    "description": "Search radius in meters (default: 5000, max: 50000)",
    "exclusiveMinimum": 0,
    "maximum": 50000,
}

TOOLS: tuple[types.Tool, ...] = (
    types.Tool(
        name="search_places",
        description="Search for places using natural language queries with optional location bias and filtering",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": (
                        'Natural language search query (e.g., "best pizza near me", "coffee shops in downtown")'
                    ),
                },
                "location": {**_LOCATION_SCHEMA, "description": "Optional location to bias search results"},
                "radius": _RADIUS_SCHEMA,
                "type": {
                    "type": "string",
                    "description": 'Optional place type filter (e.g., "restaurant", "gas_station", "hospital")',
                },
            },
            "required": ["query"],
        },
    ),
    types.Tool(
        name="find_nearby_places",
        description="Find places of a specific type within a radius of a given location",
        inputSchema={
            "type": "object",
            "properties": {
                "location": {**_LOCATION_SCHEMA, "description": "Center location for the search"},
                "type": {
                    "type": "string",
                    "description": 'Type of place to search for (e.g., "restaurant", "gas_station", "pharmacy")',
                },
                "radius": _RADIUS_SCHEMA,
            },
            "required": ["location", "type"],
        },
    ),
    types.Tool(
        name="get_place_details",
        description=(
            "Get comprehensive details about a specific place including contact info, reviews, photos, and hours"
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "placeId": {
                    "type": "string",
                    "description": "Unique identifier for the place (obtained from search results)",
                },
            },
            "required": ["placeId"],
        },
    ),
    types.Tool(
        name="get_place_types",
        description="Get a list of all supported place types for searching",
        inputSchema={"type": "object", "properties": {}},
    ),
)


def _text_result(payload: dict[str, Any]) -> types.CallToolResult:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)


def _error_result(name: str, message: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"Error executing {name}: {message}")],
        isError=True,
    )


class PlacesToolDispatcher:
    """도구 이름을 `PlacesAdapter` 호출로 연결합니다."""

    def __init__(self, adapter: PlacesAdapter) -> None:
        self._adapter = adapter
        self._handlers: dict[str, ToolHandler] = {
            "search_places": self._search_places,
            "find_nearby_places": self._find_nearby_places,
            "get_place_details": self._get_place_details,
            "get_place_types": self._get_place_types,
        }

    def list_tools(self) -> list[types.Tool]:
        return list(TOOLS)

    async def invoke(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """도구를 실행하고 JSON 텍스트 결과 또는 오류 결과를 반환합니다."""
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("Unknown tool requested: %s", name)
            return _error_result(name, f"Unknown tool: {name}")

        logger.info("Tool call received: name=%s", name)
        try:
            payload = await handler(arguments or {})
        except ValidationError as exc:
            _, message = describe_validation_errors(exc.errors())
            logger.warning("Tool input validation failed: name=%s error=%s", name, message)
            return _error_result(name, message)
        except Exception as exc:
            logger.error("Tool execution failed: name=%s error=%s cause=%s", name, exc, exc.__cause__)
            return _error_result(name, str(exc) or "Unknown error occurred")
        return _text_result(payload)

    async def _search_places(self, arguments: dict[str, Any]) -> dict[str, Any]:
        params = SearchParams.model_validate(arguments)
        results = await self._adapter.search_places(params)
        return {
            "success": True,
            "message": f'Found {len(results)} places for "{params.query}"',
            "count": len(results),
            "results": [dump_place(place) for place in results],
        }

    async def _find_nearby_places(self, arguments: dict[str, Any]) -> dict[str, Any]:
        params = NearbyParams.model_validate(arguments)
        results = await self._adapter.find_nearby_places(params)
        return {
            "success": True,
            "message": f"Found {len(results)} {params.type} places nearby",
            "count": len(results),
            "searchParams": {
                "location": params.location.model_dump(),
                "type": params.type,
                "radius": params.radius,
            },
            "results": [dump_place(place) for place in results],
        }

    async def _get_place_details(self, arguments: dict[str, Any]) -> dict[str, Any]:
        params = PlaceIdParams.model_validate(arguments)
        details = await self._adapter.get_place_details(params.place_id)
        return {
            "success": True,
            "message": f"Details for {details.name}",
            "placeDetails": dump_place(details),
        }

    async def _get_place_types(self, arguments: dict[str, Any]) -> dict[str, Any]:
        place_types = list_place_types()
        return {
            "success": True,
            "message": "Available place types for AI agent searches",
            "count": len(place_types),
            "placeTypes": place_types,
            "usage": "Use these types with find_nearby_places or as type filter in search_places",
        }
