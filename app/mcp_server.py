"""MCP(Model Context Protocol) stdio 서버 진입점.

stdout은 프로토콜 채널이므로 로그는 stderr로만 남깁니다.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from app.core.config import get_settings
from app.core.logger import get_logger
from app.services.places_adapter import PlacesAdapter
from app.tools.places_tools import PlacesToolDispatcher

logger = get_logger(__name__)

SERVER_NAME = "location-services"
SERVER_VERSION = "1.0.0"
SERVER_INSTRUCTIONS = (
    "AI-powered location services providing place search, nearby discovery, and detailed place information"
)


class ToolInvocationError(RuntimeError):
    """MCP SDK가 오류 결과로 변환하도록 올리는 예외."""


def build_server(dispatcher: PlacesToolDispatcher) -> Server:
    """디스패처를 연결한 MCP 서버를 생성합니다."""
    server = Server(SERVER_NAME, version=SERVER_VERSION, instructions=SERVER_INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        result = await dispatcher.invoke(name, arguments)
        if result.isError:
            raise ToolInvocationError(result.content[0].text)
        return result.content

    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """환경 변수를 검증한 뒤 stdio로 MCP 서버를 실행합니다."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("GOOGLE_PLACES_API_KEY environment variable is required: %s", exc)
        sys.exit(1)

    adapter = PlacesAdapter.from_settings(settings)
    server = build_server(PlacesToolDispatcher(adapter))
    logger.info("Starting MCP server on stdio: name=%s", SERVER_NAME)
    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("MCP server stopped")


if __name__ == "__main__":
    main()
