"""FastAPI 애플리케이션 진입점."""

from __future__ import annotations

import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api import health, places
from app.core.config import Settings, get_settings
from app.core.errors import VALIDATION_ERROR, PlacesServiceError, classify_error, describe_validation_errors
from app.core.logger import get_logger
from app.core.logging_config import configure_logging
from app.schemas.response import ErrorResponse
from app.services.places_adapter import PlacesAdapter

configure_logging()
logger = get_logger(__name__)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve_docs_mode(mode: str) -> str:
    normalized = (mode or "").strip().lower()
    if normalized in {"disabled", "public"}:
        return normalized
    logger.warning("Invalid DOCS_MODE value, falling back to disabled: %s", mode)
    return "disabled"


def _configure_trusted_hosts(app_: FastAPI, settings: Settings) -> None:
    trusted_hosts = _split_csv(settings.TRUSTED_HOSTS)
    if not trusted_hosts:
        return

    app_.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)


def _configure_cors(app_: FastAPI, settings: Settings) -> None:
    origins = _split_csv(settings.CORS_ALLOW_ORIGINS)
    if not origins:
        return

    allow_methods = _split_csv(settings.CORS_ALLOW_METHODS) or ["GET"]
    allow_headers = _split_csv(settings.CORS_ALLOW_HEADERS) or ["Content-Type"]
    allow_credentials = settings.CORS_ALLOW_CREDENTIALS

    if "*" in origins and allow_credentials:
        logger.warning(
            "CORS_ALLOW_ORIGINS contains '*' with CORS_ALLOW_CREDENTIALS=true; forcing allow_credentials to false."
        )
        allow_credentials = False

    app_.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=allow_methods,
        allow_headers=allow_headers,
    )


def _error_response(status_code: int, payload: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))


def _validation_error_response(request: Request, errors: list) -> JSONResponse:
    field, message = describe_validation_errors(errors)
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, message)
    return _error_response(
        400,
        ErrorResponse(error=message, code=VALIDATION_ERROR, field=field or None),
    )


def _register_exception_handlers(app_: FastAPI, settings: Settings) -> None:
    @app_.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """요청 본문 검증 실패를 400 envelope로 변환합니다."""
        return _validation_error_response(request, list(exc.errors()))

    @app_.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _validation_error_response(request, list(exc.errors()))

    @app_.exception_handler(PlacesServiceError)
    async def places_service_exception_handler(request: Request, exc: PlacesServiceError) -> JSONResponse:
        """제공자 오류를 안정적인 오류 코드로 분류합니다."""
        classification = classify_error(exc)
        cause = exc.__cause__ or exc
        logger.error(
            "Places operation failed on %s %s: code=%s message=%s cause=%s",
            request.method,
            request.url.path,
            classification.code,
            exc,
            cause,
        )
        details = str(cause) if settings.is_development and classification.status_code == 500 else None
        return _error_response(
            classification.status_code,
            ErrorResponse(error=classification.message, code=classification.code, details=details),
        )

    @app_.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """예상하지 못한 예외를 표준 형식으로 처리합니다."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        classification = classify_error(exc)
        details = str(exc) if settings.is_development and classification.status_code == 500 else None
        return _error_response(
            classification.status_code,
            ErrorResponse(error=classification.message, code=classification.code, details=details),
        )


def create_app(places_adapter: PlacesAdapter | None = None, settings: Settings | None = None) -> FastAPI:
    """HTTP 애플리케이션을 생성합니다.

    Args:
        places_adapter: 주입할 어댑터. 생략하면 설정으로 Google Places 어댑터를 만듭니다.
        settings: 사용할 설정. 생략하면 환경 변수에서 읽습니다.
    """
    resolved_settings = settings or get_settings()
    docs_mode = _resolve_docs_mode(resolved_settings.DOCS_MODE)

    app_ = FastAPI(
        title=resolved_settings.SERVICE_NAME,
        version="1.0.0",
        docs_url="/docs" if docs_mode == "public" else None,
        redoc_url="/redoc" if docs_mode == "public" else None,
        openapi_url="/openapi.json" if docs_mode == "public" else None,
    )
    app_.state.settings = resolved_settings
    app_.state.places_adapter = places_adapter or PlacesAdapter.from_settings(resolved_settings)

    _configure_trusted_hosts(app_, resolved_settings)
    _configure_cors(app_, resolved_settings)
    _register_exception_handlers(app_, resolved_settings)

    @app_.middleware("http")
    async def add_security_headers(request: Request, call_next) -> Response:
        """기본 보안 헤더를 응답에 추가합니다."""
        response = await call_next(request)
        if not resolved_settings.SECURITY_HEADERS_ENABLED:
            return response

        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cache-Control", "no-store")
        if resolved_settings.ENABLE_HSTS and request.url.scheme == "https":
            response.headers.setdefault(
                "Strict-Transport-Security", f"max-age={resolved_settings.HSTS_MAX_AGE_SECONDS}"
            )
        return response

    app_.include_router(health.router)
    app_.include_router(places.router)

    logger.info(
        "Location services API initialized: service=%s docs_mode=%s",
        resolved_settings.SERVICE_NAME,
        docs_mode,
    )
    return app_


def run() -> None:
    """환경 변수를 검증한 뒤 uvicorn으로 HTTP 서버를 실행합니다."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("GOOGLE_PLACES_API_KEY environment variable is required: %s", exc)
        sys.exit(1)

    uvicorn.run(
        create_app(settings=settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
