"""장소 서비스 예외와 클라이언트 오류 코드 분류."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

VALIDATION_ERROR = "VALIDATION_ERROR"
QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
INVALID_API_KEY = "INVALID_API_KEY"
PLACE_NOT_FOUND = "PLACE_NOT_FOUND"
INTERNAL_ERROR = "INTERNAL_ERROR"

_QUOTA_STATUSES = {"RESOURCE_EXHAUSTED", "OVER_QUERY_LIMIT"}
_AUTH_STATUSES = {"UNAUTHENTICATED", "PERMISSION_DENIED", "REQUEST_DENIED"}


class GooglePlacesError(RuntimeError):
    """Google Places API 호출 실패 시 발생하는 예외."""

    def __init__(self, message: str, *, status_code: int | None = None, status: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status = status


class PlacesServiceError(RuntimeError):
    """어댑터 경계에서 제공자 오류를 감싸는 일반 예외.

    클라이언트에는 일반 메시지만 노출하고, 원인 예외는 ``__cause__``로 보존합니다.
    """


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    """클라이언트에 반환할 HTTP 상태와 오류 코드."""

    status_code: int
    code: str
    message: str


def _iter_causes(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _is_quota_error(exc: BaseException) -> bool:
    if isinstance(exc, GooglePlacesError):
        if exc.status_code == 429 or (exc.status or "").upper() in _QUOTA_STATUSES:
            return True
    return "quota" in str(exc).lower()


def _is_auth_error(exc: BaseException) -> bool:
    if isinstance(exc, GooglePlacesError):
        if exc.status_code in (401, 403) or (exc.status or "").upper() in _AUTH_STATUSES:
            return True
    return "api key" in str(exc).lower()


def _is_not_found_error(exc: BaseException) -> bool:
    return isinstance(exc, GooglePlacesError) and (exc.status_code == 404 or (exc.status or "").upper() == "NOT_FOUND")


def classify_error(exc: BaseException) -> ErrorClassification:
    """예외 체인을 따라가며 제공자 오류 신호를 클라이언트 오류 코드로 변환합니다."""
    chain = list(_iter_causes(exc))

    if any(_is_quota_error(item) for item in chain):
        return ErrorClassification(429, QUOTA_EXCEEDED, "API quota exceeded. Please try again later.")
    if any(_is_auth_error(item) for item in chain):
        return ErrorClassification(401, INVALID_API_KEY, "Invalid API key configuration.")
    if any(_is_not_found_error(item) for item in chain):
        return ErrorClassification(404, PLACE_NOT_FOUND, "Place not found.")
    return ErrorClassification(500, INTERNAL_ERROR, "Internal server error occurred.")


def _format_location(loc: Sequence[Any]) -> str:
    # ("body", 0)처럼 본문 JSON 파싱 위치만 있는 경우 필드명은 body로 둡니다.
    parts = []
    previous = None
    for part in loc:
        if part != "body" and not (previous == "body" and isinstance(part, int)):
            parts.append(str(part))
        previous = part
    if not parts and loc and loc[0] == "body":
        return "body"
    return ".".join(parts)


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> tuple[str, str]:
    """pydantic 오류 목록에서 첫 번째 위반 필드와 메시지를 만듭니다.

    Returns:
        (필드 경로, "필드: 제약 위반 내용" 형식의 메시지)
    """
    if not errors:
        return "", "Invalid request"

    first = errors[0]
    field = _format_location(first.get("loc", ()))
    message = str(first.get("msg", "Invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    if not field:
        return "", message
    return field, f"{field}: {message}"
