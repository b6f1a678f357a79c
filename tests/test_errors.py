"""오류 분류 유틸 테스트."""

from app.core.errors import (
    GooglePlacesError,
    PlacesServiceError,
    classify_error,
    describe_validation_errors,
)


def _wrapped(cause: Exception) -> PlacesServiceError:
    try:
        raise PlacesServiceError("Failed to search places") from cause
    except PlacesServiceError as exc:
        return exc


def test_classify_quota_by_status() -> None:
    result = classify_error(_wrapped(GooglePlacesError("x", status="RESOURCE_EXHAUSTED")))

    assert (result.status_code, result.code) == (429, "QUOTA_EXCEEDED")


def test_classify_quota_by_message() -> None:
    result = classify_error(_wrapped(RuntimeError("Daily quota reached")))

    assert result.code == "QUOTA_EXCEEDED"


def test_classify_auth_errors() -> None:
    assert classify_error(_wrapped(GooglePlacesError("denied", status_code=403))).code == "INVALID_API_KEY"
    assert classify_error(_wrapped(GooglePlacesError("x", status="REQUEST_DENIED"))).status_code == 401
    assert classify_error(_wrapped(RuntimeError("API key not valid"))).code == "INVALID_API_KEY"


def test_classify_not_found() -> None:
    result = classify_error(_wrapped(GooglePlacesError("missing", status_code=404)))

    assert (result.status_code, result.code) == (404, "PLACE_NOT_FOUND")


def test_classify_fallback_is_internal_error() -> None:
    result = classify_error(_wrapped(ConnectionError("reset by peer")))

    assert (result.status_code, result.code) == (500, "INTERNAL_ERROR")
    assert result.message == "Internal server error occurred."


def test_describe_validation_errors_strips_body_prefix() -> None:
    field, message = describe_validation_errors(
        [{"loc": ("body", "location", "lat"), "msg": "Input should be less than or equal to 90"}]
    )

    assert field == "location.lat"
    assert message == "location.lat: Input should be less than or equal to 90"


def test_describe_validation_errors_strips_value_error_prefix() -> None:
    field, message = describe_validation_errors([{"loc": ("query",), "msg": "Value error, Query is blank"}])

    assert field == "query"
    assert message == "query: Query is blank"


def test_describe_validation_errors_reports_body_for_malformed_json() -> None:
    field, message = describe_validation_errors([{"loc": ("body", 0), "msg": "JSON decode error"}])

    assert field == "body"
    assert message == "body: JSON decode error"
