"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    GOOGLE_PLACES_API_KEY: str
    GOOGLE_PLACES_BASE_URL: str = "https://places.googleapis.com/v1"
    GOOGLE_PLACES_TIMEOUT_SECONDS: int = 10
    GOOGLE_PLACES_LANGUAGE_CODE: str = ""
    REQUEST_TIMEOUT_SECONDS: int = 60
    EXTERNAL_API_TIMEOUT_SECONDS: int = 15
    SERVICE_NAME: str = "AI Agent Location Services API"
    APP_ENV: str = "development"
    DOCS_MODE: str = "disabled"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ALLOW_ORIGINS: str = "*"
    CORS_ALLOW_METHODS: str = "GET,POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    ENABLE_HSTS: bool = False
    HSTS_MAX_AGE_SECONDS: int = 31536000
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("GOOGLE_PLACES_API_KEY")
    @classmethod
    def _require_google_places_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("GOOGLE_PLACES_API_KEY environment variable is required")
        return value.strip()

    @field_validator("GOOGLE_PLACES_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("PORT", mode="before")
    @classmethod
    def _clamp_port(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 3000
        except (TypeError, ValueError):
            numeric = 3000
        return min(65535, max(1, numeric))

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
