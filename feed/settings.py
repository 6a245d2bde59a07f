"""Configuration for the headline feed."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, PositiveInt, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROVIDERS = ("news_api", "the_news_api")


class FeedSettings(BaseSettings):
    """헤드라인 피드용 환경 설정."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    news_api_key: Optional[SecretStr] = Field(None, alias="NEWS_API_KEY", description="뉴스 API 인증 키.")
    news_provider: str = Field("news_api", alias="NEWS_PROVIDER", description="프로바이더 식별자 (news_api | the_news_api)")
    news_api_endpoint: str = Field(
        "https://newsapi.org/v2/top-headlines",
        alias="NEWS_API_ENDPOINT",
        description="NewsAPI 엔드포인트",
    )
    the_news_api_endpoint: str = Field(
        "https://api.thenewsapi.com/v1/news/top",
        alias="THE_NEWS_API_ENDPOINT",
        description="TheNewsAPI 엔드포인트",
    )
    news_api_timeout_seconds: PositiveInt = Field(5, alias="NEWS_API_TIMEOUT_SECONDS", description="요청 타임아웃(초)")
    news_default_country: Optional[str] = Field("in", alias="NEWS_DEFAULT_COUNTRY", description="기본 지역 필터")
    news_default_category: str = Field("general", alias="NEWS_DEFAULT_CATEGORY", description="기본 카테고리")
    news_default_page_size: PositiveInt = Field(8, alias="NEWS_DEFAULT_PAGE_SIZE", description="기본 페이지 크기(≤100)")
    news_language: Optional[str] = Field(None, alias="NEWS_LANGUAGE", description="언어 필터 (미설정 시 생략)")
    log_level: str = Field("INFO", alias="LOG_LEVEL", description="로그 레벨.")
    log_json: bool = Field(False, alias="LOG_JSON", description="로그를 JSON 형식으로 출력할지 여부.")

    @field_validator("news_provider")
    @classmethod
    def _validate_provider(cls, value: str) -> str:
        provider = value.strip().lower()
        if provider not in PROVIDERS:
            raise ValueError(f"지원하지 않는 NEWS_PROVIDER입니다: {value}")
        return provider

    @field_validator("news_api_endpoint", "the_news_api_endpoint")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        if "://" not in value:
            raise ValueError("엔드포인트는 유효한 URL이어야 합니다.")
        return value

    @field_validator("news_default_page_size")
    @classmethod
    def _validate_page_size(cls, v: int) -> int:
        if v > 100:
            raise ValueError("NEWS_DEFAULT_PAGE_SIZE는 100 이하여야 합니다.")
        return v


@lru_cache()
def get_settings() -> FeedSettings:
    """환경 변수를 기준으로 FeedSettings 인스턴스를 반환한다."""
    try:
        return FeedSettings()
    except ValidationError as exc:
        raise RuntimeError(f"환경 변수 검증에 실패했습니다: {exc}") from exc


def reset_settings_cache() -> None:
    """Settings LRU 캐시를 초기화한다 (테스트 용도)."""
    get_settings.cache_clear()  # type: ignore[attr-defined]
