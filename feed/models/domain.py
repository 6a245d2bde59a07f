"""Domain models for the headline feed."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

if TYPE_CHECKING:  # pragma: no cover
    from feed.settings import FeedSettings


RawArticle = Dict[str, Any]


class FilterParams(BaseModel):
    """피드 세션 단위의 조회 조건 (변경 시 페이지네이션을 처음부터 다시 시작)."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="카테고리 필터 (e.g., general, sports)")
    country: Optional[str] = Field(None, description="지역(로케일) 제한. 없으면 전역 조회")
    page_size: int = Field(..., description="페이지 크기")
    api_key: SecretStr = Field(..., description="프로바이더 API 키")
    language: Optional[str] = Field(None, description="언어 필터")

    @field_validator("country", "language")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @classmethod
    def from_settings(cls, settings: "FeedSettings", **overrides: Any) -> "FilterParams":
        if settings.news_api_key is None and "api_key" not in overrides:
            raise ValueError("NEWS_API_KEY가 설정되지 않았습니다.")
        values: Dict[str, Any] = {
            "category": settings.news_default_category,
            "country": settings.news_default_country,
            "page_size": int(settings.news_default_page_size),
            "api_key": settings.news_api_key,
            "language": settings.news_language,
        }
        values.update(overrides)
        return cls(**values)


class Article(BaseModel):
    """Canonical display record; every field is a string (possibly empty)."""

    title: str = ""
    description: str = ""
    image_url: str = ""
    url: str = ""
    author: str = ""
    published_at: str = ""
    source_name: str = ""


class FeedStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADING_MORE = "loading_more"
    READY = "ready"
    ERROR = "error"


class FeedState(BaseModel):
    """Accumulated feed for one filter configuration."""

    articles: List[Article] = Field(default_factory=list)
    current_page: int = 1
    total_available: int = 0
    can_load_more: bool = False
    notice: Optional[str] = None
    error: Optional[str] = None
    is_loading: bool = False
    status: FeedStatus = FeedStatus.IDLE
    generation: int = Field(0, description="필터 변경마다 증가; 늦게 도착한 응답 폐기용")
    locale_fallback: bool = Field(False, description="지역 결과가 없어 전역 헤드라인을 보여주는 중인지 여부")


class ResolvedPage(BaseModel):
    """Outcome of one resolve call (after an optional locale fallback)."""

    items: List[Any] = Field(default_factory=list)
    reported_total: Optional[int] = None
    notice: Optional[str] = None
    used_locale: bool = False
