"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGION_KEYWORDS = [
    "vietnam",
    "việt nam",
    "viet nam",
    "vietnamese",
    "việt",
    "viet",
    "hanoi",
    "hà nội",
    "ha noi",
    "ho chi minh",
    "hồ chí minh",
    "saigon",
    "sài gòn",
    "sai gon",
    "đà nẵng",
    "da nang",
    "hue",
    "huế",
]

DEFAULT_IMPORTANT_KEYWORDS = [
    "tin tức",
    "thời sự",
    "chính trị",
    "kinh tế",
    "tài chính",
    "thế giới",
    "quốc tế",
    "thể thao",
    "bóng đá",
    "giải trí",
    "âm nhạc",
    "điện ảnh",
]

# Last-resort glossary for the dictionary translator (source term -> Vietnamese)
DEFAULT_GLOSSARY = {
    "Vietnam": "Việt Nam",
    "Vietnamese": "Việt Nam",
    "Hanoi": "Hà Nội",
    "Ho Chi Minh City": "Thành phố Hồ Chí Minh",
    "Saigon": "Sài Gòn",
    "bloc": "lô",
    "contract": "hợp đồng",
    "production": "sản xuất",
    "offshore": "ngoài khơi",
    "signs": "ký kết",
    "signed": "đã ký",
    "sign": "ký",
    "economy": "kinh tế",
    "economic": "kinh tế",
    "politics": "chính trị",
    "political": "chính trị",
    "government": "chính phủ",
    "energy": "năng lượng",
    "oil": "dầu",
    "gas": "khí đốt",
    "partage": "chia sẻ",
    "share": "chia sẻ",
    "company": "công ty",
    "japanese": "Nhật Bản",
    "french": "Pháp",
    "american": "Mỹ",
    "china": "Trung Quốc",
    "chinese": "Trung Quốc",
    "news": "tin tức",
    "latest": "mới nhất",
    "update": "cập nhật",
    "president": "chủ tịch",
    "minister": "bộ trưởng",
    "ministry": "bộ",
    "agreement": "thỏa thuận",
    "cooperation": "hợp tác",
    "development": "phát triển",
    "bonjour": "xin chào",
    "merci": "cảm ơn",
    "France": "Pháp",
    "你好": "xin chào",
    "谢谢": "cảm ơn",
    "中国": "Trung Quốc",
    "北京": "Bắc Kinh",
    "こんにちは": "xin chào",
    "ありがとう": "cảm ơn",
    "日本": "Nhật Bản",
    "東京": "Tokyo",
    "Hallo": "xin chào",
    "Danke": "cảm ơn",
    "Deutschland": "Đức",
    "Привет": "xin chào",
    "Спасибо": "cảm ơn",
    "Россия": "Nga",
    "Москва": "Mátxcơva",
    "Hola": "xin chào",
    "Gracias": "cảm ơn",
    "España": "Tây Ban Nha",
    "Ciao": "xin chào",
    "Grazie": "cảm ơn",
    "Italia": "Ý",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # News providers
    news_api_key: str = Field(default="", description="NewsAPI.org API key")
    news_api_base_url: str = Field(
        default="https://newsapi.org/v2", description="Base URL for NewsAPI"
    )
    gnews_api_key: str = Field(default="", description="GNews API key (secondary provider)")
    gnews_base_url: str = Field(
        default="https://gnews.io/api/v4", description="Base URL for GNews"
    )
    provider_timeout: float = Field(default=15.0, description="Per-provider HTTP timeout in seconds")
    request_budget_seconds: float = Field(
        default=35.0, description="Overall time allowed for the news provider chain"
    )
    page_size: int = Field(default=50, ge=1, le=100, description="Articles requested per fetch")
    degraded_mode_latch: bool = Field(
        default=False,
        description="Serve mock data for the rest of the process after all providers fail once",
    )

    # Translation providers
    google_translate_url: str = Field(
        default="https://translate.googleapis.com/translate_a/single",
        description="Primary translation endpoint",
    )
    mymemory_url: str = Field(
        default="https://api.mymemory.translated.net/get",
        description="Secondary translation endpoint",
    )
    libre_translate_url: str | None = Field(
        default=None, description="Optional LibreTranslate endpoint (POST JSON)"
    )
    libre_translate_api_key: str = Field(default="", description="Optional LibreTranslate key")
    translation_timeout: float = Field(default=10.0, description="Per-call translation timeout")
    translation_budget_seconds: float = Field(
        default=45.0, description="Overall time allowed for translating one response"
    )
    translation_concurrency: int = Field(
        default=4, ge=1, description="Articles translated concurrently"
    )
    translation_glossary: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_GLOSSARY),
        description="Dictionary fallback table (source term -> target term)",
    )

    # Regional relevance
    target_language: str = Field(default="vi", description="Article and translation language")
    region_term: str = Field(default="Vietnam", description="Term prepended to boost queries")
    region_boost: bool = Field(default=True, description="Prepend region term to queries")
    region_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REGION_KEYWORDS),
        description="Keywords marking an article or query as Vietnam related",
    )
    important_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IMPORTANT_KEYWORDS),
        description="Phrases kept when simplifying a query",
    )

    # Application Configuration
    app_title: str = Field(default="VTV News", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
