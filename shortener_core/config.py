from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Shortener core settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below

    List fields are read from the environment as JSON arrays, e.g.
    RESERVED_CODES='["admin", "about"]'
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Database (owns the authoritative unique constraint on codes)
    database_url: str = "sqlite:///./url_shortener.db"

    # Code lookup backend
    lookup_backend: str = "sqlalchemy"  # Options: "sqlalchemy", "redis", "memory"
    redis_url: str = "redis://localhost:6379/0"
    redis_key_prefix: str = "url:"

    # Short code generation
    short_code_strategy: str = "words"  # Options: "words", "compact"
    compact_code_length: int = 7
    compact_code_alphabet: str = (
        "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    )
    word_list_path: Optional[str] = None  # None means the bundled word list
    max_generation_attempts: int = 10
    max_conflict_retries: int = 3

    # Top-level application routes that may never be handed out as codes
    reserved_codes: List[str] = [
        "about",
        "admin",
        "api",
        "dashboard",
        "docs",
        "favicon.ico",
        "health",
        "help",
        "login",
        "logout",
        "new",
        "privacy",
        "redoc",
        "robots.txt",
        "settings",
        "signup",
        "sitemap.xml",
        "static",
        "stats",
        "terms",
    ]

    # Query keys that only carry attribution data
    tracking_params: List[str] = [
        "fbclid",
        "gclid",
        "gclsrc",
        "dclid",
        "gbraid",
        "wbraid",
        "msclkid",
        "twclid",
        "igshid",
        "li_fat_id",
        "mc_cid",
        "mc_eid",
        "yclid",
        "_openstat",
        "mkt_tok",
        "vero_id",
        "oly_anon_id",
        "oly_enc_id",
        "rb_clickid",
        "s_cid",
        "wickedid",
    ]
    tracking_param_prefixes: List[str] = [
        "utm_",
        "mtm_",
        "pk_",
        "_hs",
    ]

    # Substrings of destinations that must never be previewed or auto-redirected
    secret_urls: List[str] = []

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
