from functools import lru_cache
from pathlib import Path
from typing import List, Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

PACKAGE_DIR = Path(__file__).resolve().parents[1]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ArtisanHub"
    DEBUG: bool = False
    GIT_SHA: str = ""            # empty: health falls back to `git rev-parse`
    PORT: int = 3001

    # HTTP
    ALLOWED_ORIGINS: str = "http://localhost:3000"   # CSV
    PUBLIC_BASE_URL: str = ""                        # storefront origin used in share links

    # Mongo (empty URI = skip connection)
    MONGO_URI: str = ""
    MONGO_DB: str = "artisan_hub"

    # Redis (optional)
    REDIS_URL: str = ""
    translation_cache_ttl: int = 7 * 24 * 3600   # 7 days
    translation_cache_prefix: str = "tr"

    # OpenAI
    OPENAI_API_KEY: str = ""
    openai_timeout_s: int = 30  # seconds
    OPENAI_TEXT_MODEL: str = "gpt-4o-mini"
    OPENAI_VISION_MODEL: str = "gpt-4o-mini"
    OPENAI_TRANSCRIBE_MODEL: str = "whisper-1"

    # Fixtures + uploads
    DATA_DIR: str = str(PACKAGE_DIR / "data")
    UPLOAD_DIR: str = "uploads"
    upload_max_files: int = 10
    upload_max_bytes: int = 5 * 1024 * 1024     # 5MB per file
    image_max_width: int = 800
    image_max_height: int = 600
    image_quality: int = 85

    # Social
    social_post_ttl_hours: int = 24

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
