from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API keys
    groq_api_key: str = Field(...)

    # Generation backend
    llm_model: str = "llama-3.1-8b-instant"
    llm_temperature: float = 0.6
    llm_max_tokens: int = 350
    llm_top_p: float = 1.0
    llm_frequency_penalty: float = 1.0
    llm_presence_penalty: float = 1.0
    generation_timeout_seconds: float = 60.0

    # Object storage (S3 compatible)
    s3_bucket_endpoint: str = "http://localhost:9000"
    s3_access_key_id: str | None = None
    s3_secret_access_key: str | None = None
    s3_bucket: str = "files"
    s3_use_ssl: bool = False

    # Applicant context sessions
    redis_url: str = "redis://localhost:6379/0"
    context_backend: Literal["redis", "memory"] = "redis"
    context_ttl_seconds: int = 60 * 60

    # App environment
    env: str = "development"
    log_level: str = "INFO"
    port: int = 4000


settings = Settings()
