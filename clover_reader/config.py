from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = Field(default="local")
    log_level: str = Field(default="INFO")

    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed origins",
    )

    # Supported window sizes (months), ascending
    slabs: List[int] = Field(default_factory=lambda: [1, 3, 6, 12])
    default_months: int = Field(default=6)
    cache_ttl_seconds: float = Field(default=3600.0)

    # "file" reads data_path, "http" calls api_base_url
    data_source: str = Field(default="file")
    data_path: str = Field(default="data/clover.json")

    api_base_url: str = Field(default="http://127.0.0.1:9080")
    api_key: str = Field(default="")
    api_timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CLOVER_",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
