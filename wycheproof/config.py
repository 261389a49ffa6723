# wycheproof/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Corpus
    vector_dir: str = Field(
        default="testvectors",
        validation_alias="WYCHEPROOF_VECTOR_DIR",
    )
    SKIP_UNSUPPORTED_HASHES: bool = True

    # Runner
    MAX_CONCURRENCY: int = Field(default=8, ge=1)
    CASE_TIMEOUT: float = 30.0   # seconds, per test case

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


settings = Settings()
