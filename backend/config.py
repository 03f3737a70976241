from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    gemini_api_key: str = Field(
        "",
        validation_alias=AliasChoices("gemini_api_key", "ai_integrations_gemini_api_key"),
    )
    gemini_base_url: str | None = Field(
        None,
        validation_alias=AliasChoices("gemini_base_url", "ai_integrations_gemini_base_url"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.3
    gemini_max_output_tokens: int = 4096

    max_upload_size_mb: int = 5
    resume_char_limit: int = 15000
    job_description_char_limit: int = 5000
    min_resume_text_length: int = 5

    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:5000",
        "http://localhost:3000",
    ]
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, value):
        """Accept CORS_ORIGINS as a JSON list or a comma-separated string."""
        if not isinstance(value, str):
            return value
        if value.startswith("["):
            import json
            return json.loads(value)
        return [o.strip() for o in value.split(",") if o.strip()]

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
