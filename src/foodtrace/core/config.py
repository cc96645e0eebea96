"""Configuration management with pydantic-settings."""

from functools import lru_cache

from pydantic import BaseModel as PydanticBaseModel
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ApiSettings(PydanticBaseModel):
    """
    REST backend connection settings.
    Env vars (with env_nested_delimiter='__'): API__BASE_URL, API__TIMEOUT, API__VERIFY_SSL.
    """

    base_url: str = Field(default="http://localhost:8000")
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds; unset means requests never time out.",
    )
    verify_ssl: bool = Field(default=True)

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value

    @field_validator("timeout")
    @classmethod
    def check_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value


class AuthSettings(PydanticBaseModel):
    """
    Access token for the REST backend.
    Env var: AUTH__TOKEN. Missing means an empty token; the backend rejects such requests.
    """

    token: str = Field(default="")


class Settings(BaseSettings):
    """Application settings with nested configuration."""

    app_name: str = Field(default="Food Trace Admin")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    api: ApiSettings = Field(default_factory=ApiSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)

    model_config = {
        "env_file": ".env",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings.

    Settings are read once per process. Tests that change the environment call
    ``get_settings.cache_clear()``; ``tests/conftest.py`` does so after each test.
    """
    return Settings()
