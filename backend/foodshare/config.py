from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when required startup configuration is missing or invalid."""


class Settings(BaseSettings):
    # Required: the hosted Postgres endpoint and the secret its auth service signs tokens with
    DATABASE_URL: str
    JWT_SECRET: str

    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = "authenticated"

    FRONTEND_URL: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {"env_file": ".env", "extra": "ignore"}


def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            ) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()
