import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings read from the YAML file named by MVCMOVIE_CONFIG_FILE.

    A missing variable or a missing file contributes nothing.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] | None = None

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load()

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            self._data = {}
            config_file = os.environ.get("MVCMOVIE_CONFIG_FILE")
            if config_file:
                path = Path(config_file).expanduser()
                if path.exists():
                    self._data = yaml.safe_load(path.read_text()) or {}
        return self._data


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "MvcMovie"
    version: str = "0.1.0"
    description: str = "A movie catalog with Wikipedia summaries"


class DatabaseConfig(BaseModel):
    """Database configuration (nested in Config, uses env_nested_delimiter).

    SQLite paths may start with ~; the parent directory is created on first use.
    """

    url: str = "sqlite+aiosqlite:///~/.mvcmovie/mvcmovie.db"
    echo: bool = False
    auto_migrate: bool = True  # Create missing tables at startup
    seed: bool = False  # Insert the sample movies into an empty table at startup


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from MVCMOVIE_LOG_FILE env var."""
        return os.environ.get("MVCMOVIE_LOG_FILE")


class SummaryConfig(BaseModel):
    """Wikipedia summary lookup (nested in Config, uses env_nested_delimiter)."""

    endpoint: str = "https://en.wikipedia.org/w/api.php"
    timeout: float = Field(default=3.0, gt=0)  # Seconds, bounds the whole lookup
    cache_ttl: float = Field(default=3600.0, ge=0)  # Seconds; 0 disables caching
    cache_max_entries: int = Field(default=1024, ge=1)
    user_agent: str = "MvcMovie/0.1 (movie catalog)"


class Config(BaseSettings):
    # These are BaseModel, so env_nested_delimiter handles their env vars
    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    summary: SummaryConfig = SummaryConfig()

    model_config = {
        "env_prefix": "MVCMOVIE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows MVCMOVIE_DATABASE__URL override
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - MVCMOVIE_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


# Third-party loggers that are only interesting when something goes wrong
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "aiosqlite", "sqlalchemy.engine")


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so that every logger picks
    up the handlers.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
