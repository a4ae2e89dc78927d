"""
Configuration management for ScrapeCore using Pydantic.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ScrapeCore/0.1; +https://github.com/scrapecore/scrapecore)"

# --- Nested Configuration Models ---


class FetcherConfig(BaseModel):
    """Primary HTTP fetch configuration."""

    timeout: float = Field(default=20.0, gt=0, description="HTTP request timeout in seconds.")
    max_body_size: int = Field(
        default=15 * 1024 * 1024,
        gt=0,
        description="Maximum accepted response body size in bytes.",
    )
    proxy_url: Optional[str] = Field(
        default=None,
        description="Proxy used when a caller asks for one. None means the request goes out directly.",
    )
    default_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent sent when the caller does not provide one.",
    )

    @field_validator("proxy_url", mode="before")
    @classmethod
    def empty_proxy_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not str(v).strip():
            return None
        return str(v).strip()


class AlternateReadabilityConfig(BaseModel):
    """Configuration for the alternate readability path and its second fetch."""

    timeout: float = Field(default=60.0, gt=0, description="Timeout of the second fetch in seconds.")
    favor_precision: bool = True
    include_links: bool = True
    include_images: bool = True
    include_tables: bool = True


class ReadabilityConfig(BaseModel):
    """Tuning knobs passed to the heuristic readability engine."""

    min_text_length: int = Field(default=25, ge=0)
    retry_length: int = Field(default=250, ge=0)


class RulesConfig(BaseModel):
    """Domain rule table configuration.

    Entries from ``extra`` come first, then entries from ``rules_file``, then
    the predefined table. Order matters: the first matching domain wins.
    """

    extra: Dict[str, str] = Field(default_factory=dict, description="Domain substring to rule string.")
    rules_file: Optional[Path] = Field(default=None, description="YAML mapping of domain to rule string.")
    use_predefined: bool = Field(default=True, description="Include the built-in domain table.")

    @field_validator("extra")
    @classmethod
    def validate_domains(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Ensure every domain key is usable for substring matching."""
        for domain in v:
            if not domain.strip():
                raise ValueError("rule domains must not be empty")
        return v


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    json_logs: bool = Field(default=False, description="Render console logs as JSON.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "ScrapeCore"
    version: str = "0.1.0"
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    alternate_readability: AlternateReadabilityConfig = Field(default_factory=AlternateReadabilityConfig)
    readability: ReadabilityConfig = Field(default_factory=ReadabilityConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="SCRAPECORE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data or {})


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "scrapecore.yaml",
        current_dir / "scrapecore.yml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed. This prevents configuration errors
    from crashing the application on import.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return Config.from_yaml(config_path)
            except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. "
                    "Falling back to default settings. Please check your config file.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return Config()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


# --- Global Settings Instance ---
settings: "Config" = cast("Config", LazyConfig())
