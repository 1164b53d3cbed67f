"""
tldserve Configuration

Process settings come from the environment; the site configuration
(tld, project roots, tunnel services, default site) is loaded from YAML.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional, Tuple
from functools import lru_cache

import yaml
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings

from tldserve.services.wildcard import InvalidPatternError, compile_pattern


DEFAULT_CONFIG_PATH = "~/.config/tldserve/config.yaml"


class ConfigError(Exception):
    """Raised when the site configuration cannot be loaded."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "tldserve"
    debug: bool = False

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000

    # Where the site configuration YAML lives
    config_path: str = DEFAULT_CONFIG_PATH

    # Render an index page for directories without index.html
    directory_listing: bool = False

    class Config:
        env_prefix = "TLDSERVE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


class SiteConfig(BaseModel):
    """Resolution settings shared read-only by every request."""

    tld: str = "test"
    paths: Tuple[str, ...] = ()
    tunnel_services: Tuple[str, ...] = ()
    default: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("tld")
    @classmethod
    def _check_tld(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("tld must not be empty")
        return value

    @field_validator("paths", "tunnel_services", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("paths")
    @classmethod
    def _expand_paths(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(os.path.expanduser(path) for path in value)

    @field_validator("tunnel_services")
    @classmethod
    def _check_tunnel_services(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for service in value:
            try:
                compile_pattern(service)
            except InvalidPatternError as e:
                raise ValueError(str(e)) from e
        return value

    @field_validator("default", mode="before")
    @classmethod
    def _drop_non_string_default(cls, value: Any) -> Any:
        # Anything but a string means "no default site"
        return os.path.expanduser(value) if isinstance(value, str) else None


def load_site_config(path: Path | str | None = None) -> SiteConfig:
    """Load the site configuration from a YAML file.

    A missing or empty file gives the defaults. Anything malformed raises
    ConfigError so a bad tunnel pattern is reported at startup rather
    than silently failing to match at request time.
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH).expanduser()

    if not config_path.exists():
        return SiteConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    try:
        return SiteConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
