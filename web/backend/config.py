#!/usr/bin/env python3
"""
Configuration management for the LaneScout web application.
"""

import os
import yaml
from pathlib import Path
from functools import lru_cache
from typing import Dict, Any
from pydantic import BaseModel, Field

from database.database import DEFAULT_DATABASE_URL


class DatabaseConfig(BaseModel):
    """Database configuration."""
    url: str = Field(default=DEFAULT_DATABASE_URL)
    create_tables: bool = Field(default=True)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class RecommendationConfig(BaseModel):
    """Ball recommendation configuration."""
    # Legacy results only clamped at zero; turning this off reproduces them
    clamp_upper_bound: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")


class AppConfig(BaseModel):
    """Main application configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _load_yaml_config() -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = Path(os.environ.get('LANESCOUT_CONFIG', get_project_root() / 'config.yaml'))

    if config_path.exists():
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    return {}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    # Database overrides
    if 'DATABASE_URL' in os.environ:
        config_dict.setdefault('database', {})['url'] = os.environ['DATABASE_URL']

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        config_dict.setdefault('web', {})['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        config_dict.setdefault('web', {})['port'] = int(os.environ['WEB_PORT'])

    if 'RECOMMEND_CLAMP_UPPER' in os.environ:
        config_dict.setdefault('recommendation', {})['clamp_upper_bound'] = _parse_bool(
            os.environ['RECOMMEND_CLAMP_UPPER']
        )

    if 'LOG_LEVEL' in os.environ:
        config_dict.setdefault('logging', {})['level'] = os.environ['LOG_LEVEL']

    return config_dict


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads from YAML file and applies environment variable overrides.
    Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    raw_config = _load_yaml_config()
    raw_config = _apply_env_overrides(raw_config)

    return AppConfig(**raw_config)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
