#!/usr/bin/env python3
"""
Configuration module for the Groq chat proxy.
Loads settings from an optional YAML file plus environment overrides,
validates them with Pydantic and initializes logging.
"""

import os
import sys
import logging
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

CONFIG_FILE = "config.yml"

logger = logging.getLogger("groq-proxy")


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    http_log_level: str = "INFO"


class GroqConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    api_key: Optional[str] = None
    base_url: str = "https://api.groq.com/openai/v1"
    model: str = "llama-3.3-70b-versatile"
    max_tokens: int = 500
    temperature: float = 0.7
    timeout_ms: int = 30000

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: ServerConfig = ServerConfig()
    groq: GroqConfig = GroqConfig()


def apply_env_overrides(config_data: Dict[str, Any], environ=None) -> Dict[str, Any]:
    """Overlay GROQ_API_KEY, GROQ_MODEL and PORT on top of file values."""
    environ = os.environ if environ is None else environ

    if environ.get("GROQ_API_KEY"):
        config_data.setdefault("groq", {})["api_key"] = environ["GROQ_API_KEY"]
    if environ.get("GROQ_MODEL"):
        config_data.setdefault("groq", {})["model"] = environ["GROQ_MODEL"]
    if environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = environ["PORT"]
    return config_data


def load_config(path: Optional[str] = None, environ=None) -> Settings:
    """Load and validate configuration. Exits the process on invalid input."""
    environ = os.environ if environ is None else environ
    path = path or environ.get("GROQ_PROXY_CONFIG", CONFIG_FILE)

    try:
        try:
            with open(path, encoding="utf-8") as file:
                config_data = yaml.safe_load(file) or {}
        except FileNotFoundError:
            # Environment-only deployments are the common case.
            config_data = {}

        if not isinstance(config_data, dict):
            raise yaml.YAMLError(f"top level of {path} must be a mapping")

        config_data = apply_env_overrides(config_data, environ)
        return Settings(
            server=ServerConfig(**(config_data.get("server") or {})),
            groq=GroqConfig(**(config_data.get("groq") or {})),
        )
    except (yaml.YAMLError, ValidationError) as e:
        print(f"Error in configuration: {e}")
        sys.exit(1)


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure logging based on validated configuration."""
    log_level = settings.server.log_level
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level_int,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.setLevel(log_level_int)
    logger.info("Logging level set to %s", log_level)
    return logger
