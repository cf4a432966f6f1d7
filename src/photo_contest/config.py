"""
photo_contest.config — Runner settings
======================================

Settings are read, lowest priority first, from defaults, a JSON file
and environment variables (a `.env` file in the working directory is
loaded into the environment first).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger("photo_contest")

# Environment variable -> settings field
ENV_MAPPINGS = {
    "CONTEST_LOG_FILE": "log_file",
    "CONTEST_LOG_LEVEL": "log_level",
    "CONTEST_ECHO_STATUS": "echo_status",
    "CONTEST_STATUS_MODE": "status_mode",
    "CONTEST_TOPIC": "default_topic",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ContestSettings(BaseModel):
    """Settings for running contests from the command line."""

    log_file: Optional[str] = "photo_contest.log"
    log_level: str = "INFO"
    echo_status: bool = True
    status_mode: bool = True
    default_topic: str = Field(default="Snakes", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(str(path), [str(e)], cause=e) from e
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), ["top-level value must be an object"])
    return data


def load_settings(config_path: Optional[str] = None, env_file: Optional[str] = None) -> ContestSettings:
    """
    Load settings from a JSON file and the environment.

    Args:
        config_path: Optional path to a JSON settings file
        env_file: Optional .env file; defaults to searching the working directory

    Returns:
        Validated ContestSettings

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    raw: Dict[str, Any] = {}
    source = "defaults"
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(config_path, ["file not found"])
        raw.update(_read_json(path))
        source = config_path

    overrides = {field: os.environ[key] for key, field in ENV_MAPPINGS.items() if key in os.environ}
    if overrides:
        raw.update(overrides)
        source = f"{source} + environment"

    try:
        settings = ContestSettings(**raw)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError(source, errors, cause=e) from e
    logger.debug(f"Loaded settings from {source}")
    return settings
