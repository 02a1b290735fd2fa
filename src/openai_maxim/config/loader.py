"""
Maxim configuration management utilities.

Settings come from the MAXIM_API_KEY and MAXIM_LOG_REPO_ID environment
variables. Values missing from the environment fall back to the ``maxim``
section of a maxim_config.yaml file at the project root, when one exists.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

API_KEY_ENV = "MAXIM_API_KEY"
LOG_REPO_ID_ENV = "MAXIM_LOG_REPO_ID"


class MaximSettings(BaseModel):
    """Credentials needed to open a Maxim log repository."""

    api_key: str = Field(min_length=1)
    log_repo_id: str = Field(min_length=1)


def get_config_path() -> Path:
    """
    Get the path to the Maxim configuration file.

    Looks for maxim_config.yaml in the current working directory (project root).
    """
    return Path(os.getcwd()) / "maxim_config.yaml"


def _load_file_section(config_path: Path) -> dict:
    if not config_path.exists():
        return {}

    logger.debug(f"Loading config from: {config_path}")
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Error loading Maxim config: {e}") from e

    section = config.get("maxim") if isinstance(config, dict) else None
    return section if isinstance(section, dict) else {}


def load_maxim_settings(config_path: Path | None = None) -> MaximSettings:
    """
    Load Maxim credentials.

    Args:
        config_path: YAML file to fall back to; defaults to get_config_path()

    Returns:
        MaximSettings with api_key and log_repo_id

    Raises:
        ValueError: If api_key or log_repo_id is missing or empty
        RuntimeError: If the config file cannot be parsed
    """
    api_key = os.environ.get(API_KEY_ENV)
    log_repo_id = os.environ.get(LOG_REPO_ID_ENV)

    if not api_key or not log_repo_id:
        section = _load_file_section(config_path or get_config_path())
        api_key = api_key or section.get("api_key")
        log_repo_id = log_repo_id or section.get("log_repo_id")

    missing_fields = []
    if not api_key:
        missing_fields.append(API_KEY_ENV)
    if not log_repo_id:
        missing_fields.append(LOG_REPO_ID_ENV)

    if missing_fields:
        raise ValueError(
            f"{' and '.join(missing_fields)} must be set. "
            "Export them or add a 'maxim' section to maxim_config.yaml."
        )

    return MaximSettings(api_key=str(api_key), log_repo_id=str(log_repo_id))
