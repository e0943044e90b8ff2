"""Shared configuration loaded from .env"""

import json
import os
import warnings
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from .types import RemotesConfig

# Make environment loading explicit with opt-out mechanism
if os.getenv("GITLINKS_AUTO_LOAD_DOTENV", "true").lower() == "true":
    load_dotenv()


def _get_int(env_var: str, default: int, name: str) -> int:
    """Safely convert environment variable to int with fallback.

    Args:
        env_var: Environment variable name
        default: Default value if env var is not set or invalid
        name: Human-readable name for error messages

    Returns:
        Integer value from env var or default
    """
    value = os.getenv(env_var, str(default))
    try:
        result = int(value)
        if result < 0:
            warnings.warn(f"{name} must be non-negative, got {result}. Using default {default}.")
            return default
        return result
    except ValueError:
        warnings.warn(f"Invalid {env_var} value '{value}', using default {default}")
        return default


# Settings directory
GITLINKS_HOME = Path(os.getenv("GITLINKS_HOME", os.path.expanduser("~/.gitlinks")))

# User-defined remotes (JSON list of remote entries)
REMOTES_CONFIG_FILE = Path(
    os.getenv("GITLINKS_REMOTES_FILE", str(GITLINKS_HOME / "remotes.json"))
)

LOG_LEVEL = os.getenv("GITLINKS_LOG_LEVEL", "WARNING").upper()

# API Server configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = _get_int("API_PORT", 8000, "API_PORT")


def load_remotes_config(path: Path | str | None = None) -> list[RemotesConfig]:
    """Load user-defined remotes from a JSON settings file.

    The file holds either a list of remote entries or an object with a
    ``"remotes"`` list. Entries that fail validation are skipped with a
    warning so one typo doesn't disable every custom remote.

    Args:
        path: Settings file; defaults to REMOTES_CONFIG_FILE

    Returns:
        Validated remote entries, or an empty list if the file doesn't exist

    Raises:
        ValueError: If the file isn't valid JSON or has the wrong shape
    """
    path = Path(path) if path is not None else REMOTES_CONFIG_FILE
    if not path.exists():
        return []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Failed to read remotes config {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("remotes", [])
    if not isinstance(data, list):
        raise ValueError(f"Remotes config {path} must be a list of remote entries")

    remotes = []
    for index, item in enumerate(data):
        try:
            remotes.append(RemotesConfig.model_validate(item))
        except ValidationError as e:
            warnings.warn(f"Skipping invalid remote #{index} in {path}: {e}")
    return remotes
