"""Project-level configuration and settings loading."""

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

PACKAGE_ROOT = Path(__file__).resolve().parent
RESOURCES_DIR = PACKAGE_ROOT / "resources"

DEFAULT_MESSAGES_NAME = "messages"
DEFAULT_EXCEPTIONS_NAME = "exceptions"
DEFAULT_LABEL = "info"

# Source context around a failing line: 3 before, the line itself, 3 after.
LEADING_LINES = 3
SURROUNDING_LINES = 7

DEFAULT_MAX_CHAIN_DEPTH = 32

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    """Collector settings, fixed before any record is captured."""

    rich_rendering: bool = False
    chain_exceptions: bool = False
    editor_link: str | None = None
    max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def load_settings() -> Settings:
    """Build Settings from DEBUGBAR_* environment variables."""
    from .formatting.links import check_template

    editor_link = os.getenv("DEBUGBAR_EDITOR_LINK") or None
    if editor_link is not None:
        check_template(editor_link)

    return Settings(
        rich_rendering=_env_bool("DEBUGBAR_RICH_RENDERING", False),
        chain_exceptions=_env_bool("DEBUGBAR_CHAIN_EXCEPTIONS", False),
        editor_link=editor_link,
        max_chain_depth=_env_int("DEBUGBAR_MAX_CHAIN_DEPTH", DEFAULT_MAX_CHAIN_DEPTH),
    )
