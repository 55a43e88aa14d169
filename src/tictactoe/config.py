import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv

from .presentation import Theme

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ConfigError(Exception):
    """Raised when an environment setting has an unusable value."""


@dataclass(frozen=True)
class Settings:
    default_theme: Theme = Theme.LIGHT
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)
    host: str = "127.0.0.1"
    port: int = 8000


# PUBLIC_INTERFACE
def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment (.env is loaded on import)."""
    env = os.environ if environ is None else environ

    theme_name = env.get("TTT_DEFAULT_THEME", Theme.LIGHT.value).strip().lower()
    try:
        theme = Theme(theme_name)
    except ValueError:
        raise ConfigError(f"TTT_DEFAULT_THEME must be 'light' or 'dark', got {theme_name!r}") from None

    log_level = env.get("TTT_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"TTT_LOG_LEVEL is not a logging level: {log_level!r}")

    port_text = env.get("TTT_PORT", "8000").strip()
    if not port_text.isdigit() or not 0 < int(port_text) < 65536:
        raise ConfigError(f"TTT_PORT must be a TCP port number, got {port_text!r}")

    origins = tuple(o.strip() for o in env.get("TTT_CORS_ORIGINS", "*").split(",") if o.strip())
    return Settings(
        default_theme=theme,
        log_level=log_level,
        cors_origins=origins or ("*",),
        host=env.get("TTT_HOST", "127.0.0.1").strip() or "127.0.0.1",
        port=int(port_text),
    )


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process."""
    return load_settings()


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once and apply level to the package logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tictactoe").setLevel(level)
