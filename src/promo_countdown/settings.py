"""Process-wide configuration loaded from the environment."""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, cast

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_EVENT_NAME, DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TARGET_DATE
from .errors import ConfigError

GifMode = Literal["pulse", "countdown"]
GIF_MODES: tuple[str, ...] = ("pulse", "countdown")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CountdownSettings:
    """Immutable service configuration, built once at startup."""

    target_date: datetime
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    gif_mode: GifMode = "pulse"
    event_name: str = DEFAULT_EVENT_NAME
    box_shadow: bool = True

    @classmethod
    def from_env(cls) -> "CountdownSettings":
        """
        Build settings from environment variables (and a ``.env`` file if present).

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            target_date=parse_target_date(os.getenv("COUNTDOWN_TARGET_DATE", DEFAULT_TARGET_DATE)),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT))),
            gif_mode=parse_gif_mode(os.getenv("COUNTDOWN_GIF_MODE", "pulse")),
            event_name=os.getenv("COUNTDOWN_EVENT_NAME", DEFAULT_EVENT_NAME),
            box_shadow=_parse_bool("COUNTDOWN_BOX_SHADOW", os.getenv("COUNTDOWN_BOX_SHADOW", "true")),
        )


def parse_target_date(text: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware instant."""
    try:
        return parse_instant(text)
    except ValueError as e:
        raise ConfigError(f"Invalid target date '{text}': {e}") from e


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    Naive values are read as local time and pinned to the UTC offset in force
    on that date, so instants on either side of a DST change subtract correctly.

    Raises:
        ValueError: If text is not ISO 8601
    """
    parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.astimezone()
    return parsed


def parse_gif_mode(value: str) -> GifMode:
    mode = value.strip().lower()
    if mode not in GIF_MODES:
        raise ConfigError(f"Invalid GIF mode '{value}'. Choose from: {', '.join(GIF_MODES)}")
    return cast(GifMode, mode)


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"Invalid port '{value}': must be an integer")
    if not 0 < port < 65536:
        raise ConfigError(f"Invalid port {port}: must be between 1 and 65535")
    return port


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: '{value}'")
