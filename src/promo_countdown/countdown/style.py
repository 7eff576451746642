"""Rendering configuration and theming."""

from dataclasses import dataclass, replace

from ..constants import (
    COUNTDOWN_PULSE_AMPLITUDE,
    COUNTDOWN_PULSE_PERIOD,
    DEFAULT_EVENT_NAME,
    EXPIRED_PULSE_AMPLITUDE,
    EXPIRED_PULSE_PERIOD,
)

Color = tuple[int, int, int]
ColorA = tuple[int, int, int, int]


@dataclass(frozen=True)
class RenderStyle:
    """Visual parameters shared by the raster and SVG renderers."""

    width: int
    height: int
    box_width: int
    box_height: int
    box_gap: int
    box_top: int
    number_offset: int  # baseline of the number, from box top
    label_offset: int  # baseline of the label, from box top
    gradient: tuple[Color, Color]
    expired_gradient: tuple[Color, Color]
    box_fill: ColorA
    shadow_color: ColorA
    shadow_blur: int
    shadow_offset: int
    text_color: Color
    number_font_size: int
    label_font_size: int
    expired_font_size: int
    box_shadow: bool
    labels: tuple[str, str, str, str]
    expired_message: str
    pulse_period: float
    pulse_amplitude: float
    expired_pulse_period: float
    expired_pulse_amplitude: float

    @property
    def boxes_left(self) -> int:
        """X position of the first box so the row is centred."""
        return (self.width - (self.box_width * 4 + self.box_gap * 3)) // 2

    def box_x(self, index: int) -> int:
        return self.boxes_left + (self.box_width + self.box_gap) * index

    def with_event_name(self, event_name: str) -> "RenderStyle":
        return replace(self, expired_message=expired_message_for(event_name))

    @staticmethod
    def default() -> "RenderStyle":
        return RenderStyle(
            width=600,
            height=150,
            box_width=120,
            box_height=100,
            box_gap=10,
            box_top=25,
            number_offset=60,
            label_offset=85,
            gradient=((0xFF, 0x6B, 0x6B), (0xFF, 0x8E, 0x53)),
            expired_gradient=((0x4C, 0xAF, 0x50), (0x45, 0xB7, 0xD1)),
            box_fill=(255, 255, 255, 64),
            shadow_color=(0, 0, 0, 51),
            shadow_blur=5,
            shadow_offset=4,
            text_color=(255, 255, 255),
            number_font_size=48,
            label_font_size=14,
            expired_font_size=42,
            box_shadow=True,
            labels=("DAYS", "HOURS", "MINUTES", "SECONDS"),
            expired_message=expired_message_for(DEFAULT_EVENT_NAME),
            pulse_period=COUNTDOWN_PULSE_PERIOD,
            pulse_amplitude=COUNTDOWN_PULSE_AMPLITUDE,
            expired_pulse_period=EXPIRED_PULSE_PERIOD,
            expired_pulse_amplitude=EXPIRED_PULSE_AMPLITUDE,
        )

    @staticmethod
    def flat() -> "RenderStyle":
        """Default style without box shadows, as used by the static images."""
        return replace(RenderStyle.default(), box_shadow=False)


def expired_message_for(event_name: str) -> str:
    return f"{event_name.upper()} IS LIVE!"


def to_hex(color: Color) -> str:
    return f"#{color[0]:02x}{color[1]:02x}{color[2]:02x}"
