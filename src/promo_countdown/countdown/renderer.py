"""Renderer for drawing countdown frames using Pillow."""

import logging
import os
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from .clock import DecomposedTime
from .frames import CountdownFrame
from .style import Color, RenderStyle

logger = logging.getLogger(__name__)

_FONT_CANDIDATES = (
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Arial_Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=64)
def load_font(size: int) -> Font:
    """Load a bold font at the given pixel size, falling back to Pillow's default."""
    extra = os.getenv("COUNTDOWN_FONT_PATH")
    candidates = ((extra,) if extra else ()) + _FONT_CANDIDATES
    for font_path in candidates:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError:
            continue
    logger.warning("No TrueType fonts found, using default font")
    return ImageFont.load_default(size=size)


def unit_labels(time: DecomposedTime, labels: tuple[str, str, str, str]) -> list[tuple[str, str]]:
    """Pair each padded unit value with its label, days first."""
    return list(zip(time.padded(), labels))


class Renderer:
    """Renders countdown frames as PIL Images."""

    def __init__(self, style: RenderStyle):
        """
        Initialize renderer.

        Args:
            style: Rendering configuration and theming
        """
        self.style = style
        self.width = style.width
        self.height = style.height
        self._background = _horizontal_gradient(self.width, self.height, *style.gradient)
        self._expired_background = _horizontal_gradient(
            self.width, self.height, *style.expired_gradient
        )
        self._shadow: Image.Image | None = None

    def render_frame(self, frame: CountdownFrame, scale: float = 1.0) -> Image.Image:
        """
        Render one frame.

        Args:
            frame: The frame to draw; expired frames show the live message
            scale: Text scale factor from the pulse effect

        Returns:
            RGB PIL Image of the frame
        """
        if frame.time is None:
            return self._render_expired(scale)
        return self._render_countdown(frame.time, scale)

    def _render_countdown(self, time: DecomposedTime, scale: float) -> Image.Image:
        img = self._background.copy().convert("RGBA")

        if self.style.box_shadow:
            img = Image.alpha_composite(img, self._shadow_layer())

        overlay = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay, "RGBA")

        number_font = load_font(int(self.style.number_font_size * scale))
        label_font = load_font(self.style.label_font_size)
        top = self.style.box_top

        for index, (value, label) in enumerate(unit_labels(time, self.style.labels)):
            x = self.style.box_x(index)
            draw.rectangle(
                [x, top, x + self.style.box_width - 1, top + self.style.box_height - 1],
                fill=self.style.box_fill,
            )
            center_x = x + self.style.box_width / 2
            self._draw_centered(draw, value, number_font, center_x, top + self.style.number_offset)
            self._draw_centered(draw, label, label_font, center_x, top + self.style.label_offset)

        combined = Image.alpha_composite(img, overlay)
        return combined.convert("RGB")

    def _render_expired(self, scale: float) -> Image.Image:
        img = self._expired_background.copy()
        draw = ImageDraw.Draw(img)
        font = load_font(int(self.style.expired_font_size * scale))
        self._draw_centered(
            draw, self.style.expired_message, font, self.width / 2, self.height / 2 + 5
        )
        return img

    def _draw_centered(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        font: Font,
        center_x: float,
        baseline: float,
    ) -> None:
        """Draw text horizontally centred on center_x with its bottom on baseline."""
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        x = center_x - text_width / 2 - bbox[0]
        y = baseline - bbox[3]
        draw.text((x, y), text, font=font, fill=self.style.text_color)

    def _shadow_layer(self) -> Image.Image:
        """Blurred drop shadow under the four boxes; identical for every frame."""
        if self._shadow is None:
            layer = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
            draw = ImageDraw.Draw(layer, "RGBA")
            top = self.style.box_top + self.style.shadow_offset
            for index in range(4):
                x = self.style.box_x(index)
                draw.rectangle(
                    [x, top, x + self.style.box_width - 1, top + self.style.box_height - 1],
                    fill=self.style.shadow_color,
                )
            self._shadow = layer.filter(ImageFilter.GaussianBlur(self.style.shadow_blur))
        return self._shadow


def _horizontal_gradient(width: int, height: int, start: Color, end: Color) -> Image.Image:
    img = Image.new("RGB", (width, height), start)
    draw = ImageDraw.Draw(img)
    span = max(1, width - 1)
    for x in range(width):
        t = x / span
        color = tuple(round(a + (b - a) * t) for a, b in zip(start, end))
        draw.line([(x, 0), (x, height - 1)], fill=color)
    return img
