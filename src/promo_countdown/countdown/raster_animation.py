"""Raster (Pillow) frame generators built on top of countdown frame sequences."""

from typing import Iterable, Iterator

from PIL import Image

from .frames import AnimationMode, CountdownFrame
from .pulse import frame_scale
from .renderer import Renderer
from .style import RenderStyle


def generate_raster_frames(
    frames: Iterable[CountdownFrame], mode: AnimationMode, style: RenderStyle
) -> Iterator[Image.Image]:
    """Render raster frame payloads, applying the mode's pulse effect."""
    renderer = Renderer(style)
    for frame in frames:
        yield renderer.render_frame(frame, scale=frame_scale(frame, mode, style))
