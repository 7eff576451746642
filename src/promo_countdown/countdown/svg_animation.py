"""SVG frame generators built on top of countdown frame sequences."""

from typing import Iterable, Iterator

from .frames import CountdownFrame
from .style import RenderStyle
from .svg_renderer import SvgRenderer


def generate_svg_frames(
    frames: Iterable[CountdownFrame], style: RenderStyle
) -> Iterator[str]:
    """Render SVG documents for each frame."""
    renderer = SvgRenderer(style)
    for frame in frames:
        yield renderer.render_frame(frame)
