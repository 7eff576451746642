"""Countdown time arithmetic, frame generation and rendering."""

from .clock import DecomposedTime, compute_remaining, decompose, pad_unit
from .frames import (
    AnimationMode,
    CountdownFrame,
    FrameSchedule,
    generate_frames,
    schedule_for,
    select_mode,
)
from .pulse import frame_scale, pulse_scale
from .raster_animation import generate_raster_frames
from .renderer import Renderer, unit_labels
from .style import RenderStyle
from .svg_animation import generate_svg_frames
from .svg_renderer import SvgRenderer

__all__ = [
    "AnimationMode",
    "CountdownFrame",
    "DecomposedTime",
    "FrameSchedule",
    "Renderer",
    "RenderStyle",
    "SvgRenderer",
    "compute_remaining",
    "decompose",
    "frame_scale",
    "generate_frames",
    "generate_raster_frames",
    "generate_svg_frames",
    "pad_unit",
    "pulse_scale",
    "schedule_for",
    "select_mode",
    "unit_labels",
]
