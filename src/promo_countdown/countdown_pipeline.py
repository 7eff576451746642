"""Shared countdown orchestration used by CLI and web app entry points."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from .countdown.clock import compute_remaining
from .countdown.frames import (
    AnimationMode,
    CountdownFrame,
    generate_frames,
    schedule_for,
    select_mode,
)
from .countdown.raster_animation import generate_raster_frames
from .countdown.style import RenderStyle
from .countdown.svg_animation import generate_svg_frames
from .errors import RenderFailure
from .output import is_animated_format, media_type_for_output_format, provider_for_format
from .output.base import OutputProvider
from .settings import CountdownSettings, GifMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountdownResult:
    content: bytes
    media_type: str
    mode: AnimationMode
    remaining: int


def style_for_settings(settings: CountdownSettings, output_format: str) -> RenderStyle:
    """Resolve the render style; box shadows are only drawn on animated output."""
    shadowed = settings.box_shadow and is_animated_format(output_format)
    style = RenderStyle.default() if shadowed else RenderStyle.flat()
    return style.with_event_name(settings.event_name)


def build_frame_stream(
    frames: list[CountdownFrame],
    mode: AnimationMode,
    output_format: str,
    style: RenderStyle,
) -> Iterator[Any]:
    """Build the frame stream matching the target output format."""
    if output_format == "svg":
        return generate_svg_frames(frames, style)
    return generate_raster_frames(frames, mode, style)


def encode_countdown(
    now: datetime,
    settings: CountdownSettings,
    output_format: str,
    *,
    gif_mode: GifMode | None = None,
    style: RenderStyle | None = None,
    provider: OutputProvider[Any] | None = None,
) -> CountdownResult:
    """
    Compute the remaining time and encode it as a complete image.

    Args:
        now: Current instant
        settings: Service configuration holding the target date
        output_format: One of the supported output format names
        gif_mode: Overrides ``settings.gif_mode`` for animated output
        style: Overrides the style derived from settings
        provider: Overrides the provider resolved from the format

    Returns:
        The fully buffered image and the mode it was generated with

    Raises:
        ValueError: If the output format is not supported
        RenderFailure: If computing or encoding the image fails
    """
    output_format = output_format.lower()
    media_type = media_type_for_output_format(output_format)
    animated = is_animated_format(output_format)
    target_provider = provider or provider_for_format(output_format)

    try:
        remaining = compute_remaining(now, settings.target_date)
        real_countdown = (gif_mode or settings.gif_mode) == "countdown"
        mode = select_mode(remaining, animated=animated, real_countdown=real_countdown)
        schedule = schedule_for(mode, animated=animated)
        logger.debug(
            "Rendering %s: remaining=%ss mode=%s frames=%d",
            output_format,
            remaining,
            mode.value,
            schedule.frame_count,
        )

        frames = generate_frames(max(remaining, 0), schedule.frame_count, mode)
        frame_stream = build_frame_stream(
            frames, mode, output_format, style or style_for_settings(settings, output_format)
        )
        content = target_provider.encode(frame_stream, frame_duration=schedule.frame_duration)
    except Exception as e:
        raise RenderFailure(f"Failed to render {output_format} countdown: {e}") from e

    return CountdownResult(
        content=content,
        media_type=media_type,
        mode=mode,
        remaining=remaining,
    )
