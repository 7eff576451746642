"""Cosmetic pulse effect applied on top of countdown frames."""

import math
from typing import TYPE_CHECKING

from .frames import AnimationMode, CountdownFrame

if TYPE_CHECKING:
    from .style import RenderStyle


def pulse_scale(index: int, period: float, amplitude: float) -> float:
    """Periodic scale factor oscillating around 1.0."""
    return math.sin(index / period) * amplitude + 1


def frame_scale(frame: CountdownFrame, mode: AnimationMode, style: "RenderStyle") -> float:
    """Resolve the text scale for a frame under the given mode."""
    if mode is AnimationMode.COSMETIC_LOOP:
        return pulse_scale(frame.index, style.pulse_period, style.pulse_amplitude)
    if mode is AnimationMode.EXPIRED_LOOP:
        return pulse_scale(
            frame.index, style.expired_pulse_period, style.expired_pulse_amplitude
        )
    return 1.0
