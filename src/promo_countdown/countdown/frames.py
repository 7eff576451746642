"""Frame sequence generation for countdown animations."""

from dataclasses import dataclass
from enum import Enum

from ..constants import (
    COUNTDOWN_FRAME_COUNT,
    COUNTDOWN_FRAME_DURATION,
    EXPIRED_FRAME_COUNT,
    EXPIRED_FRAME_DURATION,
    PULSE_FRAME_COUNT,
    PULSE_FRAME_DURATION,
)
from .clock import DecomposedTime, decompose


class AnimationMode(str, Enum):
    """Frame generation policy chosen once per request."""

    COSMETIC_LOOP = "cosmetic_loop"
    REAL_COUNTDOWN = "real_countdown"
    EXPIRED_LOOP = "expired_loop"


@dataclass(frozen=True)
class CountdownFrame:
    """One step of a countdown animation. ``time`` is None once expired."""

    index: int
    time: DecomposedTime | None

    @property
    def expired(self) -> bool:
        return self.time is None


@dataclass(frozen=True)
class FrameSchedule:
    frame_count: int
    frame_duration: int  # milliseconds


_ANIMATED_SCHEDULES: dict[AnimationMode, FrameSchedule] = {
    AnimationMode.COSMETIC_LOOP: FrameSchedule(PULSE_FRAME_COUNT, PULSE_FRAME_DURATION),
    AnimationMode.REAL_COUNTDOWN: FrameSchedule(COUNTDOWN_FRAME_COUNT, COUNTDOWN_FRAME_DURATION),
    AnimationMode.EXPIRED_LOOP: FrameSchedule(EXPIRED_FRAME_COUNT, EXPIRED_FRAME_DURATION),
}

STATIC_SCHEDULE = FrameSchedule(frame_count=1, frame_duration=0)


def generate_frames(
    start_seconds: int, frame_count: int, mode: AnimationMode
) -> list[CountdownFrame]:
    """
    Build the full frame sequence for an animation.

    Args:
        start_seconds: Remaining seconds at generation time
        frame_count: Number of frames to produce
        mode: Generation policy

    Returns:
        List of frames, one per simulated time step

    Raises:
        ValueError: If frame_count is negative, or start_seconds is negative
            outside of EXPIRED_LOOP
    """
    if frame_count < 0:
        raise ValueError(f"frame_count must be non-negative, got {frame_count}")

    if mode is AnimationMode.EXPIRED_LOOP:
        return [CountdownFrame(index=i, time=None) for i in range(frame_count)]

    if start_seconds < 0:
        raise ValueError(
            f"{mode.value} needs non-negative start_seconds, got {start_seconds}"
        )

    if mode is AnimationMode.COSMETIC_LOOP:
        held = decompose(start_seconds)
        return [CountdownFrame(index=i, time=held) for i in range(frame_count)]

    return [
        CountdownFrame(index=i, time=decompose(max(start_seconds - i, 0)))
        for i in range(frame_count)
    ]


def select_mode(remaining: int, *, animated: bool, real_countdown: bool) -> AnimationMode:
    """Pick the generation policy for a request."""
    if remaining <= 0:
        return AnimationMode.EXPIRED_LOOP
    if animated and not real_countdown:
        return AnimationMode.COSMETIC_LOOP
    return AnimationMode.REAL_COUNTDOWN


def schedule_for(mode: AnimationMode, *, animated: bool) -> FrameSchedule:
    """Frame count and per-frame delay for a mode; static images get one frame."""
    if not animated:
        return STATIC_SCHEDULE
    return _ANIMATED_SCHEDULES[mode]
