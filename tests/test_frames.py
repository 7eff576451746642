"""Tests for frame sequence generation and mode selection."""

import math

import pytest

from promo_countdown.countdown import (
    AnimationMode,
    CountdownFrame,
    RenderStyle,
    frame_scale,
    generate_frames,
    pulse_scale,
    schedule_for,
    select_mode,
)


def test_real_countdown_decrements_one_second_per_frame():
    frames = generate_frames(125, 5, AnimationMode.REAL_COUNTDOWN)

    assert [f.time.total_seconds for f in frames] == [125, 124, 123, 122, 121]
    assert [f.time.seconds for f in frames] == [5, 4, 3, 2, 1]
    assert all(f.time.minutes == 2 for f in frames)
    assert all(f.time.days == 0 and f.time.hours == 0 for f in frames)
    assert [f.index for f in frames] == [0, 1, 2, 3, 4]


def test_real_countdown_clamps_at_zero():
    """Trailing frames hold at zero instead of going negative or expiring."""
    frames = generate_frames(2, 5, AnimationMode.REAL_COUNTDOWN)

    assert [f.time.total_seconds for f in frames] == [2, 1, 0, 0, 0]
    assert not any(f.expired for f in frames)


def test_cosmetic_loop_holds_time_constant():
    frames = generate_frames(3725, 30, AnimationMode.COSMETIC_LOOP)

    assert len(frames) == 30
    assert len({f.time for f in frames}) == 1
    assert frames[0].time.total_seconds == 3725


def test_expired_loop_ignores_start_seconds():
    frames = generate_frames(-40, 20, AnimationMode.EXPIRED_LOOP)

    assert len(frames) == 20
    assert all(f.expired for f in frames)


def test_generate_frames_zero_count():
    assert generate_frames(10, 0, AnimationMode.REAL_COUNTDOWN) == []


def test_generate_frames_rejects_negative_count():
    with pytest.raises(ValueError, match="frame_count"):
        generate_frames(10, -1, AnimationMode.REAL_COUNTDOWN)


@pytest.mark.parametrize("mode", [AnimationMode.REAL_COUNTDOWN, AnimationMode.COSMETIC_LOOP])
def test_generate_frames_rejects_negative_start(mode):
    with pytest.raises(ValueError, match="non-negative"):
        generate_frames(-1, 3, mode)


def test_generate_frames_is_deterministic():
    assert generate_frames(90061, 60, AnimationMode.REAL_COUNTDOWN) == generate_frames(
        90061, 60, AnimationMode.REAL_COUNTDOWN
    )


@pytest.mark.parametrize(
    "remaining, animated, real_countdown, expected",
    [
        (0, True, False, AnimationMode.EXPIRED_LOOP),
        (-10, False, False, AnimationMode.EXPIRED_LOOP),
        (10, True, False, AnimationMode.COSMETIC_LOOP),
        (10, True, True, AnimationMode.REAL_COUNTDOWN),
        (10, False, False, AnimationMode.REAL_COUNTDOWN),
    ],
)
def test_select_mode(remaining, animated, real_countdown, expected):
    assert select_mode(remaining, animated=animated, real_countdown=real_countdown) is expected


def test_schedules():
    assert schedule_for(AnimationMode.COSMETIC_LOOP, animated=True).frame_count == 30
    assert schedule_for(AnimationMode.COSMETIC_LOOP, animated=True).frame_duration == 100
    assert schedule_for(AnimationMode.REAL_COUNTDOWN, animated=True).frame_duration == 1000
    assert schedule_for(AnimationMode.EXPIRED_LOOP, animated=True).frame_count == 20
    assert schedule_for(AnimationMode.REAL_COUNTDOWN, animated=False).frame_count == 1


def test_pulse_scale_oscillates_around_one():
    assert pulse_scale(0, 5, 0.05) == 1.0
    assert pulse_scale(5, 5, 0.05) == pytest.approx(math.sin(1) * 0.05 + 1)
    assert all(0.95 <= pulse_scale(i, 5, 0.05) <= 1.05 for i in range(100))


def test_frame_scale_only_pulses_cosmetic_modes():
    style = RenderStyle.default()
    frame = CountdownFrame(index=7, time=None)

    assert frame_scale(frame, AnimationMode.REAL_COUNTDOWN, style) == 1.0
    assert frame_scale(frame, AnimationMode.COSMETIC_LOOP, style) == pytest.approx(
        math.sin(7 / 5) * 0.05 + 1
    )
    assert frame_scale(frame, AnimationMode.EXPIRED_LOOP, style) == pytest.approx(
        math.sin(7 / 3) * 0.1 + 1
    )
