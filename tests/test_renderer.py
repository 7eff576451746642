"""Tests for the raster and SVG countdown renderers."""

from promo_countdown.countdown import (
    AnimationMode,
    CountdownFrame,
    Renderer,
    RenderStyle,
    SvgRenderer,
    decompose,
    generate_frames,
    generate_raster_frames,
    generate_svg_frames,
    unit_labels,
)


def test_unit_labels_pairs_values_with_labels():
    labels = unit_labels(decompose(2), RenderStyle.default().labels)

    assert labels == [("00", "DAYS"), ("00", "HOURS"), ("00", "MINUTES"), ("02", "SECONDS")]


def test_render_countdown_frame_size_and_mode():
    style = RenderStyle.default()
    img = Renderer(style).render_frame(CountdownFrame(index=0, time=decompose(90061)))

    assert img.size == (600, 150)
    assert img.mode == "RGB"


def test_render_uses_gradient_background():
    style = RenderStyle.flat()
    img = Renderer(style).render_frame(CountdownFrame(index=0, time=decompose(5)))

    assert img.getpixel((0, 0)) == style.gradient[0]
    assert img.getpixel((style.width - 1, 0)) == style.gradient[1]


def test_render_expired_frame_uses_expired_gradient():
    style = RenderStyle.default()
    img = Renderer(style).render_frame(CountdownFrame(index=0, time=None))

    assert img.getpixel((0, 0)) == style.expired_gradient[0]


def test_render_frames_differ_by_value():
    renderer = Renderer(RenderStyle.flat())
    first = renderer.render_frame(CountdownFrame(index=0, time=decompose(10)))
    second = renderer.render_frame(CountdownFrame(index=1, time=decompose(9)))

    assert first.tobytes() != second.tobytes()


def test_render_three_digit_days():
    """Large day counts render without errors."""
    img = Renderer(RenderStyle.default()).render_frame(
        CountdownFrame(index=0, time=decompose(123 * 86400))
    )

    assert img.size == (600, 150)


def test_generate_raster_frames_renders_every_frame():
    frames = generate_frames(100, 6, AnimationMode.COSMETIC_LOOP)
    images = list(generate_raster_frames(frames, AnimationMode.COSMETIC_LOOP, RenderStyle.default()))

    assert len(images) == 6
    assert all(hasattr(img, "save") for img in images)


def test_svg_renderer_substitutes_padded_values():
    svg = SvgRenderer(RenderStyle.flat()).render_frame(
        CountdownFrame(index=0, time=decompose(2))
    )

    assert svg.startswith("<?xml")
    assert svg.count(">00</text>") == 3
    assert ">02</text>" in svg
    for label in ("DAYS", "HOURS", "MINUTES", "SECONDS"):
        assert f">{label}</text>" in svg
    assert 'filter="url(#shadow)"' not in svg


def test_svg_renderer_shadow_filter():
    svg = SvgRenderer(RenderStyle.default()).render_frame(
        CountdownFrame(index=0, time=decompose(2))
    )

    assert "<feDropShadow" in svg
    assert 'filter="url(#shadow)"' in svg


def test_svg_renderer_expired_message_is_escaped():
    style = RenderStyle.default().with_event_name("Sales & Deals")
    svg = SvgRenderer(style).render_frame(CountdownFrame(index=0, time=None))

    assert "SALES &amp; DEALS IS LIVE!" in svg
    assert "DAYS" not in svg


def test_generate_svg_frames():
    frames = generate_frames(61, 2, AnimationMode.REAL_COUNTDOWN)
    documents = list(generate_svg_frames(frames, RenderStyle.default()))

    assert len(documents) == 2
    assert ">01</text>" in documents[0]
    assert ">00</text>" in documents[1]
