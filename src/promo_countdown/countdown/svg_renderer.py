"""SVG markup rendering via a Jinja2 template."""

from jinja2 import Environment, PackageLoader, select_autoescape

from .frames import CountdownFrame
from .renderer import unit_labels
from .style import RenderStyle, to_hex

_TEMPLATE_NAME = "countdown.svg.j2"

_environment = Environment(
    loader=PackageLoader("promo_countdown", "templates"),
    autoescape=select_autoescape(enabled_extensions=("j2",), default_for_string=True),
    keep_trailing_newline=True,
)


class SvgRenderer:
    """Render countdown frames as standalone SVG documents."""

    def __init__(self, style: RenderStyle) -> None:
        self.style = style
        self.width = style.width
        self.height = style.height
        self._template = _environment.get_template(_TEMPLATE_NAME)

    def render_frame(self, frame: CountdownFrame) -> str:
        style = self.style
        gradient = style.expired_gradient if frame.expired else style.gradient
        boxes = []
        if frame.time is not None:
            for index, (value, label) in enumerate(unit_labels(frame.time, style.labels)):
                x = style.box_x(index)
                boxes.append(
                    {"x": x, "center": x + style.box_width / 2, "value": value, "label": label}
                )

        return self._template.render(
            width=style.width,
            height=style.height,
            gradient_start=to_hex(gradient[0]),
            gradient_end=to_hex(gradient[1]),
            box_shadow=style.box_shadow and not frame.expired,
            shadow_offset=style.shadow_offset,
            shadow_blur=style.shadow_blur,
            shadow_opacity=round(style.shadow_color[3] / 255, 2),
            text_color=to_hex(style.text_color),
            expired=frame.expired,
            expired_font_size=style.expired_font_size,
            message=style.expired_message,
            boxes=boxes,
            box_top=style.box_top,
            box_width=style.box_width,
            box_height=style.box_height,
            box_opacity=round(style.box_fill[3] / 255, 2),
            number_offset=style.number_offset,
            label_offset=style.label_offset,
            number_font_size=style.number_font_size,
            label_font_size=style.label_font_size,
        )
