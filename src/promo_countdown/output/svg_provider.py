"""SVG output provider."""

from .base import SingleFrameOutputProvider


class SvgOutputProvider(SingleFrameOutputProvider[str]):
    """Output provider for static SVG markup."""

    format_name = "svg"

    def encode_frame(self, frame: str) -> bytes:
        if not isinstance(frame, str):
            raise TypeError(
                f"SVG output only supports markup frames (got {type(frame).__name__})"
            )
        return frame.encode("utf-8")
