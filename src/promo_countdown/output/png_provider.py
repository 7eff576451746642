"""PNG output provider."""

from io import BytesIO

from PIL import Image

from .base import SingleFrameOutputProvider


class PngOutputProvider(SingleFrameOutputProvider[Image.Image]):
    """Output provider for static PNG format."""

    format_name = "png"

    def encode_frame(self, frame: Image.Image) -> bytes:
        buffer = BytesIO()
        frame.save(buffer, format="png")
        return buffer.getvalue()
