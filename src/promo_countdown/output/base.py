"""Base class for output format providers."""

from io import BytesIO
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from PIL import Image

FrameT = TypeVar("FrameT")


class OutputProvider(ABC, Generic[FrameT]):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
        """
        self.path = path

    @abstractmethod
    def encode(self, frames: Iterator[FrameT], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Iterator of frame payloads consumed by this provider
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowSequenceOutputProvider(OutputProvider[Image.Image], ABC):
    """Template output provider for Pillow-supported animated image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif``)."""
        raise NotImplementedError

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = [self.prepare_frame(frame) for frame in frames]
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    def prepare_frame(self, frame: Image.Image) -> Image.Image:
        """Convert a rendered frame into the mode this format stores."""
        return frame

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}


class SingleFrameOutputProvider(OutputProvider[FrameT], ABC):
    """Template output provider for static formats holding exactly one frame."""

    format_name: str = ""

    def encode(self, frames: Iterator[FrameT], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            return b""
        if len(frame_list) > 1:
            raise ValueError(
                f"{self.format_name.upper()} output only supports a single frame "
                f"(got {len(frame_list)})"
            )
        return self.encode_frame(frame_list[0])

    @abstractmethod
    def encode_frame(self, frame: FrameT) -> bytes:
        raise NotImplementedError
