"""Output providers for different image formats."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .base import OutputProvider
from .gif_provider import GifOutputProvider
from .png_provider import PngOutputProvider
from .svg_provider import SvgOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    media_type: str
    provider_class: type[OutputProvider[Any]]
    animated: bool


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(
        extension=".gif",
        media_type="image/gif",
        provider_class=GifOutputProvider,
        animated=True,
    ),
    "png": OutputFormatSpec(
        extension=".png",
        media_type="image/png",
        provider_class=PngOutputProvider,
        animated=False,
    ),
    "svg": OutputFormatSpec(
        extension=".svg",
        media_type="image/svg+xml",
        provider_class=SvgOutputProvider,
        animated=False,
    ),
}


def resolve_output_provider(
    file_path: str,
) -> OutputProvider[Any]:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def media_type_for_output_format(output_format: str) -> str:
    """Resolve media type for a supported output format."""
    spec = _output_spec_from_format(output_format)
    return spec.media_type


def is_animated_format(output_format: str) -> bool:
    """Whether the format carries a multi-frame animation."""
    return _output_spec_from_format(output_format).animated


def output_format_for_path(file_path: str) -> str:
    """Format name for a file path, validated against the supported formats."""
    ext = Path(file_path).suffix.lower()
    _output_spec_from_extension(ext)
    return ext.removeprefix(".")


def provider_for_format(output_format: str) -> OutputProvider[Any]:
    """Build a provider for a format name, with no output path attached."""
    return _output_spec_from_format(output_format).provider_class()


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    output_format = ext.removeprefix(".")
    spec = _OUTPUT_FORMATS.get(output_format)
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


def _output_spec_from_format(output_format: str) -> OutputFormatSpec:
    spec = _OUTPUT_FORMATS.get(output_format.lower())
    if spec is not None:
        return spec
    supported = ", ".join(supported_output_formats())
    raise ValueError(f"Invalid format. Choose from: {supported}")


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "GifOutputProvider",
    "PngOutputProvider",
    "SvgOutputProvider",
    "is_animated_format",
    "media_type_for_output_format",
    "output_format_for_path",
    "provider_for_format",
    "resolve_output_provider",
    "supported_output_formats",
]
