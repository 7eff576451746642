"""On-demand countdown images for a promotional date."""

__version__ = "0.1.0"
