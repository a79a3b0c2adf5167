"""Icon prompt synthesis and SVG conformance service."""

__version__ = "1.0.0"
