"""Export static SVG documents from GUI paint shapes."""

__version__ = "0.1.0"
__all__ = ["shapes", "svg"]