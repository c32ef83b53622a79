"""printf-style formatting with flags, width and precision, plus small string helpers."""

__version__ = "0.1.0"

__all__ = ["spec", "convert", "printf", "textutils"]