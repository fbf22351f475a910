"""Command-line option parsing with callback dispatch, aligned help output and simple timing."""

__version__ = "1.0.0"

__all__ = ["options", "parse", "usage", "timing"]