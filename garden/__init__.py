"""Digital garden: capture notes in your editor and file them by title."""

__all__ = ["__version__"]

__version__ = "0.1.0"
