"""A minimal blocking HTTP server, a simple request parser and basic data structures."""

__version__ = "0.1.0"

__all__ = ["__version__"]