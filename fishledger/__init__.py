"""Fish wholesale market transaction calculator."""

__version__ = "1.0.0"
