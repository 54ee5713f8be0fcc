"""Application runner with fuzzy search over desktop entries and a terminal interface."""

__version__ = "0.1.0"
__all__ = ["__version__"]