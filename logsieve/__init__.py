"""Parser, filters and terminal viewer for field-separated log files."""

__version__ = "0.1.0"
__all__ = ["__version__"]