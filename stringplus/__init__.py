"""C-style string and memory routines, string helpers, error messages and printf-style formatting."""

__version__ = "0.1.0"
__all__ = ["memory", "strings", "transform", "errors", "formatting"]