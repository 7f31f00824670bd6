"""Fixed-capacity array type, classic array algorithms and a demonstration."""

__version__ = "0.1.0"
__all__ = ["array_adt", "layout", "duplicates", "extremes", "missing", "pairs", "demo"]