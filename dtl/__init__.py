"""Transit-encoded entity values and data transformation functions."""

__version__ = "0.1.0"
__all__ = ["types", "entity", "functions", "examples"]