"""
Public API for the palette package.
Usage:
    from palette import FieldPalette
"""
from .palette import FieldPalette

__all__ = ["FieldPalette"]
