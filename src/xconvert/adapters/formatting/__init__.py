"""
Formatting Adapters - Result and Error Text

This package contains the text formatting used by the window.
"""

from xconvert.adapters.formatting.formatter import (
    format_conversion,
    format_error,
    format_rate,
)

__all__ = [
    "format_conversion",
    "format_error",
    "format_rate",
]
