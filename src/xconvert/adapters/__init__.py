"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (ExchangeRate-API)
- Formatting (result text)
- GUI (tkinter window)
"""

__all__ = []
