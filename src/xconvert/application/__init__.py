"""
Application Layer - Use Cases and Services

This package contains the conversion use case. It talks to providers only
through the RateSource interface.
"""

from xconvert.application.conversion_service import ConversionService, convert

__all__ = [
    "ConversionService",
    "convert",
]
