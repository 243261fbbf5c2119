# src/xconvert/__init__.py
"""
XConvert - Desktop Currency Converter

A small tkinter application that converts an amount between two currencies
using live rates from ExchangeRate-API, with background fetching so the
window stays responsive.
"""

__version__ = "1.0.0"
__author__ = "XConvert maintainers"
