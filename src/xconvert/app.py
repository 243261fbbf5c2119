# src/xconvert/app.py
"""
Application Entry Point - Window Initialization and Startup

This module serves as the composition root for the XConvert desktop app.
It wires settings, the rate provider, the conversion service and the window,
then runs the Tk event loop.

Files that USE this module:
- python -m xconvert (module entry point)
- the ``xconvert`` console script

Files that this module USES:
- xconvert.shared.logging_conf (setup_logging for logging configuration)
- xconvert.config (settings for configuration management)
- xconvert.adapters.providers (RateFetcher)
- xconvert.application.conversion_service (ConversionService)
- xconvert.adapters.gui (ConverterWindow, TkDispatcher)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes

from xconvert.config import settings  # Validated settings from the environment and .env
from xconvert.shared.logging_conf import setup_logging  # Configure logging with file rotation
from xconvert.shared.currencies import available_currencies  # Selector values
from xconvert.shared.validators import validate_api_key  # Startup warning for a missing key
from xconvert.adapters.providers.exchangerate_api import RateFetcher  # ExchangeRate-API client
from xconvert.application.conversion_service import ConversionService  # Conversion use case


def build_service(app_settings) -> ConversionService:
    """
    Build the conversion service from settings.

    Args:
        app_settings: Settings instance

    Returns:
        ConversionService backed by ExchangeRate-API
    """
    fetcher = RateFetcher(
        api_key=app_settings.api_key,
        base_url=app_settings.base_url,
        timeout=app_settings.http_timeout_seconds,
    )
    return ConversionService(fetcher)


def main() -> None:
    """
    Initialize and start the desktop application.

    This function:
    1. Sets up logging from settings
    2. Builds the provider and conversion service
    3. Creates the Tk root, dispatcher and window
    4. Runs the Tk event loop until the window is closed
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    if not validate_api_key(settings.api_key):
        logger.warning(
            "EXCHANGERATE_API_KEY is not set; conversions will fail until it is configured"
        )

    service = build_service(settings)

    # tkinter is imported late so the rest of the package works without Tk
    import tkinter as tk
    from xconvert.adapters.gui.dispatcher import TkDispatcher
    from xconvert.adapters.gui.window import ConverterWindow

    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.error("Cannot open a window (no display?): %s", e)
        sys.exit(1)

    dispatcher = TkDispatcher(root)
    ConverterWindow(
        root,
        service=service,
        dispatcher=dispatcher,
        currencies=available_currencies(
            [settings.default_from_currency, settings.default_to_currency]
        ),
        default_from=settings.default_from_currency,
        default_to=settings.default_to_currency,
        default_amount=settings.default_amount,
    )
    dispatcher.start()

    logger.info("Starting XConvert (timeout=%ds)", settings.http_timeout_seconds)
    try:
        root.mainloop()
    except KeyboardInterrupt:
        logger.info("Stopped by user (KeyboardInterrupt)")
        dispatcher.stop()
        root.destroy()


if __name__ == "__main__":
    main()
