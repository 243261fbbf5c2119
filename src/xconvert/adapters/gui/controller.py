# src/xconvert/adapters/gui/controller.py
"""
Conversion Controller - Click Handling and Idle/Loading State

This module holds the window's behaviour without any Tk dependency: it
validates the form, switches between the idle and loading states, starts the
background conversion and shows its outcome through a view.

Files that USE this module:
- xconvert.adapters.gui.window (ConverterWindow is the view and owns a controller)
- tests.test_controller (unit tests with a fake view)

Files that this module USES:
- xconvert.adapters.gui.dispatcher (BackgroundTask, Dispatcher)
- xconvert.adapters.formatting.formatter (result and error text)
- xconvert.application.conversion_service (ConversionService)
- xconvert.domain (ConversionRequest, DomainError)
- xconvert.shared.validators (parse_amount)
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from xconvert.adapters.formatting.formatter import format_conversion, format_error, format_rate
from xconvert.adapters.gui.dispatcher import BackgroundTask, Dispatcher
from xconvert.application.conversion_service import ConversionService
from xconvert.domain.errors import DomainError
from xconvert.domain.models import ConversionRequest, ConversionResult
from xconvert.shared.validators import parse_amount

log = logging.getLogger(__name__)

STATE_IDLE = "idle"
STATE_LOADING = "loading"


class ConversionView(Protocol):
    """What the controller needs from a window."""
    def set_loading(self, loading: bool) -> None:
        ...

    def show_result(self, text: str) -> None:
        ...

    def show_rate(self, text: str) -> None:
        ...

    def show_error(self, text: str) -> None:
        ...


class ConversionController:
    def __init__(self, service: ConversionService, view: ConversionView, dispatcher: Dispatcher):
        self.service = service
        self.view = view
        self.dispatcher = dispatcher
        self.state = STATE_IDLE

    @property
    def is_loading(self) -> bool:
        return self.state == STATE_LOADING

    def on_convert(self, from_currency: str, to_currency: str, amount_text: str) -> Optional[BackgroundTask]:
        """
        Handle a Convert click.

        Input errors are shown immediately and no request is made. Otherwise
        the view enters the loading state and the conversion runs in the
        background.

        Args:
            from_currency: Selected base currency
            to_currency: Selected target currency
            amount_text: Raw text of the amount field

        Returns:
            The started task, or None if nothing was started
        """
        if self.is_loading:
            log.debug("Conversion already in progress, ignoring click")
            return None

        try:
            amount = parse_amount(amount_text)
            request = ConversionRequest(
                from_currency=(from_currency or "").strip().upper(),
                to_currency=(to_currency or "").strip().upper(),
                amount=amount,
            )
        except DomainError as e:
            log.info("Rejected input: %s", e)
            self.view.show_error(format_error(e))
            return None

        self._set_state(STATE_LOADING)
        task = BackgroundTask(
            fn=lambda: self.service.convert(request),
            on_success=self._on_success,
            on_error=self._on_error,
            dispatcher=self.dispatcher,
            name=f"convert-{request.from_currency}-{request.to_currency}",
        )
        return task.start()

    def _set_state(self, state: str) -> None:
        self.state = state
        self.view.set_loading(state == STATE_LOADING)

    def _on_success(self, result: ConversionResult) -> None:
        try:
            req = result.request
            self.view.show_result(format_conversion(result))
            self.view.show_rate(format_rate(req.from_currency, req.to_currency, result.rate))
        finally:
            self._set_state(STATE_IDLE)

    def _on_error(self, exc: BaseException) -> None:
        if isinstance(exc, DomainError):
            log.warning("Conversion failed: %s", exc)
        else:
            log.error("Unexpected conversion failure", exc_info=exc)
        try:
            self.view.show_error(format_error(exc))
        finally:
            self._set_state(STATE_IDLE)
