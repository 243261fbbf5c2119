"""
Controller Tests - Unit Tests for Click Handling and Background Delivery

This module tests ConversionController with a fake view and a recording
dispatcher: input rejection before any request, the idle/loading states,
ignored double clicks and result/error delivery. It also tests
TkDispatcher against a fake Tk root.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xconvert.adapters.gui.controller (ConversionController)
- xconvert.adapters.gui.dispatcher (BackgroundTask, Dispatcher, TkDispatcher)
- xconvert.application.conversion_service (ConversionService)
- unittest.mock (Mock rate source)
- pytest (testing framework)
"""
import threading

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock rate source

from xconvert.adapters.gui.controller import STATE_IDLE, STATE_LOADING, ConversionController
from xconvert.adapters.gui.dispatcher import BackgroundTask, Dispatcher, TkDispatcher
from xconvert.application.conversion_service import ConversionService
from xconvert.domain.errors import ApiRequestError

BODY = '{"conversion_rates":{"USD":1,"EUR":0.925}}'


class RecordingDispatcher(Dispatcher):
    """Collects callbacks so the test thread decides when they run."""
    def __init__(self):
        self.callbacks = []

    def post(self, callback):
        self.callbacks.append(callback)

    def drain(self):
        while self.callbacks:
            self.callbacks.pop(0)()


class FakeView:
    def __init__(self):
        self.loading = []
        self.results = []
        self.rates = []
        self.errors = []

    def set_loading(self, loading):
        self.loading.append(loading)

    def show_result(self, text):
        self.results.append(text)

    def show_rate(self, text):
        self.rates.append(text)

    def show_error(self, text):
        self.errors.append(text)


class FakeRoot:
    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    def after(self, ms, fn):
        self.scheduled.append(fn)
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)


def _controller(source):
    view = FakeView()
    dispatcher = RecordingDispatcher()
    controller = ConversionController(ConversionService(source), view=view, dispatcher=dispatcher)
    return controller, view, dispatcher


class TestConversionController:
    def test_successful_conversion(self):
        source = Mock()
        source.fetch.return_value = BODY
        controller, view, dispatcher = _controller(source)

        task = controller.on_convert("USD", "EUR", "10")
        task.join(timeout=5)

        assert controller.state == STATE_LOADING
        assert view.loading == [True]

        dispatcher.drain()

        assert view.results == ["10.00 USD = 9.25 EUR"]
        assert view.rates == ["1 USD = 0.9250 EUR"]
        assert view.errors == []
        assert view.loading == [True, False]
        assert controller.state == STATE_IDLE
        source.fetch.assert_called_once_with("USD")

    def test_large_amount_is_converted(self):
        source = Mock()
        source.fetch.return_value = '{"conversion_rates":{"EUR":0.92}}'
        controller, view, dispatcher = _controller(source)

        controller.on_convert("USD", "EUR", "1e27").join(timeout=5)
        dispatcher.drain()

        assert view.errors == []
        assert view.results == [
            "1000000000000000000000000000.00 USD = 920000000000000000000000000.00 EUR"
        ]
        assert controller.state == STATE_IDLE

    @pytest.mark.parametrize("amount_text, message", [
        ("-5", "Amount must be positive."),
        ("0", "Amount must be positive."),
        ("abc", "Invalid amount."),
        ("1_000", "Invalid amount."),
        ("1e100", "Amount is too large."),
    ])
    def test_invalid_amount_makes_no_request(self, amount_text, message):
        source = Mock()
        controller, view, dispatcher = _controller(source)

        task = controller.on_convert("USD", "EUR", amount_text)

        assert task is None
        assert view.errors == [message]
        assert view.loading == []
        assert controller.state == STATE_IDLE
        source.fetch.assert_not_called()

    def test_invalid_currency_makes_no_request(self):
        source = Mock()
        controller, view, dispatcher = _controller(source)

        assert controller.on_convert("", "EUR", "1") is None
        assert view.errors == ["Invalid currency code: "]
        source.fetch.assert_not_called()

    def test_click_while_loading_is_ignored(self):
        release = threading.Event()
        source = Mock()

        def slow_fetch(base):
            release.wait(timeout=5)
            return BODY

        source.fetch.side_effect = slow_fetch
        controller, view, dispatcher = _controller(source)

        task = controller.on_convert("USD", "EUR", "1")
        assert controller.on_convert("USD", "EUR", "2") is None

        release.set()
        task.join(timeout=5)
        dispatcher.drain()

        assert source.fetch.call_count == 1
        assert view.results == ["1.00 USD = 0.93 EUR"]
        assert controller.state == STATE_IDLE

    def test_api_error_restores_idle(self):
        source = Mock()
        source.fetch.side_effect = ApiRequestError("failed", status_code=404)
        controller, view, dispatcher = _controller(source)

        controller.on_convert("USD", "EUR", "1").join(timeout=5)
        dispatcher.drain()

        assert view.errors == ["Rate service error (HTTP 404)."]
        assert view.rates == []
        assert view.loading == [True, False]
        assert controller.state == STATE_IDLE

    def test_unexpected_error_shows_generic_message(self):
        source = Mock()
        source.fetch.side_effect = RuntimeError("boom")
        controller, view, dispatcher = _controller(source)

        controller.on_convert("USD", "EUR", "1").join(timeout=5)
        dispatcher.drain()

        assert view.errors == ["Error fetching rate. Check the log."]
        assert controller.state == STATE_IDLE

    def test_can_convert_again_after_completion(self):
        source = Mock()
        source.fetch.return_value = BODY
        controller, view, dispatcher = _controller(source)

        controller.on_convert("USD", "EUR", "10").join(timeout=5)
        dispatcher.drain()
        controller.on_convert("USD", "EUR", "20").join(timeout=5)
        dispatcher.drain()

        assert view.results == ["10.00 USD = 9.25 EUR", "20.00 USD = 18.50 EUR"]


class TestBackgroundTask:
    def test_posts_success(self):
        dispatcher = RecordingDispatcher()
        on_success, on_error = Mock(), Mock()

        BackgroundTask(lambda: 42, on_success, on_error, dispatcher).start().join(timeout=5)
        dispatcher.drain()

        on_success.assert_called_once_with(42)
        on_error.assert_not_called()

    def test_posts_error(self):
        dispatcher = RecordingDispatcher()
        on_success, on_error = Mock(), Mock()
        error = ValueError("bad")

        def fail():
            raise error

        BackgroundTask(fail, on_success, on_error, dispatcher).start().join(timeout=5)
        dispatcher.drain()

        on_error.assert_called_once_with(error)
        on_success.assert_not_called()


class TestTkDispatcher:
    def test_drains_posted_callbacks_and_reschedules(self):
        root = FakeRoot()
        dispatcher = TkDispatcher(root, poll_ms=10)
        calls = []

        dispatcher.start()
        dispatcher.post(lambda: calls.append(1))
        dispatcher.post(lambda: calls.append(2))
        root.scheduled[-1]()

        assert calls == [1, 2]
        assert len(root.scheduled) == 2

    def test_failing_callback_does_not_stop_polling(self):
        root = FakeRoot()
        dispatcher = TkDispatcher(root)
        calls = []

        def fail():
            raise RuntimeError("boom")

        dispatcher.start()
        dispatcher.post(fail)
        dispatcher.post(lambda: calls.append("after"))
        root.scheduled[-1]()

        assert calls == ["after"]
        assert len(root.scheduled) == 2

    def test_start_is_idempotent_and_stop_cancels(self):
        root = FakeRoot()
        dispatcher = TkDispatcher(root)

        dispatcher.start()
        dispatcher.start()
        dispatcher.stop()

        assert len(root.scheduled) == 1
        assert root.cancelled == ["after#1"]
