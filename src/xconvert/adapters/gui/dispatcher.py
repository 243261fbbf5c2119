# src/xconvert/adapters/gui/dispatcher.py
"""
Background Work and Delivery Back to the Tk Thread

BackgroundTask runs one callable on a daemon thread and hands its settled
outcome (value or exception) to a Dispatcher. TkDispatcher queues those
callbacks and drains them from the Tk event loop with ``after`` polling, so
widgets are only touched from the thread that owns them.

Files that USE this module:
- xconvert.adapters.gui.controller (starts one BackgroundTask per click)
- xconvert.app (creates the TkDispatcher)
- tests.test_controller (synchronous dispatcher)

Files that this module USES:
- None (threading and queue from the standard library)
"""
import logging
import queue
import threading
from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)


class Dispatcher(ABC):
    @abstractmethod
    def post(self, callback: Callable[[], Any]) -> None:
        """Schedule ``callback`` to run on the interactive thread."""
        raise NotImplementedError


class TkDispatcher(Dispatcher):
    def __init__(self, root, poll_ms: int = 50):
        """
        Initialize the dispatcher.

        Args:
            root: Tk root (anything with ``after``/``after_cancel``)
            poll_ms: Queue polling interval in milliseconds
        """
        self.root = root
        self.poll_ms = poll_ms
        self._queue: "queue.Queue[Callable[[], Any]]" = queue.Queue()
        self._after_id: Optional[str] = None

    def post(self, callback: Callable[[], Any]) -> None:
        # Safe from any thread
        self._queue.put(callback)

    def start(self) -> None:
        if self._after_id is None:
            self._after_id = self.root.after(self.poll_ms, self._drain)

    def stop(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def _drain(self) -> None:
        """Run every queued callback, then reschedule."""
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                break
            try:
                callback()
            except Exception:
                log.exception("UI callback failed")
        self._after_id = self.root.after(self.poll_ms, self._drain)


class BackgroundTask:
    """
    One unit of work off the interactive thread.

    Exactly one of ``on_success(value)`` or ``on_error(exc)`` is posted to the
    dispatcher when ``fn`` settles. There is no cancellation.
    """
    def __init__(
        self,
        fn: Callable[[], Any],
        on_success: Callable[[Any], Any],
        on_error: Callable[[BaseException], Any],
        dispatcher: Dispatcher,
        name: str = "xconvert-task",
    ):
        self.fn = fn
        self.on_success = on_success
        self.on_error = on_error
        self.dispatcher = dispatcher
        self.name = name
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "BackgroundTask":
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        try:
            value = self.fn()
        except Exception as e:
            self.dispatcher.post(partial(self.on_error, e))
            return
        self.dispatcher.post(partial(self.on_success, value))
