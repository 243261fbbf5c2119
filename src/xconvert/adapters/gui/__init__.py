"""
GUI Adapters - tkinter Desktop Interface

The window module imports tkinter; the controller and dispatcher do not, so
they can be used and tested without a display.
"""

from xconvert.adapters.gui.controller import ConversionController
from xconvert.adapters.gui.dispatcher import BackgroundTask, Dispatcher, TkDispatcher

__all__ = [
    "BackgroundTask",
    "ConversionController",
    "Dispatcher",
    "TkDispatcher",
]
