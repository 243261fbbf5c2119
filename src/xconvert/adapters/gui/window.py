# src/xconvert/adapters/gui/window.py
"""
Converter Window - tkinter Form

This module builds the single application window: amount entry, From/To
currency selectors, Convert button, result and unit-rate labels and a
loading label. All behaviour is delegated to ConversionController; this
class only draws.

Files that USE this module:
- xconvert.app (creates the window)

Files that this module USES:
- xconvert.adapters.gui.controller (ConversionController)
- xconvert.adapters.gui.dispatcher (Dispatcher)
- xconvert.shared.currencies (selector values)
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Sequence

from xconvert.adapters.gui.controller import ConversionController
from xconvert.adapters.gui.dispatcher import Dispatcher
from xconvert.application.conversion_service import ConversionService

TITLE = "Currency Converter"
COLOR_OK = "black"
COLOR_ERROR = "red"


class ConverterWindow:
    def __init__(
        self,
        root: tk.Tk,
        service: ConversionService,
        dispatcher: Dispatcher,
        currencies: Sequence[str],
        default_from: str = "USD",
        default_to: str = "EUR",
        default_amount: str = "1.00",
    ):
        self.root = root
        self.controller = ConversionController(service, view=self, dispatcher=dispatcher)

        root.title(TITLE)
        root.geometry("450x390")
        root.resizable(False, False)

        frame = ttk.Frame(root, padding=20)
        frame.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        frame.columnconfigure(1, weight=1)
        pad = {"padx": 8, "pady": 8}

        ttk.Label(frame, text=TITLE, font=("Arial", 24, "bold"), anchor="center").grid(
            row=0, column=0, columnspan=2, sticky="ew", **pad
        )

        ttk.Label(frame, text="Amount:").grid(row=1, column=0, sticky="w", **pad)
        self.amount_var = tk.StringVar(value=default_amount)
        self.amount_entry = ttk.Entry(frame, textvariable=self.amount_var, font=("Arial", 16))
        self.amount_entry.grid(row=1, column=1, sticky="ew", **pad)

        ttk.Label(frame, text="From:").grid(row=2, column=0, sticky="w", **pad)
        self.from_var = tk.StringVar(value=default_from)
        ttk.Combobox(frame, textvariable=self.from_var, values=list(currencies), state="readonly").grid(
            row=2, column=1, sticky="ew", **pad
        )

        ttk.Label(frame, text="To:").grid(row=3, column=0, sticky="w", **pad)
        self.to_var = tk.StringVar(value=default_to)
        ttk.Combobox(frame, textvariable=self.to_var, values=list(currencies), state="readonly").grid(
            row=3, column=1, sticky="ew", **pad
        )

        self.convert_button = ttk.Button(frame, text="Convert", command=self.on_convert_clicked)
        self.convert_button.grid(row=4, column=0, columnspan=2, **pad)

        self.result_label = tk.Label(frame, text=" ", font=("Arial", 18, "bold"), fg=COLOR_OK)
        self.result_label.grid(row=5, column=0, columnspan=2, sticky="ew", **pad)

        self.rate_label = tk.Label(frame, text=" ", font=("Arial", 12))
        self.rate_label.grid(row=6, column=0, columnspan=2, sticky="ew", **pad)

        self.loading_label = tk.Label(frame, text="Converting...", font=("Arial", 14, "italic"))
        self.loading_label.grid(row=7, column=0, columnspan=2, sticky="ew", **pad)
        self.loading_label.grid_remove()

        self.amount_entry.bind("<Return>", lambda _event: self.on_convert_clicked())

    def on_convert_clicked(self) -> None:
        self.controller.on_convert(self.from_var.get(), self.to_var.get(), self.amount_var.get())

    # --- ConversionView ---

    def set_loading(self, loading: bool) -> None:
        if loading:
            self.convert_button.state(["disabled"])
            self.result_label.config(text=" ")
            self.rate_label.config(text=" ")
            self.loading_label.grid()
        else:
            self.convert_button.state(["!disabled"])
            self.loading_label.grid_remove()

    def show_result(self, text: str) -> None:
        self.result_label.config(text=text, fg=COLOR_OK)

    def show_rate(self, text: str) -> None:
        self.rate_label.config(text=text)

    def show_error(self, text: str) -> None:
        self.result_label.config(text=text, fg=COLOR_ERROR)
        self.rate_label.config(text=" ")
