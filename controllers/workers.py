# -*- coding: utf-8 -*-
"""
Background workers for controller requests.
"""

from typing import Any, Callable

from PyQt5.QtCore import QThread, pyqtSignal


class ApiWorker(QThread):
    """Runs one gateway call off the UI thread, tagged with its request generation."""

    completed = pyqtSignal(int, object)  # generation, result
    failed = pyqtSignal(int, object)  # generation, exception

    def __init__(self, generation: int, func: Callable[..., Any], *args, **kwargs):
        super().__init__()
        self.generation = generation
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def run(self):
        """Run the call in background; errors are handed to the owning controller."""
        try:
            result = self._func(*self._args, **self._kwargs)
        except Exception as e:
            self.failed.emit(self.generation, e)
            return
        self.completed.emit(self.generation, result)
