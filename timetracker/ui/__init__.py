"""UI package — thin PyQt6 presentation over the timer core."""

from .main_window import MainWindow

__all__ = ["MainWindow"]
