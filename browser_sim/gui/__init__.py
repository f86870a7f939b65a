"""
PySide6 presentation layer for Browser Sim.
"""

from .main_window import MainWindow, run_gui

__all__ = ["MainWindow", "run_gui"]
