# ui/__init__.py

from .main_window import MainWindow, LauncherApi
from .launcher_page import LauncherPage

__all__ = ["MainWindow", "LauncherApi", "LauncherPage"]
