"""
Flet-backed implementations of the notifier and clipboard ports.
"""

import logging

import flet as ft

from src.ui.theme import AppTheme

logger = logging.getLogger(__name__)


class FletNotifier:
    """Transient SnackBar notifications."""

    def __init__(self, page: ft.Page, duration_ms: int = 3000) -> None:
        self.page = page
        self.duration_ms = duration_ms

    def success(self, message: str) -> None:
        self._show(message, AppTheme.success_fg)

    def error(self, message: str) -> None:
        logger.info(f"Error notification: {message}")
        self._show(message, AppTheme.error_fg)

    def _show(self, message: str, color: str) -> None:
        snack = ft.SnackBar(
            content=ft.Text(message, color="#ffffff"),
            bgcolor=color,
            duration=self.duration_ms,
        )
        self.page.open(snack)


class FletClipboard:
    def __init__(self, page: ft.Page) -> None:
        self.page = page

    def copy(self, text: str) -> None:
        self.page.set_clipboard(text)
