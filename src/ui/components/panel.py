import flet as ft

from src.services.feedback import Banner
from src.ui.theme import AppTheme


class Panel(ft.Container): # type: ignore
    """
    Rounded surface used for each section of a view.
    """
    def __init__(
        self,
        content: ft.Control,
        padding: float = 24,
        bgcolor: str = "surface",
        expand: bool | int = False,
    ):
        super().__init__(
            content=content,
            padding=padding,
            border_radius=ft.border_radius.all(8),
            bgcolor=bgcolor,
            expand=expand,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            )
        )


def banner_control(banner: Banner | None) -> ft.Control:
    """Inline success/error banner; an empty, hidden container when None."""
    if banner is None:
        return ft.Container(visible=False)

    is_error = banner.tone == "error"
    return ft.Container(
        content=ft.Text(
            banner.message,
            size=13,
            color=AppTheme.error_fg if is_error else AppTheme.success_fg,
        ),
        bgcolor=AppTheme.error_bg if is_error else AppTheme.success_bg,
        border=ft.border.all(1, AppTheme.error_fg if is_error else AppTheme.success_fg),
        border_radius=ft.border_radius.all(4),
        padding=ft.padding.symmetric(horizontal=16, vertical=12),
    )
