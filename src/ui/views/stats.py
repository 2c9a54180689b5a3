from collections.abc import Callable

import flet as ft

from src.services.feedback import Banner
from src.services.link_detail import DetailState, LinkDetailController
from src.ui.components.panel import Panel, banner_control


def _field(label: str, value: ft.Control) -> ft.Control:
    return ft.Column(
        [ft.Text(label, size=13, weight=ft.FontWeight.W_500, color="onSurfaceVariant"), value],
        spacing=4,
    )


def _stat_card(label: str, value: str, bgcolor: str, color: str) -> ft.Control:
    return ft.Container(
        content=ft.Column(
            [
                ft.Text(label, size=13, weight=ft.FontWeight.W_500, color="onSurfaceVariant"),
                ft.Text(value, size=24, weight=ft.FontWeight.BOLD, color=color),
            ],
            spacing=4,
        ),
        bgcolor=bgcolor,
        border_radius=ft.border_radius.all(8),
        padding=16,
        expand=True,
    )


def stats_content(
    state: DetailState, short_url: str, on_copy: Callable[[], None]
) -> ft.Control:
    """Statistics for one link: loading, error or the record itself."""
    if state.loading:
        return ft.Container(
            content=ft.Text("Loading...", color="onSurfaceVariant"),
            alignment=ft.alignment.center,
            padding=48,
        )

    if state.error:
        return banner_control(Banner(tone="error", message=state.error))

    record = state.record
    if record is None:
        return ft.Container(visible=False)

    return ft.Column(
        [
            ft.Text("Link Statistics", size=28, weight=ft.FontWeight.BOLD),
            _field("Short Code", ft.Text(record.code, size=22, font_family="monospace", color="primary")),
            _field(
                "Short URL",
                ft.Row(
                    [
                        ft.Container(
                            content=ft.Text(short_url, font_family="monospace", selectable=True),
                            bgcolor="surfaceVariant",
                            padding=ft.padding.symmetric(horizontal=16, vertical=8),
                            border_radius=ft.border_radius.all(4),
                            expand=True,
                        ),
                        ft.FilledButton("Copy", on_click=lambda _: on_copy()),
                    ]
                ),
            ),
            _field(
                "Target URL",
                ft.TextButton(record.target_url, url=record.target_url, url_target=ft.UrlTarget.BLANK),
            ),
            ft.Row(
                [
                    _stat_card("Total Clicks", str(record.total_clicks), "#eff6ff", "#2563eb"),
                    _stat_card("Created", state.created, "#f0fdf4", "#16a34a"),
                    _stat_card("Last Clicked", state.last_clicked, "#faf5ff", "#9333ea"),
                ],
                spacing=16,
            ),
        ],
        spacing=24,
    )


class StatsView(ft.Column): # type: ignore
    """Route view for /code/<code>."""

    def __init__(
        self,
        page: ft.Page,
        controller: LinkDetailController,
        code: str,
    ) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO)
        self.app_page = page
        self.controller = controller
        self.code = code
        self._unsubscribe = controller.subscribe(self._on_state)
        self._render(controller.state)

    def start(self) -> None:
        self.app_page.run_thread(self.controller.open, self.code)

    def dispose(self) -> None:
        self._unsubscribe()
        self.controller.close()

    def _on_state(self, state: DetailState) -> None:
        self._render(state)
        self.app_page.update()

    def _render(self, state: DetailState) -> None:
        self.controls = [
            ft.TextButton("← Back to Dashboard", on_click=lambda _: self.app_page.go("/")),
            Panel(
                stats_content(state, self.controller.short_url, self.controller.copy_short_url)
            ),
        ]


class StatsDialog:
    """Stats for a link opened in place over the dashboard."""

    def __init__(self, page: ft.Page, controller: LinkDetailController) -> None:
        self.app_page = page
        self.controller = controller
        self.body = ft.Container(width=640)
        self.dialog = ft.AlertDialog(
            content=self.body,
            actions=[ft.TextButton("Close", on_click=lambda _: self.close())],
        )
        self._unsubscribe = controller.subscribe(self._on_state)

    def open(self, code: str) -> None:
        self.app_page.open(self.dialog)
        self.app_page.run_thread(self.controller.open, code)

    def close(self) -> None:
        self.app_page.close(self.dialog)

    def dispose(self) -> None:
        self._unsubscribe()
        self.controller.close()

    def _on_state(self, state: DetailState) -> None:
        self.body.content = stats_content(
            state, self.controller.short_url, self.controller.copy_short_url
        )
        self.app_page.update()
