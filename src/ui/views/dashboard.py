import flet as ft

from src.components.links import format_last_clicked, validate_link_input
from src.config.models import UiSettings
from src.domain.entities import LinkRecord
from src.services.feedback import NO_LINKS
from src.services.link_collection import (
    CollectionState,
    LinkCollectionController,
    LinkForm,
)
from src.ui.components.panel import Panel, banner_control
from src.ui.views.stats import StatsDialog


class DashboardView(ft.Column): # type: ignore
    """
    Collection view: create form, searchable table of links, delete
    confirmation and in-place stats dialog.
    """

    def __init__(
        self,
        page: ft.Page,
        controller: LinkCollectionController,
        stats_dialog: StatsDialog,
        ui: UiSettings,
    ) -> None:
        super().__init__(expand=True, scroll=ft.ScrollMode.AUTO, spacing=24)
        self.app_page = page
        self.controller = controller
        self.stats_dialog = stats_dialog

        # Form
        self.target_url = ft.TextField(
            label="Target URL *",
            hint_text="https://example.com/very-long-url",
            keyboard_type=ft.KeyboardType.URL,
            on_change=self._on_form_change,
            on_submit=self._on_submit,
        )
        self.custom_code = ft.TextField(
            label="Custom Code (optional)",
            hint_text="mycode (6-8 alphanumeric characters)",
            helper_text="Leave empty to generate automatically",
            max_length=8,
            on_change=self._on_form_change,
            on_submit=self._on_submit,
        )
        self.banner = ft.Container()
        self.submit_button = ft.FilledButton("Create Short Link", on_click=self._on_submit)
        self.submit_progress = ft.ProgressRing(width=18, height=18, visible=False)

        # Table
        self.search = ft.TextField(
            hint_text="Search by code or target URL",
            width=280,
            dense=True,
            on_change=lambda e: self.controller.set_search_term(e.control.value or ""),
        )
        self.list_progress = ft.ProgressRing(width=16, height=16, visible=False)
        self.table_area = ft.Container()

        # Delete confirmation
        self.confirm_text = ft.Text()
        self.confirm_dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Delete link"),
            content=self.confirm_text,
            actions=[
                ft.TextButton("Cancel", on_click=lambda _: self.controller.cancel_delete()),
                ft.TextButton(
                    "Delete",
                    style=ft.ButtonStyle(color="error"),
                    on_click=lambda _: self.controller.confirm_delete(),
                ),
            ],
        )
        self._dialog_open = False
        self._form: LinkForm | None = None

        self.controls = [
            ft.Column(
                [
                    ft.Text(ui.title, size=36, weight=ft.FontWeight.W_500),
                    ft.Text(ui.subtitle, size=14, color="onSurfaceVariant"),
                ],
                spacing=4,
            ),
            Panel(
                ft.Column(
                    [
                        ft.Text("Create Short Link", size=20, weight=ft.FontWeight.W_500),
                        self.target_url,
                        self.custom_code,
                        self.banner,
                        ft.Row(
                            [self.submit_progress, self.submit_button],
                            alignment=ft.MainAxisAlignment.END,
                        ),
                    ],
                    spacing=16,
                ),
                bgcolor="surfaceVariant",
            ),
            Panel(
                ft.Column(
                    [
                        ft.Row(
                            [
                                ft.Row(
                                    [
                                        ft.Text("All Links", size=20, weight=ft.FontWeight.W_500),
                                        self.list_progress,
                                    ],
                                    spacing=12,
                                ),
                                self.search,
                            ],
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                        ),
                        self.table_area,
                    ],
                    spacing=16,
                )
            ),
        ]

        self._unsubscribe = controller.subscribe(self._on_state)
        self._render(controller.state)

    # --- Lifecycle ---

    def start(self) -> None:
        """Initial load once the view is mounted."""
        self.app_page.run_thread(self.controller.load)

    def dispose(self) -> None:
        self._unsubscribe()
        self.controller.close()
        self.stats_dialog.dispose()

    # --- Events ---

    def _on_form_change(self, e: ft.ControlEvent) -> None:
        self.controller.update_form(
            target_url=self.target_url.value or "", code=self.custom_code.value or ""
        )

    def _on_submit(self, e: ft.ControlEvent) -> None:
        if self._field_errors(self.controller.state):
            return
        self.controller.create()

    # --- Rendering ---

    def _on_state(self, state: CollectionState) -> None:
        self._render(state)
        self.app_page.update()

    def _render(self, state: CollectionState) -> None:
        # Fields own the text being typed; only a cleared form is pushed back.
        if state.form != self._form and state.form == LinkForm():
            self.target_url.value = state.form.target_url
            self.custom_code.value = state.form.code
        self._form = state.form
        self.banner.content = banner_control(state.banner)
        errors = self._field_errors(state)
        self.target_url.error_text = errors.get("target_url")
        self.custom_code.error_text = errors.get("code")
        self.submit_button.disabled = state.submitting or bool(errors)
        self.submit_progress.visible = state.submitting
        self.list_progress.visible = state.loading
        self.table_area.content = self._table(state)
        self._sync_confirm_dialog(state.pending_delete)

    @staticmethod
    def _field_errors(state: CollectionState) -> dict[str | None, str]:
        # Format checks only; an empty URL is reported by the controller on submit.
        return {
            err.field: err.message
            for err in validate_link_input(state.form.target_url, state.form.code)
            if err.code != "url_required"
        }

    def _table(self, state: CollectionState) -> ft.Control:
        if state.loading and not state.links:
            return ft.Container(
                content=ft.ProgressRing(width=48, height=48),
                alignment=ft.alignment.center,
                padding=32,
            )

        rows = state.visible_links
        if not rows:
            return ft.Container(
                content=ft.Text(NO_LINKS, color="onSurfaceVariant"),
                alignment=ft.alignment.center,
                padding=32,
            )

        return ft.Row(
            [
                ft.DataTable(
                    columns=[
                        ft.DataColumn(ft.Text("Code")),
                        ft.DataColumn(ft.Text("Target URL")),
                        ft.DataColumn(ft.Text("Clicks"), numeric=True),
                        ft.DataColumn(ft.Text("Last Clicked")),
                        ft.DataColumn(ft.Text("Actions")),
                    ],
                    rows=[self._row(link) for link in rows],
                )
            ],
            scroll=ft.ScrollMode.AUTO,
        )

    def _row(self, link: LinkRecord) -> ft.DataRow:
        code = link.code
        return ft.DataRow(
            cells=[
                ft.DataCell(
                    ft.TextButton(
                        code, on_click=lambda _, c=code: self.app_page.go(f"/code/{c}")
                    )
                ),
                ft.DataCell(
                    ft.Text(
                        link.target_url,
                        size=12,
                        width=360,
                        max_lines=1,
                        overflow=ft.TextOverflow.ELLIPSIS,
                        tooltip=link.target_url,
                    )
                ),
                ft.DataCell(ft.Text(str(link.total_clicks), size=12)),
                ft.DataCell(ft.Text(format_last_clicked(link), size=12)),
                ft.DataCell(
                    ft.Row(
                        [
                            ft.TextButton(
                                "Copy",
                                on_click=lambda _, c=code: self.controller.copy_short_url(c),
                            ),
                            ft.TextButton(
                                "Stats",
                                on_click=lambda _, c=code: self.stats_dialog.open(c),
                            ),
                            ft.TextButton(
                                "Delete",
                                style=ft.ButtonStyle(color="error"),
                                on_click=lambda _, c=code: self.controller.request_delete(c),
                            ),
                        ],
                        spacing=4,
                    )
                ),
            ],
        )

    def _sync_confirm_dialog(self, pending: str | None) -> None:
        if pending is not None and not self._dialog_open:
            self.confirm_text.value = f"Delete link {pending}?"
            self.app_page.open(self.confirm_dialog)
            self._dialog_open = True
        elif pending is None and self._dialog_open:
            self.app_page.close(self.confirm_dialog)
            self._dialog_open = False
