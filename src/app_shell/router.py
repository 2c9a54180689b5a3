import logging
import re
from collections.abc import Callable
from typing import Any

import flet as ft

logger = logging.getLogger(__name__)

CODE_ROUTE = r"^/code/(?P<code>[A-Za-z0-9]+)$"

# builder accepts page and **kwargs
ViewBuilder = Callable[..., ft.View]


class Router:
    def __init__(self, page: ft.Page):
        self.page = page
        self.routes: dict[str, ViewBuilder] = {}
        # Simple dynamic routes: regex -> builder
        self.dynamic_routes: dict[str, ViewBuilder] = {}
        # Called with the route being left, so views can release resources.
        self.on_leave: Callable[[], None] | None = None

    def register(self, route: str, builder: ViewBuilder) -> None:
        self.routes[route] = builder

    def register_dynamic(self, pattern: str, builder: ViewBuilder) -> None:
        """Register a regex pattern route.
        Example: '^/code/(?P<code>[A-Za-z0-9]+)$'
        The builder will receive regex group dict as kwargs.
        """
        self.dynamic_routes[pattern] = builder

    def resolve(self, route: str) -> tuple[ViewBuilder | None, dict[str, Any]]:
        builder = self.routes.get(route)
        if builder:
            return builder, {}

        for pattern, dyn_builder in self.dynamic_routes.items():
            match = re.match(pattern, route)
            if match:
                return dyn_builder, match.groupdict()

        return None, {}

    def handle_route_change(self, e: ft.RouteChangeEvent) -> None:
        route = e.route or "/"  # Default empty route to "/"
        logger.info(f"Navigate to: {route}")

        if self.on_leave:
            self.on_leave()
            self.on_leave = None

        # Clear existing views
        self.page.views.clear()

        builder, kwargs = self.resolve(route)

        if not builder:
            logger.warning(f"No route found for: {route}")
            self.page.views.append(
                ft.View(
                    "/404",
                    [
                        ft.AppBar(title=ft.Text("404")),
                        ft.Text(f"Page not found: {route}"),
                        ft.TextButton(
                            "← Back to Dashboard", on_click=lambda _: self.page.go("/")
                        ),
                    ],
                )
            )
            self.page.update()
            return

        try:
            view = builder(self.page, **kwargs)
        except TypeError as err:
            logger.error(f"Error building view for {route}: {err}")
            view = ft.View("/error", [ft.Text(f"Error: {err}")])

        self.page.views.append(view)
        self.page.update()

    def view_pop(self, view: ft.View) -> None:
        self.page.views.pop()
        top_view = self.page.views[-1] if self.page.views else None
        self.page.go(top_view.route if top_view else "/")
