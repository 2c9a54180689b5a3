import logging
from typing import Any

import flet as ft

from src.app_shell.router import CODE_ROUTE, Router
from src.components.links import LinkGatewayPort
from src.config import ConfigError, load_config
from src.ui.context import ServiceContext
from src.ui.theme import AppTheme
from src.ui.views.dashboard import DashboardView
from src.ui.views.stats import StatsDialog, StatsView

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    # 1. Load Settings
    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        page.add(ft.Text(str(e), color="red", size=16))
        return

    page.title = config.ui.title

    # 2. Theme Setup
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.LIGHT

    # 3. Create Context
    ctx = ServiceContext.create(config, page)
    logger.info(f"Link service: {config.api.base_url}")

    # 4. Routing Setup
    router = Router(page)

    def wrap(route: str, content: ft.Control) -> ft.View:
        return ft.View(
            route,
            [ft.Container(content=content, padding=32, expand=True)],
            bgcolor=AppTheme.background_light,
            padding=0,
        )

    def dashboard_builder(_: ft.Page) -> ft.View:
        stats_dialog = StatsDialog(page, ctx.detail_controller())
        view = DashboardView(page, ctx.collection_controller(), stats_dialog, config.ui)
        router.on_leave = view.dispose
        view.start()
        return wrap("/", view)

    def stats_builder(_: ft.Page, **kwargs: Any) -> ft.View:
        code = kwargs["code"]
        view = StatsView(page, ctx.detail_controller(), code)
        router.on_leave = view.dispose
        view.start()
        return wrap(f"/code/{code}", view)

    router.register("/", dashboard_builder)
    router.register_dynamic(CODE_ROUTE, stats_builder)

    page.on_route_change = router.handle_route_change
    page.on_view_pop = lambda e: router.view_pop(e.view)

    def on_disconnect(_: Any) -> None:
        if router.on_leave:
            router.on_leave()
        ctx.close()

    page.on_disconnect = on_disconnect

    page.go(page.route or "/")

    # 5. Health check off the UI path
    page.run_thread(log_service_health, ctx.gateway)


def log_service_health(gateway: LinkGatewayPort) -> bool:
    healthy = gateway.health_check()
    if healthy:
        logger.info("Link service is reachable")
    else:
        logger.warning("Link service health check failed; continuing")
    return healthy


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
