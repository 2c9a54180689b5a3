from __future__ import annotations

from dataclasses import dataclass

import flet as ft

from src.adapters.http_gateway import HttpLinkGateway
from src.adapters.scheduler import ThreadingScheduler
from src.components.links import LinkGatewayPort
from src.config.models import ConsoleConfig
from src.ports.clipboard import ClipboardPort
from src.ports.notifier import NotifierPort
from src.ports.scheduler import SchedulerPort
from src.services.link_collection import LinkCollectionController
from src.services.link_detail import LinkDetailController
from src.ui.page_adapters import FletClipboard, FletNotifier


@dataclass
class ServiceContext:
    """Dependencies shared by the views of one page session."""

    config: ConsoleConfig
    gateway: LinkGatewayPort
    scheduler: SchedulerPort
    notifier: NotifierPort
    clipboard: ClipboardPort

    def collection_controller(self) -> LinkCollectionController:
        return LinkCollectionController(
            gateway=self.gateway,
            scheduler=self.scheduler,
            notifier=self.notifier,
            clipboard=self.clipboard,
            success_display_seconds=self.config.feedback.success_display_seconds,
        )

    def detail_controller(self) -> LinkDetailController:
        return LinkDetailController(
            gateway=self.gateway,
            clipboard=self.clipboard,
            notifier=self.notifier,
        )

    def close(self) -> None:
        self.scheduler.shutdown()

    @classmethod
    def create(cls, config: ConsoleConfig, page: ft.Page) -> ServiceContext:
        return cls(
            config=config,
            gateway=HttpLinkGateway(
                config.api.base_url, timeout=config.api.timeout_seconds
            ),
            scheduler=ThreadingScheduler(),
            notifier=FletNotifier(page, duration_ms=config.feedback.notification_ms),
            clipboard=FletClipboard(page),
        )
