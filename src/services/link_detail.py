"""
Link detail controller.

Holds the stats view for a single short code. Every open() re-fetches
from the gateway; switching to another code drops the previous record
before the new one arrives, and responses for a superseded request are
ignored.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace

from src.components.links import (
    GetLinkInput,
    LinkGatewayPort,
    format_created,
    format_last_clicked_date,
    run_get,
)
from src.domain.entities import ErrorKind, LinkRecord
from src.ports.clipboard import ClipboardPort
from src.ports.notifier import NotifierPort
from src.services import feedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetailState:
    code: str | None = None
    record: LinkRecord | None = None
    loading: bool = False
    error: str = ""

    @property
    def created(self) -> str:
        return format_created(self.record) if self.record else ""

    @property
    def last_clicked(self) -> str:
        return format_last_clicked_date(self.record) if self.record else ""


Listener = Callable[[DetailState], None]


class LinkDetailController:
    def __init__(
        self,
        gateway: LinkGatewayPort,
        clipboard: ClipboardPort | None = None,
        notifier: NotifierPort | None = None,
    ) -> None:
        self.gateway = gateway
        self.clipboard = clipboard
        self.notifier = notifier

        self._lock = threading.Lock()
        self._state = DetailState()
        self._listeners: list[Listener] = []
        self._request_seq = 0

    @property
    def state(self) -> DetailState:
        with self._lock:
            return self._state

    @property
    def short_url(self) -> str:
        code = self.state.code
        return self.gateway.short_url(code) if code else ""

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def open(self, code: str) -> DetailState:
        """Load stats for code."""
        with self._lock:
            self._request_seq += 1
            token = self._request_seq
            record = self._state.record if code == self._state.code else None
            self._state = DetailState(code=code, record=record, loading=True)
            snapshot = self._state
        self._emit(snapshot)

        result = run_get(GetLinkInput(code=code), self.gateway)

        with self._lock:
            if token != self._request_seq:
                logger.debug("Discarding stale stats response for %s", code)
                return self._state
            if result.success:
                self._state = replace(
                    self._state, record=result.link, error="", loading=False
                )
            elif result.error_kind is ErrorKind.NOT_FOUND:
                self._state = replace(
                    self._state,
                    record=None,
                    error=feedback.LINK_NOT_FOUND,
                    loading=False,
                )
            else:
                self._state = replace(
                    self._state, error=feedback.STATS_FAILED, loading=False
                )
            snapshot = self._state
        self._emit(snapshot)
        return snapshot

    def reload(self) -> DetailState:
        code = self.state.code
        if code is None:
            return self.state
        return self.open(code)

    def copy_short_url(self) -> str:
        url = self.short_url
        if url and self.clipboard is not None:
            self.clipboard.copy(url)
            if self.notifier is not None:
                self.notifier.success(feedback.COPIED)
        return url

    def close(self) -> None:
        with self._lock:
            self._listeners.clear()

    def _emit(self, snapshot: DetailState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snapshot)
