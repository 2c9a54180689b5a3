"""
Link collection controller.

Owns the session's list of link records and drives the Load, Create and
Delete lanes against the link gateway. Every successful mutation is
followed by a full reload; the collection is only ever replaced wholesale.

Lanes:
- Load: may overlap with itself. Each load carries a request token and a
  response older than the newest applied one is discarded.
- Create: re-entry is suppressed while a create is outstanding.
- Delete: requires request_delete() then confirm_delete().

State changes are published to subscribers as immutable CollectionState
snapshots. The lock is never held across a gateway call.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Literal

from src.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    LinkGatewayPort,
    LinkOperationOutput,
    filter_links,
    run_create,
    run_delete,
    run_list,
)
from src.domain.entities import ErrorKind, LinkCollection, LinkRecord, OperationOutcome
from src.ports.clipboard import ClipboardPort
from src.ports.notifier import NotifierPort
from src.ports.scheduler import ScheduledTask, SchedulerPort
from src.services import feedback
from src.services.feedback import Banner, banner_for

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_DISPLAY_SECONDS = 3.0

OutcomeLane = Literal["outcome", "delete_outcome"]


@dataclass(frozen=True)
class LinkForm:
    target_url: str = ""
    code: str = ""


@dataclass(frozen=True)
class CollectionState:
    links: LinkCollection = ()
    loading: bool = False
    submitting: bool = False
    # Inline banner slot shared by the Load and Create lanes.
    outcome: OperationOutcome = field(default_factory=OperationOutcome.idle)
    delete_outcome: OperationOutcome = field(default_factory=OperationOutcome.idle)
    search_term: str = ""
    form: LinkForm = field(default_factory=LinkForm)
    pending_delete: str | None = None

    @property
    def visible_links(self) -> tuple[LinkRecord, ...]:
        return filter_links(self.links, self.search_term)

    @property
    def banner(self) -> Banner | None:
        return banner_for(self.outcome)


Listener = Callable[[CollectionState], None]


class LinkCollectionController:
    def __init__(
        self,
        gateway: LinkGatewayPort,
        scheduler: SchedulerPort,
        notifier: NotifierPort,
        clipboard: ClipboardPort | None = None,
        success_display_seconds: float = DEFAULT_SUCCESS_DISPLAY_SECONDS,
    ) -> None:
        self.gateway = gateway
        self.scheduler = scheduler
        self.notifier = notifier
        self.clipboard = clipboard
        self.success_display_seconds = success_display_seconds

        self._lock = threading.Lock()
        self._state = CollectionState()
        self._listeners: list[Listener] = []

        self._load_seq = 0
        self._applied_load = 0
        self._loads_in_flight = 0

        self._clear_tasks: dict[OutcomeLane, tuple[int, ScheduledTask]] = {}
        self._clear_seq = 0

    @property
    def state(self) -> CollectionState:
        with self._lock:
            return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # --- Load lane ---

    def load(self) -> CollectionState:
        """Fetch the full collection and replace the local copy."""
        with self._lock:
            self._load_seq += 1
            token = self._load_seq
            self._loads_in_flight += 1
            snapshot = self._set(loading=True)
        self._emit(snapshot)

        result = run_list(self.gateway)

        with self._lock:
            self._loads_in_flight -= 1
            loading = self._loads_in_flight > 0
            if token < self._applied_load:
                logger.debug("Discarding stale load response (token %s)", token)
                snapshot = self._set(loading=loading)
            else:
                self._applied_load = token
                if result.success:
                    outcome = self._state.outcome
                    if outcome.is_failed:
                        outcome = OperationOutcome.idle()
                    snapshot = self._set(
                        links=result.links, outcome=outcome, loading=loading
                    )
                else:
                    snapshot = self._set(
                        outcome=OperationOutcome.failed(
                            ErrorKind.SERVER,
                            result.error_message or feedback.LOAD_FAILED,
                        ),
                        loading=loading,
                    )
        self._emit(snapshot)
        return snapshot

    # --- Create lane ---

    def update_form(self, target_url: str | None = None, code: str | None = None) -> None:
        with self._lock:
            form = self._state.form
            snapshot = self._set(
                form=LinkForm(
                    target_url=form.target_url if target_url is None else target_url,
                    code=form.code if code is None else code,
                )
            )
        self._emit(snapshot)

    def create(
        self, target_url: str | None = None, code: str | None = None
    ) -> OperationOutcome:
        """
        Submit the create form.

        Arguments override the current form values. Ignored while another
        create is outstanding.
        """
        with self._lock:
            if self._state.submitting:
                logger.debug("Create already in flight; ignoring submit")
                return self._state.outcome
            form = self._state.form
            form = LinkForm(
                target_url=form.target_url if target_url is None else target_url,
                code=form.code if code is None else code,
            )
            self._cancel_clear_locked("outcome")
            snapshot = self._set(
                submitting=True, outcome=OperationOutcome.in_progress(), form=form
            )
        self._emit(snapshot)

        if not form.target_url.strip():
            outcome = OperationOutcome.failed(ErrorKind.VALIDATION, feedback.URL_REQUIRED)
            self._finish_create(outcome)
            return outcome

        result = run_create(
            CreateLinkInput(target_url=form.target_url, code=form.code or None),
            self.gateway,
        )

        if result.success:
            outcome = OperationOutcome.succeeded(feedback.CREATE_SUCCEEDED)
            logger.info("Created link %s", result.link.code if result.link else "?")
            self._finish_create(outcome, reset_form=True)
            self.load()
            return outcome

        outcome = self._create_failure(result)
        self._finish_create(outcome)
        return outcome

    def _finish_create(self, outcome: OperationOutcome, reset_form: bool = False) -> None:
        with self._lock:
            changes: dict[str, object] = {"submitting": False, "outcome": outcome}
            if reset_form:
                changes["form"] = LinkForm()
            snapshot = self._set(**changes)
            if outcome.is_succeeded:
                self._schedule_clear_locked("outcome")
        self._emit(snapshot)

    @staticmethod
    def _create_failure(result: LinkOperationOutput) -> OperationOutcome:
        if result.error_kind is ErrorKind.CONFLICT:
            return OperationOutcome.failed(ErrorKind.CONFLICT, feedback.CODE_EXISTS)
        if result.error_kind is ErrorKind.VALIDATION:
            return OperationOutcome.failed(
                ErrorKind.VALIDATION, result.error_message or feedback.INVALID_INPUT
            )
        return OperationOutcome.failed(
            result.error_kind or ErrorKind.SERVER, feedback.CREATE_FAILED
        )

    # --- Delete lane ---

    def request_delete(self, code: str) -> None:
        """Ask for confirmation before deleting code."""
        with self._lock:
            snapshot = self._set(pending_delete=code)
        self._emit(snapshot)

    def cancel_delete(self) -> None:
        with self._lock:
            snapshot = self._set(pending_delete=None)
        self._emit(snapshot)

    def confirm_delete(self) -> bool:
        """Delete the code awaiting confirmation. No-op if nothing is pending."""
        with self._lock:
            code = self._state.pending_delete
            if code is None:
                return False
            self._cancel_clear_locked("delete_outcome")
            snapshot = self._set(
                pending_delete=None, delete_outcome=OperationOutcome.in_progress()
            )
        self._emit(snapshot)

        result = run_delete(DeleteLinkInput(code=code), self.gateway)

        if result.success:
            logger.info("Deleted link %s", code)
            with self._lock:
                snapshot = self._set(
                    delete_outcome=OperationOutcome.succeeded(feedback.DELETE_SUCCEEDED)
                )
                self._schedule_clear_locked("delete_outcome")
            self._emit(snapshot)
            self.load()
            self.notifier.success(feedback.DELETE_SUCCEEDED)
            return True

        message = result.error_message or feedback.DELETE_FAILED
        with self._lock:
            snapshot = self._set(
                delete_outcome=OperationOutcome.failed(
                    result.error_kind or ErrorKind.SERVER, message
                )
            )
        self._emit(snapshot)
        self.notifier.error(message)
        return False

    # --- Search ---

    def set_search_term(self, term: str) -> None:
        with self._lock:
            snapshot = self._set(search_term=term)
        self._emit(snapshot)

    # --- Clipboard ---

    def short_url(self, code: str) -> str:
        return self.gateway.short_url(code)

    def copy_short_url(self, code: str) -> str:
        url = self.short_url(code)
        if self.clipboard is not None:
            self.clipboard.copy(url)
            self.notifier.success(feedback.COPIED)
        return url

    def close(self) -> None:
        """Cancel pending auto-clear tasks and drop listeners."""
        with self._lock:
            for lane in list(self._clear_tasks):
                self._cancel_clear_locked(lane)
            self._listeners.clear()

    # --- Internals ---

    def _set(self, **changes: object) -> CollectionState:
        # Caller holds the lock.
        self._state = replace(self._state, **changes)  # type: ignore[arg-type]
        return self._state

    def _emit(self, snapshot: CollectionState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snapshot)

    def _schedule_clear_locked(self, lane: OutcomeLane) -> None:
        self._cancel_clear_locked(lane)
        self._clear_seq += 1
        seq = self._clear_seq
        task = self.scheduler.call_later(
            self.success_display_seconds, lambda: self._clear_success(lane, seq)
        )
        self._clear_tasks[lane] = (seq, task)

    def _cancel_clear_locked(self, lane: OutcomeLane) -> None:
        entry = self._clear_tasks.pop(lane, None)
        if entry is not None:
            entry[1].cancel()

    def _clear_success(self, lane: OutcomeLane, seq: int) -> None:
        with self._lock:
            entry = self._clear_tasks.get(lane)
            # A cancelled timer may still fire once; only the latest task counts.
            if entry is None or entry[0] != seq:
                return
            del self._clear_tasks[lane]
            outcome: OperationOutcome = getattr(self._state, lane)
            if not outcome.is_succeeded:
                return
            snapshot = self._set(**{lane: OperationOutcome.idle()})
        self._emit(snapshot)
