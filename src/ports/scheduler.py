from collections.abc import Callable
from typing import Protocol


class ScheduledTask(Protocol):
    def cancel(self) -> None:
        """Cancel the task if it has not run yet."""
        ...


class SchedulerPort(Protocol):
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """Run callback once after delay_seconds."""
        ...

    def shutdown(self) -> None:
        """Cancel every pending task."""
        ...
