from typing import Protocol


class NotifierPort(Protocol):
    """Transient pop-up notifications."""

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
