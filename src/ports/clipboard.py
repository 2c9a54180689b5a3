from typing import Protocol


class ClipboardPort(Protocol):
    def copy(self, text: str) -> None:
        """Place text on the system clipboard."""
        ...
