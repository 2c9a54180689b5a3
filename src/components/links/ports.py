"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import LinkRecord


class LinkGatewayPort(Protocol):
    """
    Gateway to the remote link service.

    Each call is a single round trip. Failures are raised as
    src.domain.errors.GatewayError subclasses.
    """

    def list_links(self) -> list[LinkRecord]:
        """Fetch the full collection."""
        ...

    def create_link(self, target_url: str, code: str | None = None) -> LinkRecord:
        """Create a mapping, optionally with a caller-chosen code."""
        ...

    def get_link(self, code: str) -> LinkRecord:
        """Fetch one mapping with its click stats."""
        ...

    def delete_link(self, code: str) -> None:
        """Delete a mapping."""
        ...

    def health_check(self) -> bool:
        """Probe service liveness."""
        ...

    def short_url(self, code: str) -> str:
        """Public short URL for a code."""
        ...
