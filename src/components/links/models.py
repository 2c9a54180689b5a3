"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ErrorKind, LinkRecord

# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    target_url: str
    code: str | None = None


@dataclass(frozen=True)
class DeleteLinkInput:
    """Input for deleting a link."""

    code: str


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    code: str


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from a single-link operation."""

    link: LinkRecord | None
    success: bool
    error_kind: ErrorKind | None = None
    error_message: str = ""


@dataclass(frozen=True)
class LinkListOutput:
    """Output from list operation."""

    links: tuple[LinkRecord, ...]
    total: int
    success: bool = True
    error_kind: ErrorKind | None = None
    error_message: str = ""
