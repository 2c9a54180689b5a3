"""
Links functional core - validation, search and display formatting.

Pure functions, no I/O.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime
from urllib.parse import urlparse

from src.domain.entities import LinkRecord

from .models import LinkValidationError

CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6,8}$")
NEVER_CLICKED = "Never"

# --- Validation Functions ---


def validate_link_input(
    target_url: str | None,
    code: str | None = None,
) -> list[LinkValidationError]:
    """Validate link input before submission."""
    errors: list[LinkValidationError] = []

    url = (target_url or "").strip()
    if not url:
        errors.append(
            LinkValidationError(
                code="url_required",
                message="Target URL is required",
                field="target_url",
            )
        )
    else:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(
                LinkValidationError(
                    code="url_invalid",
                    message="Target URL must be an absolute http:// or https:// URL",
                    field="target_url",
                )
            )

    if code and not CODE_PATTERN.match(code):
        errors.append(
            LinkValidationError(
                code="code_invalid",
                message="Code must be 6-8 alphanumeric characters",
                field="code",
            )
        )

    return errors


# --- Search ---


def filter_links(links: Sequence[LinkRecord], term: str) -> tuple[LinkRecord, ...]:
    """
    Case-insensitive substring match on code or target URL.

    Order-preserving; an empty term returns every record.
    """
    if not term:
        return tuple(links)

    needle = term.lower()
    return tuple(
        link
        for link in links
        if needle in link.code.lower() or needle in link.target_url.lower()
    )


# --- Display ---


def format_last_clicked(link: LinkRecord) -> str:
    if link.last_clicked is None:
        return NEVER_CLICKED
    return _local(link.last_clicked).strftime("%Y-%m-%d %H:%M:%S")


def format_last_clicked_date(link: LinkRecord) -> str:
    if link.last_clicked is None:
        return NEVER_CLICKED
    return _local(link.last_clicked).strftime("%Y-%m-%d")


def format_created(link: LinkRecord) -> str:
    return _local(link.created_at).strftime("%Y-%m-%d")


def _local(value: datetime) -> datetime:
    # Naive timestamps are shown as-is.
    if value.tzinfo is None:
        return value
    return value.astimezone()
