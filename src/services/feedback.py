"""
Interaction feedback.

Maps operation outcomes to the inline banner and holds the user-facing
messages shown by the controllers. No business logic lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.entities import OperationOutcome

# --- Messages ---

LOAD_FAILED = "Failed to load links"
URL_REQUIRED = "Target URL is required"
CREATE_SUCCEEDED = "Link created successfully!"
CODE_EXISTS = "Code already exists. Please try another."
INVALID_INPUT = "Invalid input"
CREATE_FAILED = "Failed to create link"
DELETE_SUCCEEDED = "Link deleted successfully!"
DELETE_FAILED = "Failed to delete link"
COPIED = "Copied to clipboard!"
LINK_NOT_FOUND = "Link not found"
STATS_FAILED = "Failed to load link stats"
NO_LINKS = "No links found. Create your first link above!"

BannerTone = Literal["success", "error"]


@dataclass(frozen=True)
class Banner:
    tone: BannerTone
    message: str


def banner_for(outcome: OperationOutcome) -> Banner | None:
    """Inline banner for an outcome; only one banner is shown at a time."""
    if outcome.is_failed:
        return Banner(tone="error", message=outcome.message)
    if outcome.is_succeeded:
        return Banner(tone="success", message=outcome.message)
    return None
