from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
OutcomeStatus = Literal["idle", "in_progress", "succeeded", "failed"]


class ErrorKind(str, Enum):
    """Failure categories reported by the link service gateway."""

    NETWORK = "network"
    SERVER = "server"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


# --- Links ---

class LinkRecord(BaseModel):
    """One short code -> target URL mapping as reported by the service."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | int
    code: str
    target_url: str = Field(min_length=1)
    total_clicks: int = Field(default=0, ge=0)
    last_clicked: datetime | None = None
    created_at: datetime


LinkCollection = tuple[LinkRecord, ...]


# --- Operation outcomes ---

@dataclass(frozen=True)
class OperationOutcome:
    """Result of the most recent operation in a lane."""

    status: OutcomeStatus = "idle"
    message: str = ""
    kind: ErrorKind | None = None

    @classmethod
    def idle(cls) -> OperationOutcome:
        return cls()

    @classmethod
    def in_progress(cls) -> OperationOutcome:
        return cls(status="in_progress")

    @classmethod
    def succeeded(cls, message: str) -> OperationOutcome:
        return cls(status="succeeded", message=message)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str) -> OperationOutcome:
        return cls(status="failed", message=message, kind=kind)

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_succeeded(self) -> bool:
        return self.status == "succeeded"
