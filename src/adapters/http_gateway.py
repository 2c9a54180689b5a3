"""
HTTP adapter for the link service (LinkGatewayPort implementation).

REST contract:
- POST   /api/links         -> 201 record | 409 code exists | 400 invalid
- GET    /api/links         -> 200 record list
- GET    /api/links/{code}  -> 200 record | 404
- DELETE /api/links/{code}  -> 200/204 | 404
- GET    /healthz           -> liveness

One round trip per call, no retries, no caching.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import ValidationError

from src.domain.entities import LinkRecord
from src.domain.errors import (
    ConflictError,
    GatewayError,
    InputValidationError,
    NetworkError,
    NotFoundError,
    ServerError,
)

logger = logging.getLogger(__name__)

# Health check timeout when no transport timeout is configured.
HEALTH_TIMEOUT_SECONDS = 5.0

_STATUS_ERRORS: dict[int, type[GatewayError]] = {
    400: InputValidationError,
    404: NotFoundError,
    409: ConflictError,
}


class HttpLinkGateway:
    """requests-based gateway bound to one service base address."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    # --- LinkGatewayPort ---

    def list_links(self) -> list[LinkRecord]:
        data = self._request("GET", "/api/links")
        if not isinstance(data, list):
            raise ServerError("Unexpected response from link service")
        return [self._parse_record(item) for item in data]

    def create_link(self, target_url: str, code: str | None = None) -> LinkRecord:
        body: dict[str, str] = {"target_url": target_url}
        if code:
            body["custom_code"] = code
        return self._parse_record(self._request("POST", "/api/links", json=body))

    def get_link(self, code: str) -> LinkRecord:
        return self._parse_record(self._request("GET", self._link_path(code)))

    def delete_link(self, code: str) -> None:
        self._request("DELETE", self._link_path(code), expect_body=False)

    def health_check(self) -> bool:
        try:
            response = self._session.get(
                f"{self.base_url}/healthz",
                timeout=self.timeout or HEALTH_TIMEOUT_SECONDS,
            )
        except requests.RequestException as e:
            logger.warning(f"Health check failed for {self.base_url}: {e}")
            return False
        return bool(response.ok)

    def short_url(self, code: str) -> str:
        return f"{self.base_url}/{code}"

    def close(self) -> None:
        self._session.close()

    # --- Internals ---

    @staticmethod
    def _link_path(code: str) -> str:
        return f"/api/links/{quote(code, safe='')}"

    def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        try:
            response = self._session.request(
                method, url, json=json, timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError("Request timed out") from e
        except requests.RequestException as e:
            raise NetworkError(f"Connection failed: {e}") from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            error_cls = _STATUS_ERRORS.get(status_code, ServerError)
            raise error_cls(self._error_message(response), status_code=status_code)

        if not expect_body or status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "Unreadable response from link service", status_code=status_code
            ) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return ""
        if isinstance(data, dict) and isinstance(data.get("error"), str):
            return str(data["error"])
        return ""

    @staticmethod
    def _parse_record(data: Any) -> LinkRecord:
        try:
            return LinkRecord.model_validate(data)
        except ValidationError as e:
            raise ServerError(f"Malformed link record: {e}") from e
