"""
Tests for the requests-based link gateway.

The HTTP session is replaced by a mock; no network access.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from src.adapters.http_gateway import HEALTH_TIMEOUT_SECONDS, HttpLinkGateway
from src.domain.entities import ErrorKind
from src.domain.errors import (
    ConflictError,
    InputValidationError,
    NetworkError,
    NotFoundError,
    ServerError,
)

RECORD = {
    "id": 7,
    "code": "abc123",
    "target_url": "https://example.com/a",
    "total_clicks": 0,
    "last_clicked": None,
    "created_at": "2025-01-01T12:00:00Z",
}


def make_response(status_code: int, body: Any = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if body is None:
        response.json.side_effect = ValueError("no body")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def gateway(session: MagicMock) -> HttpLinkGateway:
    return HttpLinkGateway("http://api.test/", session=session)


class TestRequests:
    def test_trailing_slash_stripped(self, gateway: HttpLinkGateway) -> None:
        assert gateway.base_url == "http://api.test"

    def test_list_links(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(200, [RECORD])

        links = gateway.list_links()

        session.request.assert_called_once_with(
            "GET", "http://api.test/api/links", json=None, timeout=None
        )
        assert [link.code for link in links] == ["abc123"]
        assert links[0].last_clicked is None

    def test_create_with_code(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(201, RECORD)

        record = gateway.create_link("https://example.com/a", "abc123")

        session.request.assert_called_once_with(
            "POST",
            "http://api.test/api/links",
            json={"target_url": "https://example.com/a", "custom_code": "abc123"},
            timeout=None,
        )
        assert record.code == "abc123"

    def test_create_without_code_omits_field(
        self, gateway: HttpLinkGateway, session: MagicMock
    ) -> None:
        session.request.return_value = make_response(201, RECORD)

        gateway.create_link("https://example.com/a")

        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"target_url": "https://example.com/a"}

    def test_get_link(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(200, {**RECORD, "total_clicks": 4})

        record = gateway.get_link("abc123")

        assert session.request.call_args.args == ("GET", "http://api.test/api/links/abc123")
        assert record.total_clicks == 4

    @pytest.mark.parametrize("status", [200, 204])
    def test_delete_link(
        self, gateway: HttpLinkGateway, session: MagicMock, status: int
    ) -> None:
        session.request.return_value = make_response(status)

        assert gateway.delete_link("abc123") is None
        assert session.request.call_args.args == ("DELETE", "http://api.test/api/links/abc123")

    def test_timeout_is_passed(self, session: MagicMock) -> None:
        gateway = HttpLinkGateway("http://api.test", timeout=5, session=session)
        session.request.return_value = make_response(200, [])

        gateway.list_links()

        assert session.request.call_args.kwargs["timeout"] == 5

    def test_short_url(self, gateway: HttpLinkGateway) -> None:
        assert gateway.short_url("abc123") == "http://api.test/abc123"


class TestErrors:
    def test_conflict(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(409, {"error": "Code already exists"})

        with pytest.raises(ConflictError) as exc:
            gateway.create_link("https://example.com", "dup1234")

        assert exc.value.kind is ErrorKind.CONFLICT
        assert exc.value.status_code == 409
        assert exc.value.message == "Code already exists"

    def test_validation(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(400, {"error": "Invalid URL"})

        with pytest.raises(InputValidationError) as exc:
            gateway.create_link("nope")

        assert exc.value.message == "Invalid URL"

    def test_not_found(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(404, {"error": "Link not found"})

        with pytest.raises(NotFoundError):
            gateway.get_link("missing1")

    def test_server_error_without_body(
        self, gateway: HttpLinkGateway, session: MagicMock
    ) -> None:
        session.request.return_value = make_response(500)

        with pytest.raises(ServerError) as exc:
            gateway.list_links()

        assert exc.value.message == ""
        assert exc.value.status_code == 500

    def test_connection_error(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(NetworkError) as exc:
            gateway.list_links()

        assert exc.value.kind is ErrorKind.NETWORK

    def test_timeout(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.side_effect = requests.Timeout()

        with pytest.raises(NetworkError, match="timed out"):
            gateway.get_link("abc123")

    def test_malformed_record(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(200, {"code": "abc123"})

        with pytest.raises(ServerError):
            gateway.get_link("abc123")

    def test_list_not_a_list(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(200, {"links": []})

        with pytest.raises(ServerError):
            gateway.list_links()

    def test_unreadable_body(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.request.return_value = make_response(200)

        with pytest.raises(ServerError):
            gateway.list_links()


class TestHealthCheck:
    def test_healthy(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.get.return_value = make_response(200, {"ok": True})

        assert gateway.health_check() is True
        session.get.assert_called_once_with(
            "http://api.test/healthz", timeout=HEALTH_TIMEOUT_SECONDS
        )

    def test_unhealthy_status(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.get.return_value = make_response(503)

        assert gateway.health_check() is False

    def test_unreachable(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.get.side_effect = requests.ConnectionError("refused")

        assert gateway.health_check() is False

    def test_hanging_service_times_out(self, gateway: HttpLinkGateway, session: MagicMock) -> None:
        session.get.side_effect = requests.Timeout()

        assert gateway.health_check() is False
        assert session.get.call_args.kwargs["timeout"] == HEALTH_TIMEOUT_SECONDS

    def test_configured_timeout_wins(self, session: MagicMock) -> None:
        gateway = HttpLinkGateway("http://api.test", timeout=2, session=session)
        session.get.return_value = make_response(200, {"ok": True})

        gateway.health_check()

        assert session.get.call_args.kwargs["timeout"] == 2
