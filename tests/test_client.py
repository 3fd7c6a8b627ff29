"""Tests for AuthenticatedClient request handling and error classification."""

import asyncio

import httpx
import pytest

from conftest import json_response
from payments_ui.errors import (
    NETWORK_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    HttpError,
    NetworkError,
    UnauthorizedError,
)


class TestHeaders:
    async def test_bearer_token_attached_when_logged_in(self, logged_in_store, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response({"ok": True})

        client = make_client(logged_in_store, handler)
        assert await client.get("/transactions") == {"ok": True}

        assert seen[0].headers["Authorization"] == "Bearer tok-123"
        assert seen[0].url.path == "/api/transactions"

    async def test_no_authorization_header_without_token(self, store, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response({"token": "new"})

        client = make_client(store, handler)
        await client.post("/auth/login", body={"email": "a@example.com", "password": "pw"})

        assert "Authorization" not in seen[0].headers
        assert seen[0].method == "POST"

    async def test_query_params_are_encoded(self, logged_in_store, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response({"transactions": []})

        client = make_client(logged_in_store, handler)
        await client.get("/transactions", params={"page": 2, "limit": 25, "status": "success"})

        assert dict(seen[0].url.params) == {"page": "2", "limit": "25", "status": "success"}


class TestSuccess:
    async def test_empty_body_returns_none(self, logged_in_store, make_client):
        client = make_client(logged_in_store, lambda request: httpx.Response(204))

        assert await client.get("/ping") is None

    async def test_non_json_success_body_is_http_error(self, logged_in_store, make_client):
        client = make_client(
            logged_in_store, lambda request: httpx.Response(200, content=b"<html>")
        )

        with pytest.raises(HttpError) as exc_info:
            await client.get("/transactions")
        assert exc_info.value.status == 200
        assert exc_info.value.message == "Invalid response from server"


class TestUnauthorized:
    async def test_401_clears_session_and_notifies_once(self, logged_in_store, make_client):
        client = make_client(
            logged_in_store, lambda request: json_response({"message": "jwt expired"}, 401)
        )
        navigations = []
        client.subscribe_unauthorized(lambda: navigations.append("login"))

        with pytest.raises(UnauthorizedError) as exc_info:
            await client.get("/transactions")

        assert exc_info.value.message == UNAUTHORIZED_MESSAGE
        assert exc_info.value.kind == "unauthorized"
        assert logged_in_store.get().token is None
        assert logged_in_store.get().user is None
        assert navigations == ["login"]

    async def test_401_without_session_still_signals(self, store, make_client):
        client = make_client(store, lambda request: httpx.Response(401))
        navigations = []
        client.subscribe_unauthorized(lambda: navigations.append("login"))

        with pytest.raises(UnauthorizedError):
            await client.get("/transactions")

        assert navigations == ["login"]

    async def test_concurrent_401s_clear_once_and_signal_per_response(
        self, logged_in_store, make_client
    ):
        client = make_client(logged_in_store, lambda request: httpx.Response(401))
        navigations = []
        cleared = []
        client.subscribe_unauthorized(lambda: navigations.append("login"))
        logged_in_store.subscribe(lambda: cleared.append(True))

        results = await asyncio.gather(
            client.get("/transactions"),
            client.get("/transactions/school/abc"),
            return_exceptions=True,
        )

        assert all(isinstance(result, UnauthorizedError) for result in results)
        assert len(navigations) == 2
        assert cleared == [True]
        assert logged_in_store.get().token is None

    async def test_unsubscribed_listener_is_not_called(self, logged_in_store, make_client):
        client = make_client(logged_in_store, lambda request: httpx.Response(401))
        navigations = []
        unsubscribe = client.subscribe_unauthorized(lambda: navigations.append("login"))
        unsubscribe()

        with pytest.raises(UnauthorizedError):
            await client.get("/transactions")

        assert navigations == []


class TestFailures:
    async def test_server_message_is_preferred(self, logged_in_store, make_client):
        client = make_client(
            logged_in_store, lambda request: json_response({"message": "School not found"}, 404)
        )

        with pytest.raises(HttpError) as exc_info:
            await client.get("/transactions/school/nope")

        assert exc_info.value.status == 404
        assert exc_info.value.detail == "School not found"
        assert exc_info.value.message == "School not found"

    async def test_error_field_is_used_when_message_missing(self, logged_in_store, make_client):
        client = make_client(
            logged_in_store, lambda request: json_response({"error": "Bad filter"}, 400)
        )

        with pytest.raises(HttpError) as exc_info:
            await client.get("/transactions")

        assert exc_info.value.detail == "Bad filter"

    async def test_generic_message_without_server_text(self, logged_in_store, make_client):
        client = make_client(logged_in_store, lambda request: httpx.Response(500, content=b""))

        with pytest.raises(HttpError) as exc_info:
            await client.get("/transactions")

        assert exc_info.value.detail is None
        assert exc_info.value.message == "Internal Server Error (HTTP 500)"
        assert str(exc_info.value) == "[500] Internal Server Error (HTTP 500)"

    async def test_non_401_errors_keep_the_session(self, logged_in_store, make_client):
        client = make_client(logged_in_store, lambda request: httpx.Response(403))

        with pytest.raises(HttpError):
            await client.get("/transactions")

        assert logged_in_store.get().token == "tok-123"

    async def test_connection_failure_is_network_error(self, logged_in_store, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(logged_in_store, handler)

        with pytest.raises(NetworkError) as exc_info:
            await client.get("/transactions")

        assert exc_info.value.message == NETWORK_MESSAGE
        assert exc_info.value.kind == "network"
        assert logged_in_store.get().token == "tok-123"

    async def test_timeout_is_network_error(self, logged_in_store, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(logged_in_store, handler)

        with pytest.raises(NetworkError):
            await client.get("/transactions")
