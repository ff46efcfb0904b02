"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

# Set test environment before importing the package
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest

from authmail.providers.brevo import brevo
from authmail.schemas import ProviderConfig, VerificationRequest

BREVO_SUCCESS = {"messageId": "<202401011200.123456789@smtp-relay.mailin.fr>"}


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    """Requests captured by clients from `make_client`."""
    return []


@pytest.fixture
def make_client(sent_requests: list[httpx.Request]) -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient backed by a mock transport.

    Usage:
        async with make_client(status_code=400, json_body={"message": "bad"}) as client:
            ...
    """

    def _make(
        status_code: int = 201,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(
                status_code, json=BREVO_SUCCESS if json_body is None else json_body
            )

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def provider() -> ProviderConfig:
    """Create a Brevo provider with a key and a structured sender."""
    return brevo(
        api_key="xkeysib-test-key",
        from_={"email": "auth@example.com", "name": "ACME"},
    )


@pytest.fixture
def make_request(provider: ProviderConfig) -> Callable[..., VerificationRequest]:
    """Build verification requests for a provider."""

    def _make(
        provider_config: ProviderConfig | None = None,
        token: str = "abc",
        url: str | None = None,
        **kwargs: Any,
    ) -> VerificationRequest:
        return VerificationRequest(
            identifier="user@example.com",
            url=url or f"https://example.com/callback?token={token}",
            expires=datetime.now(UTC) + timedelta(days=1),
            provider=provider_config or provider,
            token=token,
            **kwargs,
        )

    return _make
