"""Brevo email provider for magic link sign-in."""

import json
import logging
from typing import Any

import httpx

from authmail import templates
from authmail.config import settings
from authmail.errors import DeliveryError, InvalidConfigurationError, MissingCredentialError
from authmail.schemas import ProviderConfig, Sender, VerificationRequest

logger = logging.getLogger(__name__)


def get_host(url: str) -> str:
    """Get the display host of a URL, keeping non-default ports."""
    parsed = httpx.URL(url)
    host = parsed.host
    # IPv6 literals keep their brackets
    if ":" in host:
        host = f"[{host}]"
    if parsed.port is not None:
        return f"{host}:{parsed.port}"
    return host


def build_payload(sender: Sender, to: str, url: str, host: str, theme=None) -> dict[str, Any]:
    """Build the Brevo transactional email request body."""
    return {
        "sender": sender.to_payload(),
        # Recipient name is never sent
        "to": [{"email": to}],
        "subject": f"Sign in to {host}",
        "htmlContent": templates.html(url=url, host=host, theme=theme),
        "textContent": templates.text(url=url, host=host),
    }


async def send_verification_request(
    params: VerificationRequest,
    *,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Send a sign-in email through the Brevo API.

    Args:
        params: The verification request to deliver
        client: HTTP client to send with (a short-lived one is created if omitted)

    Raises:
        InvalidConfigurationError: The sender is missing or has no domain
        MissingCredentialError: No API key is configured
        DeliveryError: Brevo responded with a non-2xx status
    """
    provider = params.provider
    host = get_host(params.url)

    sender = provider.from_
    if sender is None:
        raise InvalidConfigurationError("Brevo error: Missing sender info")
    if sender.domain is None:
        raise InvalidConfigurationError("Brevo error: Invalid sender email")
    if not provider.has_api_key:
        raise MissingCredentialError("Missing Brevo API key")

    headers = {
        "api-key": provider.api_key.get_secret_value(),  # type: ignore[union-attr]
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    payload = build_payload(
        sender=sender,
        to=params.identifier,
        url=params.url,
        host=host,
        theme=params.theme,
    )

    if client is None:
        async with httpx.AsyncClient() as owned_client:
            response = await _post(owned_client, headers, payload)
    else:
        response = await _post(client, headers, payload)

    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = response.text
        logger.error(f"Brevo API error: {response.status_code} - {body}")
        raise DeliveryError(
            "Brevo error: " + json.dumps(body),
            status_code=response.status_code,
            payload=body,
        )

    logger.info(f"Sign-in email sent via Brevo to {params.identifier}")


async def _post(
    client: httpx.AsyncClient,
    headers: dict[str, str],
    payload: dict[str, Any],
) -> httpx.Response:
    return await client.post(
        settings.brevo_api_url,
        headers=headers,
        json=payload,
        timeout=settings.brevo_timeout,
    )


def brevo(**options: Any) -> ProviderConfig:
    """Create a Brevo provider configuration.

    Options override the defaults. The API key falls back to the
    ``AUTH_BREVO_KEY`` setting and the sender to ``EMAIL_FROM``.

    Example:
        provider = brevo(from_={"email": "auth@example.com", "name": "ACME"})
    """
    options.pop("type", None)
    if "from" not in options:
        options.setdefault("from_", settings.email_from)
    options.setdefault("api_key", settings.auth_brevo_key or None)
    options.setdefault("send_verification_request", send_verification_request)
    return ProviderConfig(**options)
