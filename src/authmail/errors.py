"""Errors raised while sending sign-in emails."""

from typing import Any


class ProviderError(Exception):
    """Email provider error."""

    pass


class InvalidConfigurationError(ProviderError):
    """Sender identity is missing or malformed."""

    pass


class DeliveryError(ProviderError):
    """The email API rejected the send."""

    def __init__(self, message: str, status_code: int, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class AuthError(Exception):
    """Authentication error."""

    pass


class MissingCredentialError(AuthError):
    """No API key is configured for the provider."""

    pass
