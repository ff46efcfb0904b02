"""Email sign-in providers."""

from authmail.providers.brevo import brevo, send_verification_request

__all__ = ["brevo", "send_verification_request"]
