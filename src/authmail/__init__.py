"""Magic link sign-in emails delivered through the Brevo API."""

__version__ = "0.1.0"
