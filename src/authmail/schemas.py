"""Provider configuration and verification request models."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from email.utils import getaddresses
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_FROM = "no-reply@authjs.dev"
DEFAULT_MAX_AGE = 24 * 60 * 60  # 1 day

INVALID_ADDRESS_CHARS = frozenset(" \t\r\n,;<>")


class Sender(BaseModel):
    """Sender identity: an email address with an optional display name.

    Accepts a bare address (``"a@b.com"``), a formatted address
    (``"ACME <a@b.com>"``) or a mapping with ``email`` and ``name``.
    """

    email: str
    name: str | None = None

    @model_validator(mode="before")
    @classmethod
    def parse_address(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        addresses = getaddresses([data])
        if len(addresses) != 1:
            # A list of addresses doesn't identify a single sender
            return {"email": "", "name": None}
        name, email = addresses[0]
        return {"email": email, "name": name or None}

    @property
    def domain(self) -> str | None:
        """Domain part of the address, or None if it isn't a single valid address."""
        local, at, domain = self.email.rpartition("@")
        if not at or not local or not domain or "@" in local:
            return None
        if any(char in INVALID_ADDRESS_CHARS for char in self.email):
            return None
        return domain

    def to_payload(self) -> dict[str, str]:
        """Serialize for the email API, omitting an unset name."""
        payload = {"email": self.email}
        if self.name:
            payload["name"] = self.name
        return payload


class Theme(BaseModel):
    """Display options for the sign-in email.

    Only ``brand_color`` and ``button_text`` style the email body;
    ``color_scheme`` and ``logo`` are carried for the surrounding
    framework's own pages.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    color_scheme: Literal["auto", "dark", "light"] = "auto"
    logo: str | None = None
    brand_color: str | None = None
    button_text: str | None = None


class ProviderConfig(BaseModel):
    """Email provider configuration."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = "brevo"
    type: Literal["email"] = "email"
    name: str = "Brevo"
    api_key: SecretStr | None = None
    from_: Sender | None = Field(
        default_factory=lambda: Sender(email=DEFAULT_FROM),
        alias="from",
        description="Sender identity",
    )
    max_age: int = Field(
        default=DEFAULT_MAX_AGE, description="Sign-in link lifetime in seconds"
    )
    send_verification_request: Callable[..., Awaitable[None]]

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None and bool(self.api_key.get_secret_value())


class VerificationRequest(BaseModel):
    """A single sign-in link delivery attempt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    identifier: str = Field(description="Recipient email address")
    url: str = Field(description="Single-use sign-in URL")
    expires: datetime
    provider: ProviderConfig
    token: str
    theme: Theme = Field(default_factory=Theme)
    # Originating HTTP request, passed through untouched
    request: Any = None
