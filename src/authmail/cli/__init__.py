"""CLI commands using Typer."""

import asyncio
from datetime import UTC, datetime, timedelta
from secrets import token_hex

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from authmail.errors import AuthError, ProviderError
from authmail.logging import setup_logging
from authmail.providers.brevo import brevo
from authmail.schemas import Theme, VerificationRequest

console = Console()
app = typer.Typer(name="authmail", help="Magic link email CLI")


@app.command()
def version():
    """Show version information."""
    from authmail import __version__

    typer.echo(f"authmail v{__version__}")


@app.command()
def send(
    email: str = typer.Argument(..., help="Recipient email"),
    url: str = typer.Option(
        "http://localhost:3000/api/auth/callback/brevo", "--url", help="Sign-in callback URL"
    ),
    sender: str | None = typer.Option(
        None, "--from", help="Sender address, e.g. 'ACME <auth@acme.com>' (defaults to EMAIL_FROM)"
    ),
    brand_color: str | None = typer.Option(None, "--brand-color", help="Button color"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Send a test sign-in email."""
    setup_logging(verbose=verbose)

    options = {}
    if sender:
        options["from_"] = sender
    provider = brevo(**options)

    token = token_hex(32)
    sign_in_url = httpx.URL(url).copy_merge_params({"token": token, "email": email})
    request = VerificationRequest(
        identifier=email,
        url=str(sign_in_url),
        expires=datetime.now(UTC) + timedelta(seconds=provider.max_age),
        provider=provider,
        token=token,
        theme=Theme(brand_color=brand_color),
    )

    try:
        asyncio.run(provider.send_verification_request(request))
    except (AuthError, ProviderError, httpx.TransportError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print(f"[green]Sent sign-in email to[/green] {email}")
