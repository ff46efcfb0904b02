"""Sign-in email bodies."""

from authmail.schemas import Theme

DEFAULT_BRAND_COLOR = "#346df1"
DEFAULT_BUTTON_TEXT = "#fff"


def html(url: str, host: str, theme: Theme | None = None) -> str:
    """Render the HTML sign-in email.

    Dots in the host are followed by a zero-width space so mail clients
    don't turn it into a link.
    """
    theme = theme or Theme()
    escaped_host = host.replace(".", "&#8203;.")

    brand_color = theme.brand_color or DEFAULT_BRAND_COLOR
    background = "#f9f9f9"
    text_color = "#444"
    main_background = "#fff"
    button_text = theme.button_text or DEFAULT_BUTTON_TEXT

    return f"""<body style="background: {background};">
  <table width="100%" border="0" cellspacing="20" cellpadding="0"
    style="background: {main_background}; max-width: 600px; margin: auto; border-radius: 10px;">
    <tr>
      <td align="center"
        style="padding: 10px 0px; font-size: 22px; font-family: Helvetica, Arial, sans-serif; color: {text_color};">
        Sign in to <strong>{escaped_host}</strong>
      </td>
    </tr>
    <tr>
      <td align="center" style="padding: 20px 0;">
        <table border="0" cellspacing="0" cellpadding="0">
          <tr>
            <td align="center" style="border-radius: 5px;" bgcolor="{brand_color}"><a href="{url}"
                target="_blank"
                style="font-size: 18px; font-family: Helvetica, Arial, sans-serif; color: {button_text}; text-decoration: none; border-radius: 5px; padding: 10px 20px; border: 1px solid {brand_color}; display: inline-block; font-weight: bold;">Sign
                in</a></td>
          </tr>
        </table>
      </td>
    </tr>
    <tr>
      <td align="center"
        style="padding: 0px 0px 10px 0px; font-size: 16px; line-height: 22px; font-family: Helvetica, Arial, sans-serif; color: {text_color};">
        If you did not request this email you can safely ignore it.
      </td>
    </tr>
  </table>
</body>
"""


def text(url: str, host: str) -> str:
    """Render the plain-text sign-in email."""
    return f"Sign in to {host}\n{url}\n\n"
