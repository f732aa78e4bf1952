"""Resend implementation of EmailProvider.

Posts to the Resend REST API through the shared HttpClient. HTML bodies are
rendered from templates/emails; every message also carries a plain-text part.
A missing API key, a non-2xx answer or a transport error all return False:
the caller decides whether that is fatal.
"""

import os
from datetime import datetime, timezone
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import EmailSettings
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)

_RESEND_API_URL = "https://api.resend.com/emails"
_DEFAULT_TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    "templates",
    "emails",
)


class ResendProvider:
    def __init__(
        self,
        settings: EmailSettings,
        http_client: HttpClient,
        app_url: str = "http://localhost:3000",
        template_dir: str = _DEFAULT_TEMPLATE_DIR,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._app_url = app_url
        self._jinja = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.resend_api_key)

    @property
    def _sender(self) -> str:
        return f"{self._settings.resend_from_name} <{self._settings.resend_from_email}>"

    def _render(self, template_name: str, **context) -> str:
        template = self._jinja.get_template(template_name)
        return template.render(
            site_name=self._settings.resend_from_name,
            year=datetime.now(timezone.utc).year,
            app_url=self._app_url,
            **context,
        )

    async def _send(
        self,
        to_email: str,
        subject: str,
        html_body: str,
        text_body: Optional[str] = None,
    ) -> bool:
        if not self.is_configured:
            log.error("email_send_failed", reason="api_key_not_configured")
            return False

        payload: dict = {
            "from": self._sender,
            "to": [to_email],
            "subject": subject,
            "html": html_body,
        }
        if text_body:
            payload["text"] = text_body

        headers = {
            "Authorization": f"Bearer {self._settings.resend_api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._http.post(
                _RESEND_API_URL, json=payload, headers=headers
            )
            if 200 <= response.status_code < 300:
                log.info("email_sent_success", to_email=to_email, subject=subject)
                return True
            log.error(
                "email_sent_failed",
                to_email=to_email,
                subject=subject,
                status_code=response.status_code,
                response=response.text[:200],
            )
            return False
        except Exception as e:
            log.error(
                "email_send_error",
                to_email=to_email,
                subject=subject,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

    async def send_login_code(self, email: str, code: str, expiry_minutes: int) -> bool:
        subject = "Your Admin Login Code"
        site = self._settings.resend_from_name
        year = datetime.now(timezone.utc).year
        html_body = self._render(
            "login_code.html", otp_code=code, expiry_minutes=expiry_minutes
        )
        text_body = (
            f"{site} - Admin Login Code\n\n"
            f"Your login code is: {code}\n\n"
            f"This code will expire in {expiry_minutes} minutes. "
            f"If you didn't request this code, please ignore this email.\n\n"
            f"{site} © {year}"
        )
        return await self._send(email, subject, html_body, text_body)
