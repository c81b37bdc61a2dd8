"""
BrevoService Module

This module renders contact notifications with Jinja2 and delivers them
through Brevo's transactional email API.
"""

import os
import logging
from typing import Any, Dict, Optional

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from relay.core.exceptions import UpstreamError
from relay.models.contact import OutboundEmail

logger = logging.getLogger(__name__)


def nl2br(value: Optional[str]) -> Markup:
    """Escape `value` and turn its line breaks into `<br>` tags."""
    lines = (value or "").replace("\r\n", "\n").split("\n")
    return Markup("<br>").join(escape(line) for line in lines)


template_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
jinja_env = Environment(
    loader=FileSystemLoader(template_dir),
    autoescape=select_autoescape(['html', 'xml']),
    enable_async=True
)
jinja_env.filters["nl2br"] = nl2br


class BrevoService:
    """Brevo transactional email client with template rendering."""

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Asynchronously render a Jinja template with the given context.

        Args:
            template_name: The name of the template file to render
            context: Dictionary of variables to pass to the template

        Returns:
            The rendered template as a string
        """
        template = jinja_env.get_template(template_name)
        return await template.render_async(**context)

    async def send_email(
        self,
        email: OutboundEmail,
        api_key: str,
        api_url: str,
        timeout: float,
    ) -> Optional[str]:
        """
        Send an email through Brevo.

        Args:
            email: Payload to deliver
            api_key: Brevo API key, sent in the `api-key` header
            api_url: Brevo transactional email endpoint
            timeout: Timeout in seconds for the whole request

        Returns:
            The message identifier assigned by Brevo

        Raises:
            UpstreamError: One of its variants, decoded from Brevo's status
                code or from the transport failure
        """
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "api-key": api_key,
        }
        payload = email.model_dump(by_alias=True, exclude_none=True)

        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(api_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Email send failed: {str(e) or type(e).__name__}")
            raise UpstreamError.from_status(
                None, description=str(e) or type(e).__name__
            ) from e

        body = self._parse_body(response)

        if not response.is_success:
            logger.error(f"Email send failed: {response.status_code} - {body}")
            raise UpstreamError.from_status(
                response.status_code,
                payload=body,
                description=f"Request failed with status code {response.status_code}",
            )

        message_id = body.get("messageId") if isinstance(body, dict) else None
        logger.info(f"Email sent successfully: {message_id}")
        return message_id

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode the response body as JSON, falling back to raw text."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


brevo_service = BrevoService()
