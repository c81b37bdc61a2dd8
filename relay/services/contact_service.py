"""Contact relay service.

Validates inbound submissions, derives the Brevo payload from them and hands
it to `brevo_service` for delivery.
"""

import logging
import re
from typing import Optional

from relay.core.config import Settings
from relay.core.exceptions import ConfigurationError, ValidationError
from relay.models.contact import ContactSubmission, EmailAddress, OutboundEmail
from relay.services.brevo_service import brevo_service

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

REQUIRED_FIELDS = ("first_name", "last_name", "email", "message")

PHONE_PLACEHOLDER = "Not provided"
PROJECT_TYPE_PLACEHOLDER = "Not specified"
DEFAULT_SUBJECT = "New Message"


def validate_submission(submission: ContactSubmission) -> None:
    """Check required fields, then the email format.

    Raises:
        ValidationError: On the first failed check
    """
    if not all(getattr(submission, field) for field in REQUIRED_FIELDS):
        raise ValidationError(
            "Missing required fields: firstName, lastName, email, message"
        )

    if not EMAIL_PATTERN.fullmatch(submission.email):
        raise ValidationError("Invalid email format")


def build_subject(project_type: Optional[str]) -> str:
    return f"Portfolio Contact: {project_type or DEFAULT_SUBJECT}"


class ContactService:
    """Turns contact submissions into Brevo emails."""

    async def build_outbound_email(
        self, submission: ContactSubmission, settings: Settings
    ) -> OutboundEmail:
        """Derive the Brevo payload from a validated submission.

        Args:
            submission: Validated contact submission
            settings: Settings holding the receiver address

        Returns:
            OutboundEmail with the submitter as sender and both renderings
        """
        context = {
            "first_name": submission.first_name,
            "last_name": submission.last_name,
            "email": submission.email,
            "phone": submission.phone or PHONE_PLACEHOLDER,
            "project_type": submission.project_type or PROJECT_TYPE_PLACEHOLDER,
            "message": submission.message,
        }
        html_content = await brevo_service.render_template(
            "contact_notification.html", context
        )
        text_content = await brevo_service.render_template(
            "contact_notification.txt", context
        )

        return OutboundEmail(
            sender=EmailAddress(name=submission.full_name, email=submission.email),
            to=[EmailAddress(email=settings.RECEIVER_EMAIL, name=settings.RECEIVER_NAME)],
            subject=build_subject(submission.project_type),
            html_content=html_content,
            text_content=text_content,
        )

    async def send_contact_message(
        self, submission: ContactSubmission, settings: Settings
    ) -> Optional[str]:
        """Validate, transform and deliver one submission.

        Args:
            submission: Inbound contact submission
            settings: Process settings

        Returns:
            Message identifier assigned by Brevo

        Raises:
            ValidationError: If the submission is incomplete or malformed
            ConfigurationError: If no Brevo API key is configured
            UpstreamError: If Brevo rejected the email or could not be reached
        """
        try:
            validate_submission(submission)
        except ValidationError as e:
            logger.info(f"Rejected contact submission: {e.message}")
            raise

        if not settings.BREVO_API_KEY:
            logger.error("Brevo API key is not configured")
            raise ConfigurationError(
                "Brevo API key not configured. Please add BREVO_API_KEY to your .env file"
            )

        email = await self.build_outbound_email(submission, settings)

        logger.info(f"Relaying contact message from {submission.email}")
        return await brevo_service.send_email(
            email,
            api_key=settings.BREVO_API_KEY,
            api_url=settings.BREVO_API_URL,
            timeout=settings.BREVO_TIMEOUT_SECONDS,
        )


contact_service = ContactService()
