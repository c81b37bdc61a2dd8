"""Contact form endpoints for the contact relay.

This module contains the FastAPI route that relays contact form submissions
to Brevo.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, status

from relay.core.config import Settings, get_settings
from relay.models.contact import ContactResponse, ContactSubmission, ErrorResponse
from relay.services.contact_service import contact_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/send-email",
    response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    summary="Relay a contact form message",
    description="Validate a contact form submission and deliver it through Brevo. No authentication required.",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def send_email(
    submission: Optional[ContactSubmission] = Body(None),
    settings: Settings = Depends(get_settings),
) -> ContactResponse:
    """
    Relay a contact form submission as a transactional email.

    Errors raised by the contact service are rendered by the relay's
    exception handler.

    Args:
        submission: Contact form data; an empty body counts as an empty submission
        settings: Process settings

    Returns:
        Success flag, status message and the Brevo message id
    """
    message_id = await contact_service.send_contact_message(
        submission or ContactSubmission(), settings
    )

    return ContactResponse(
        success=True,
        message="Email sent successfully",
        message_id=message_id,
    )
