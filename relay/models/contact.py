"""Contact form models for the contact relay.

This module contains the Pydantic models for the inbound submission, the
payload sent to Brevo and the responses returned to the caller.
"""

from typing import Any, List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field


class ContactSubmission(BaseModel):
    """Request model for contact form submissions.

    Every field is optional at parse time; required fields and the email
    format are checked by `contact_service.validate_submission` so callers get
    the relay's own error messages.

    Attributes:
        first_name: First name of the person getting in touch
        last_name: Last name of the person getting in touch
        email: Reply address of the person getting in touch
        phone: Optional phone number
        project_type: Optional project type, used in the subject line
        message: The message body
    """
    first_name: Annotated[Optional[str], Field(None, alias="firstName")]
    last_name: Annotated[Optional[str], Field(None, alias="lastName")]
    email: Annotated[Optional[str], Field(None)]
    phone: Annotated[Optional[str], Field(None)]
    project_type: Annotated[Optional[str], Field(None, alias="projectType")]
    message: Annotated[Optional[str], Field(None)]

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class EmailAddress(BaseModel):
    name: Optional[str] = None
    email: str


class OutboundEmail(BaseModel):
    """Payload for Brevo's `POST /v3/smtp/email`.

    Attributes:
        sender: The submitter, presented as the sender
        to: The configured receiver
        subject: Subject line
        html_content: HTML rendering of the submission
        text_content: Plain text rendering of the submission
    """
    sender: EmailAddress
    to: List[EmailAddress]
    subject: str
    html_content: str = Field(..., alias="htmlContent")
    text_content: str = Field(..., alias="textContent")

    model_config = ConfigDict(populate_by_name=True)


class ContactResponse(BaseModel):
    """Response model for a relayed contact message."""
    success: bool = Field(..., description="Whether the email was accepted by the provider")
    message: str = Field(..., description="Human readable status")
    message_id: Optional[str] = Field(None, alias="messageId", description="Provider message identifier")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
    service: str
