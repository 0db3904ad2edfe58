"""Pydantic models for outgoing email drafts."""
from pydantic import BaseModel


class EmailMessage(BaseModel):
    """Represents a composed freight quote request, ready to hand to a mailer."""
    to: list[str]
    cc: list[str] | None = None
    subject: str
    markdown: str
