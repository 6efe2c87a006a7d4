"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement for commands without a resource body."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")
