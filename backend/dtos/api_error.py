"""
API Error DTO

A single field-level failure reported to API clients.
"""

from pydantic import BaseModel, Field


class ApiError(BaseModel):
    """
    One validation failure, with the field expressed in external (API) naming.

    Two errors are equal when both field and message match.
    """

    field: str = Field(description="External name of the offending field")
    message: str = Field(description="Human-readable violation message")

    class Config:
        """Pydantic configuration."""
        frozen = True
        json_schema_extra = {
            "example": {
                "field": "studentEmail",
                "message": "Email should be valid"
            }
        }
