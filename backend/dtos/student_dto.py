"""
Student DTO

External representation of a student record, used both as the request body
for create/partial update and as the response body.
"""

from pydantic import BaseModel, Field
from typing import Optional


class StudentDto(BaseModel):
    """
    Student as seen by API clients.

    Every field is optional at the transport boundary. Required fields are
    enforced on the entity after translation, so a partial update can carry
    only the fields it wants to change. The id is ignored on create.
    """

    id: Optional[int] = Field(None, description="Student ID (assigned by the server)")
    student_first_name: Optional[str] = Field(None, alias="studentFirstName", description="First name")
    student_last_name: Optional[str] = Field(None, alias="studentLastName", description="Last name")
    student_email: Optional[str] = Field(None, alias="studentEmail", description="Email address")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        from_attributes = True
        json_schema_extra = {
            "example": {
                "studentFirstName": "Tom",
                "studentLastName": "Cruise",
                "studentEmail": "tom.cruise@example.com"
            }
        }
