"""
Pydantic schemas for reports.

A report always belongs to a project.  On the wire the owning project
is exposed as ``projectId``; in Python the attribute is
``project_id``.
"""

from pydantic import BaseModel, Field, StrictStr, field_validator

from ..validators import required_text


class ReportCreate(BaseModel):
    """Schema for creating a report; the project comes from the URL."""

    text: StrictStr = Field(..., examples=["Weekly status: on track"])

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return required_text(v, "text")


class ReportUpdate(ReportCreate):
    """Schema for replacing the text of a report."""
    pass


class ReportRead(BaseModel):
    """Schema for reading a report from the API."""

    id: str
    project_id: str = Field(..., alias="projectId")
    text: str

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
