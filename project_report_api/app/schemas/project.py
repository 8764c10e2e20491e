"""
Pydantic models for project data.

``ProjectCreate`` and ``ProjectUpdate`` validate request bodies;
``ProjectRead`` is what the API returns.  The ``id`` is an opaque string
assigned on creation.  Field validators run in ``before`` mode so that a
wrong type is reported with the same message as an empty value.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictStr, field_validator, model_validator

from ..validators import optional_string, optional_text, required_text


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: StrictStr = Field(..., examples=["Alpha"])
    description: StrictStr = Field("", examples=["Internal tooling rewrite"])

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return required_text(v, "name")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, v):
        return optional_string(v, "description") or ""


class ProjectUpdate(BaseModel):
    """Schema for updating a project.

    Both fields are optional, but at least one must be given; only
    provided fields will be updated.
    """

    name: Optional[StrictStr] = Field(None, examples=["Alpha v2"])
    description: Optional[StrictStr] = Field(None, examples=["Rescoped to the billing module"])

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        return optional_text(v, "name")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, v):
        return optional_string(v, "description")

    @model_validator(mode="after")
    def require_a_field(self) -> "ProjectUpdate":
        if self.name is None and self.description is None:
            raise ValueError(
                "Either the key 'name' or 'description' is required to update the project"
            )
        return self


class ProjectRead(BaseModel):
    """Schema for reading a project from the API."""

    id: str
    name: str
    description: str

    model_config = {
        "from_attributes": True,
    }
