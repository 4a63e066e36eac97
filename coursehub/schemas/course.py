"""Schemas for course create/update requests."""

from pydantic import BaseModel, Field, HttpUrl


class CreateCourseRequest(BaseModel):
    title: str = Field(..., min_length=1, description="Course title")
    description: str = Field(..., min_length=1, description="Course description")
    image: HttpUrl | None = Field(default=None, description="Cover image URL")


class UpdateCourseRequest(BaseModel):
    """Partial update; omitted fields keep their current value."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    image: HttpUrl | None = None
