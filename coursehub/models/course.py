"""Course record."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Course(BaseModel):
    """
    A course published by a coach or admin.

    created_by is the creator's account id and never changes after creation.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    image: str | None = None
    created_by: str
    created_at: datetime
    updated_at: datetime
