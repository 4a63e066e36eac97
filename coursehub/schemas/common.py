"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """{"success": ..., "message": ..., "data": ...}"""

    success: bool = True
    message: str | None = None
    data: DataT | None = None


class MessageResponse(BaseModel):
    """Envelope without data (errors, deletes)."""

    success: bool
    message: str
