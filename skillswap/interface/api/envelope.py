"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{"success": ..., "message": ..., "data": ...}`` wrapper."""

    success: bool = True
    message: str
    data: Optional[T] = None

