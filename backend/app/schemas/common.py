"""Response envelope shared by every deal review route."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON body of the form {"data": ...}."""

    data: T
