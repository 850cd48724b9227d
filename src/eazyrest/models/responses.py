from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class EazyRestDefaultResponse(BaseModel):
    """Envelope for endpoints that answer with status metadata only."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    code: Optional[int] = None
    details: Optional[List[str]] = None
    error: Optional[str] = None
    message: Optional[str] = None


class EazyRestResponse(EazyRestDefaultResponse, Generic[T]):
    """Envelope whose ``data`` field holds the payload.

    Parametrize it with the payload type, e.g. ``EazyRestResponse[Item]``.
    """

    data: Optional[T] = None
