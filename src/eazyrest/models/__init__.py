from .errors import (
    BadResponseError,
    BaseUrlMissingError,
    DecodingError,
    EazyRestError,
    EncodingFailedError,
    ErrorKind,
    ForbiddenError,
    InvalidURLError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from .outcome import Outcome
from .requests import DEFAULT_HEADERS, EazyRestRequest, HttpMethod, QueryParameters
from .responses import EazyRestDefaultResponse, EazyRestResponse

__all__ = [
    "BadResponseError",
    "BaseUrlMissingError",
    "DEFAULT_HEADERS",
    "DecodingError",
    "EazyRestDefaultResponse",
    "EazyRestError",
    "EazyRestRequest",
    "EazyRestResponse",
    "EncodingFailedError",
    "ErrorKind",
    "ForbiddenError",
    "HttpMethod",
    "InvalidURLError",
    "NotFoundError",
    "Outcome",
    "QueryParameters",
    "RequestTimeoutError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
]
