"""Declarative HTTP client.

Describe each endpoint as an ``EazyRestRequest`` subclass, then send it with
an ``EazyRestClient``:

```python
from typing import ClassVar

from eazyrest import EazyRestClient, EazyRestRequest, HttpMethod


class GetItem(EazyRestRequest[Item]):
    method: ClassVar[HttpMethod] = HttpMethod.GET
    resource_path: ClassVar[str] = "items"

    @property
    def query_parameters(self):
        return [("id", "7")]


async with EazyRestClient("https://api.example.com/") as client:
    item = await client.send_async(GetItem())
```
"""

from ._client import EazyRestClient
from ._config import Config
from ._transport import HttpxTransport, Transport
from ._utils import JsonCodec, WireRequest, setup_logging
from .models import (
    DEFAULT_HEADERS,
    BadResponseError,
    BaseUrlMissingError,
    DecodingError,
    EazyRestDefaultResponse,
    EazyRestError,
    EazyRestRequest,
    EazyRestResponse,
    EncodingFailedError,
    ErrorKind,
    ForbiddenError,
    HttpMethod,
    InvalidURLError,
    NotFoundError,
    Outcome,
    RequestTimeoutError,
    ServerError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "BadResponseError",
    "BaseUrlMissingError",
    "Config",
    "DEFAULT_HEADERS",
    "DecodingError",
    "EazyRestClient",
    "EazyRestDefaultResponse",
    "EazyRestError",
    "EazyRestRequest",
    "EazyRestResponse",
    "EncodingFailedError",
    "ErrorKind",
    "ForbiddenError",
    "HttpMethod",
    "HttpxTransport",
    "InvalidURLError",
    "JsonCodec",
    "NotFoundError",
    "Outcome",
    "RequestTimeoutError",
    "ServerError",
    "Transport",
    "TransportError",
    "UnauthorizedError",
    "WireRequest",
    "setup_logging",
]
