from ._codec import JsonCodec
from ._errors import handle_transport_errors
from ._logs import setup_logging
from ._outcome import OutcomeResolver
from ._request_builder import RequestBuilder, WireRequest, parse_base_url
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "JsonCodec",
    "OutcomeResolver",
    "RequestBuilder",
    "WireRequest",
    "get_httpx_client_kwargs",
    "handle_transport_errors",
    "parse_base_url",
    "setup_logging",
]
