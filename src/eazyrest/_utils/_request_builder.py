import re
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode, urlsplit

from httpx import URL, Headers, InvalidURL

from ..models.errors import InvalidURLError
from ..models.requests import EazyRestRequest, HttpMethod
from ._codec import JsonCodec
from .constants import HEADER_AUTHORIZATION

logger = getLogger(__name__)

# anything outside printable ASCII, plus the characters RFC 3986 never allows
_ILLEGAL_URL_CHARACTERS = re.compile(r'[^\x21-\x7e]|[<>"{}|\\^`]')
_BROKEN_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_ENCODED_BODY_METHODS = (HttpMethod.POST, HttpMethod.PUT)
_MAX_PORT = 65535


@dataclass(frozen=True)
class WireRequest:
    """A fully resolved HTTP request, ready to hand to a transport."""

    method: str
    url: URL
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""


def _is_valid_reference(reference: str) -> bool:
    return not (
        _ILLEGAL_URL_CHARACTERS.search(reference)
        or _BROKEN_PERCENT_ESCAPE.search(reference)
    )


def _is_http_url(url: URL) -> bool:
    return (
        url.scheme in ("http", "https")
        and bool(url.host)
        and (url.port is None or url.port <= _MAX_PORT)
    )


def parse_base_url(base_url: str) -> URL:
    """Parse and validate an absolute http(s) base URL."""
    if not _is_valid_reference(base_url):
        raise InvalidURLError(base_url)
    try:
        url = URL(base_url)
    except InvalidURL as e:
        raise InvalidURLError(base_url) from e
    if not _is_http_url(url):
        raise InvalidURLError(base_url)
    return url


class RequestBuilder:
    """Turns request descriptors into wire requests for one base URL.

    Building is pure: nothing here touches the network, so every failure
    (``InvalidURLError``, ``EncodingFailedError``) happens before a request
    could be sent.
    """

    def __init__(self, base_url: URL, codec: Optional[JsonCodec] = None) -> None:
        self._base_url = base_url
        self._codec = codec or JsonCodec()

    @property
    def base_url(self) -> URL:
        return self._base_url

    def build(
        self,
        request: EazyRestRequest[Any],
        *,
        auth_token: Optional[str] = None,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> WireRequest:
        method = HttpMethod(request.method)
        url = self.resolve_url(request.resource_path, request.query_parameters)
        headers = self.merge_headers(request.headers, auth_token, default_headers)
        content = self.resolve_body(request, method)

        logger.debug(f"Built request: {method.value} {url}")

        return WireRequest(
            method=method.value, url=url, headers=headers, content=content
        )

    def resolve_url(
        self,
        resource_path: str,
        query_parameters: Optional[Sequence[Tuple[str, str]]] = None,
    ) -> URL:
        if not _is_valid_reference(resource_path):
            raise InvalidURLError(resource_path)
        # a network-path reference needs an authority
        if resource_path.startswith("//") and not urlsplit(resource_path).netloc:
            raise InvalidURLError(resource_path)

        try:
            url = self._base_url.join(resource_path)
            if query_parameters:
                # keep the declared order, duplicates included
                query = urlencode(list(query_parameters), quote_via=quote)
                if url.query:
                    query = f"{url.query.decode('ascii')}&{query}"
                url = url.copy_with(query=query.encode("ascii"))
        except InvalidURL as e:
            raise InvalidURLError(resource_path) from e

        if not _is_http_url(url):
            raise InvalidURLError(str(url))

        return url

    @staticmethod
    def merge_headers(
        request_headers: Optional[Mapping[str, str]],
        auth_token: Optional[str] = None,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> Headers:
        # transport defaults < auth token < request headers
        headers = Headers(default_headers or {})
        if auth_token is not None:
            headers[HEADER_AUTHORIZATION] = auth_token
        for name, value in (request_headers or {}).items():
            headers[name] = value
        return headers

    def resolve_body(self, request: EazyRestRequest[Any], method: HttpMethod) -> bytes:
        override = request.body_override
        if override is not None:
            return bytes(override)
        if method in _ENCODED_BODY_METHODS:
            return self._codec.encode(request)
        return b""
