from typing import Mapping, Optional, Protocol, runtime_checkable

from httpx import AsyncClient, Headers, Response

from ._utils._request_builder import WireRequest
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import HEADER_USER_AGENT, user_agent_value


@runtime_checkable
class Transport(Protocol):
    """The network capability the client delegates to.

    ``perform`` sends one request and returns the response, or raises when
    no response could be obtained. It never retries.
    """

    @property
    def default_headers(self) -> Mapping[str, str]: ...

    async def perform(self, request: WireRequest) -> Response: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """``Transport`` backed by an ``httpx.AsyncClient``.

    The client can be injected; otherwise one is created with the shared
    TLS, proxy and timeout settings.
    """

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        if client is None:
            client = AsyncClient(
                **get_httpx_client_kwargs(timeout),
                headers=Headers({HEADER_USER_AGENT: user_agent_value()}),
            )
        self._client = client

    @property
    def client(self) -> AsyncClient:
        return self._client

    @property
    def default_headers(self) -> Mapping[str, str]:
        return self._client.headers

    async def perform(self, request: WireRequest) -> Response:
        http_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.content,
        )
        return await self._client.send(http_request)

    async def aclose(self) -> None:
        await self._client.aclose()
