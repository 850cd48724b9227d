import asyncio
import concurrent.futures
from functools import partial
from logging import getLogger
from typing import Any, Callable, NoReturn, Optional, Set, Union

from httpx import URL
from pydantic import ValidationError

from ._config import Config
from ._transport import HttpxTransport, Transport
from ._utils import (
    JsonCodec,
    OutcomeResolver,
    RequestBuilder,
    WireRequest,
    handle_transport_errors,
    parse_base_url,
    setup_logging,
)
from ._utils.constants import LOGGER_NAME
from .models.errors import EazyRestError, InvalidURLError, TransportError
from .models.outcome import Outcome
from .models.requests import EazyRestRequest, ResponseT

Completion = Callable[[Outcome[Any]], None]
SendHandle = Union["asyncio.Future[Any]", "concurrent.futures.Future[Any]"]


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class EazyRestClient:
    """Sends declarative requests and resolves their outcome.

    Every call goes through the same three steps: the descriptor is built
    into a wire request, the transport performs it once, and the response
    is classified and decoded. The only suspension point is the transport
    call.

    Two entry points share that pipeline:

    - ``await client.send_async(request)`` returns the decoded value or
      raises one ``EazyRestError``. It resumes on the caller's event loop.
    - ``client.send(request, completion)`` never raises for a request
      failure. ``completion`` receives one ``Outcome``, exactly once, on the
      delivery loop: ``delivery_loop`` when given, otherwise the event loop
      running in the calling thread.

    Example:
        ```python
        async with EazyRestClient("https://api.example.com/") as client:
            client.auth_token = "Bearer abc"
            item = await client.send_async(GetItem(id=7))
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        *,
        auth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        codec: Optional[JsonCodec] = None,
        delivery_loop: Optional[asyncio.AbstractEventLoop] = None,
        debug: Optional[bool] = None,
    ) -> None:
        try:
            self._config = Config.load(
                base_url=base_url,
                auth_token=auth_token,
                timeout=timeout,
                debug=debug,
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"] == ("base_url",):
                    raise InvalidURLError(error["input"]) from e
            raise

        if self._config.debug:
            setup_logging(should_debug=True)
        self._logger = getLogger(LOGGER_NAME)

        codec = codec or JsonCodec()
        self._builder = RequestBuilder(parse_base_url(self._config.base_url), codec)
        self._resolver = OutcomeResolver(codec)

        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            timeout=self._config.timeout
        )
        self._auth_token = self._config.auth_token
        self._delivery_loop = delivery_loop
        self._in_flight: Set[SendHandle] = set()

    @property
    def base_url(self) -> URL:
        return self._builder.base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def auth_token(self) -> Optional[str]:
        """Value of the ``Authorization`` header added to requests.

        Read when a request is built: changing it never affects requests
        already built or in flight.
        """
        return self._auth_token

    @auth_token.setter
    def auth_token(self, value: Optional[str]) -> None:
        self._auth_token = value

    def build(self, request: EazyRestRequest[Any]) -> WireRequest:
        """Resolve ``request`` against this client's configuration.

        Raises:
            InvalidURLError: The resource path or query produce no valid URL.
            EncodingFailedError: The request fields cannot be JSON-encoded.
        """
        return self._builder.build(
            request,
            auth_token=self._auth_token,
            default_headers=self._transport.default_headers,
        )

    async def send_async(self, request: EazyRestRequest[ResponseT]) -> ResponseT:
        wire = self.build(request)
        return await self._perform(wire, request.expected_response_type())

    def send(
        self,
        request: EazyRestRequest[ResponseT],
        completion: Callable[[Outcome[ResponseT]], None],
    ) -> SendHandle:
        """Send ``request`` and report the outcome to ``completion``.

        The request is built immediately, so the current ``auth_token`` is
        the one sent. Build failures are delivered to ``completion`` like any
        other failure. Cancelling the returned future aborts the transport
        call and delivers a ``TransportError``.

        Raises:
            RuntimeError: There is no delivery loop to run the call on.
        """
        loop = self._delivery_loop or _running_loop()
        if loop is None:
            raise RuntimeError(
                "send() needs a running event loop or a client delivery_loop"
            )

        try:
            wire = self.build(request)
        except EazyRestError as error:
            coroutine = self._fail(error)
        else:
            coroutine = self._perform(wire, request.expected_response_type())

        deliver = partial(self._deliver, completion)

        # the loop only keeps weak references to tasks
        handle: SendHandle
        if _running_loop() is loop:
            handle = loop.create_task(coroutine)
            self._in_flight.add(handle)
            handle.add_done_callback(self._in_flight.discard)
            handle.add_done_callback(deliver)
        else:
            handle = asyncio.run_coroutine_threadsafe(coroutine, loop)
            self._in_flight.add(handle)
            handle.add_done_callback(self._in_flight.discard)
            handle.add_done_callback(lambda f: loop.call_soon_threadsafe(deliver, f))
        return handle

    async def _perform(self, wire: WireRequest, type_tag: Any) -> Any:
        self._logger.debug(f"Request: {wire.method} {wire.url}")

        with handle_transport_errors():
            response = await self._transport.perform(wire)

        self._logger.debug(
            f"Response: {response.status_code} {wire.method} {wire.url}"
        )
        return self._resolver.resolve(response, type_tag)

    @staticmethod
    async def _fail(error: EazyRestError) -> NoReturn:
        raise error

    @staticmethod
    def _deliver(completion: Completion, future: SendHandle) -> None:
        if future.cancelled():
            outcome: Outcome[Any] = Outcome.failure(
                TransportError(asyncio.CancelledError())
            )
        else:
            error = future.exception()
            if error is None:
                outcome = Outcome.success(future.result())
            elif isinstance(error, EazyRestError):
                outcome = Outcome.failure(error)
            else:
                raise error
        completion(outcome)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "EazyRestClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
