import asyncio
import sys
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Union

import pytest
from httpx import Headers, Response

# Ensure local source package (src/eazyrest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from eazyrest import WireRequest  # noqa: E402

Handler = Callable[[WireRequest], Union[Response, BaseException]]


class ScriptedTransport:
    """Transport double: records every request and answers through ``handler``.

    When ``gate`` is set, each call waits for it before answering, which lets
    a test hold requests in flight.
    """

    def __init__(
        self,
        handler: Optional[Handler] = None,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.handler = handler or (lambda request: Response(200, json={}))
        self.requests: List[WireRequest] = []
        self.gate: Optional[asyncio.Event] = None
        self.closed = False
        self._default_headers = Headers(default_headers or {})

    @property
    def default_headers(self) -> Headers:
        return self._default_headers

    async def perform(self, request: WireRequest) -> Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.handler(request)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def aclose(self) -> None:
        self.closed = True

    async def wait_for_requests(self, count: int) -> None:
        while len(self.requests) < count:
            await asyncio.sleep(0)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "EAZYREST_URL",
        "EAZYREST_AUTH_TOKEN",
        "EAZYREST_TIMEOUT",
        "EAZYREST_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com/"


@pytest.fixture
def auth_token() -> str:
    return "Bearer test-token"


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def make_transport() -> Callable[..., ScriptedTransport]:
    return ScriptedTransport
