from enum import Enum
from typing import Optional

from httpx import Response


class ErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    ENCODING_FAILED = "encoding_failed"
    TRANSPORT_ERROR = "transport_error"
    BAD_RESPONSE = "bad_response"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"


class EazyRestError(Exception):
    """Base class of every failure a request can end with.

    The set of subclasses is closed: a call to ``send`` or ``send_async``
    either yields a decoded value or exactly one of these errors.

    Two errors compare equal when they are of the same kind, carry the same
    status code and wrap a cause of the same type.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        response: Optional[Response] = None,
    ) -> None:
        self.message = message
        self.cause = cause
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EazyRestError):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.status_code == other.status_code
            and type(self.cause) is type(other.cause)
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.status_code, type(self.cause)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidURLError(EazyRestError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, url: Optional[str] = None) -> None:
        super().__init__("The URL is invalid.")
        self.url = url


class EncodingFailedError(EazyRestError):
    kind = ErrorKind.ENCODING_FAILED

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Encoding failed: {cause}", cause=cause)


class TransportError(EazyRestError):
    """No response was obtained (connectivity, DNS, TLS, client timeout)."""

    kind = ErrorKind.TRANSPORT_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network error: {cause}", cause=cause)


class BadResponseError(EazyRestError):
    kind = ErrorKind.BAD_RESPONSE

    def __init__(self, response: Optional[Response] = None) -> None:
        super().__init__(
            "Invalid or missing response.",
            status_code=response.status_code if response is not None else None,
            response=response,
        )


class UnauthorizedError(EazyRestError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, response: Optional[Response] = None) -> None:
        super().__init__(
            "Unauthorized request. Authentication is required (401).",
            status_code=401,
            response=response,
        )


class ForbiddenError(EazyRestError):
    kind = ErrorKind.FORBIDDEN

    def __init__(self, response: Optional[Response] = None) -> None:
        super().__init__(
            "Access forbidden. You do not have permission to access this resource (403).",
            status_code=403,
            response=response,
        )


class NotFoundError(EazyRestError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, response: Optional[Response] = None) -> None:
        super().__init__(
            "Resource not found (404).", status_code=404, response=response
        )


class RequestTimeoutError(EazyRestError):
    """The server answered 408. Client-side timeouts are a ``TransportError``."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, response: Optional[Response] = None) -> None:
        super().__init__("The request timed out.", status_code=408, response=response)


class ServerError(EazyRestError):
    kind = ErrorKind.SERVER_ERROR

    def __init__(self, status_code: int, response: Optional[Response] = None) -> None:
        super().__init__(
            f"Server returned status code {status_code}.",
            status_code=status_code,
            response=response,
        )


class DecodingError(EazyRestError):
    kind = ErrorKind.DECODING_ERROR

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Decoding failed: {cause}", cause=cause)


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL missing. Pass base_url to the client or set the EAZYREST_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
