from contextlib import contextmanager
from typing import Generator

from ..models.errors import EazyRestError, TransportError


@contextmanager
def handle_transport_errors() -> Generator[None, None, None]:
    """Context manager wrapping one transport call.

    Whatever the transport raises becomes a ``TransportError`` carrying the
    original exception as its cause. Errors that already belong to the
    taxonomy pass through untouched, and task cancellation is never caught.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        TransportError: When no response could be obtained.
    """
    try:
        yield
    except EazyRestError:
        raise
    except Exception as e:
        raise TransportError(e) from e
