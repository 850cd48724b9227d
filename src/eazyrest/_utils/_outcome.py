from logging import getLogger
from typing import Any, Optional

from httpx import Response

from ..models.errors import (
    BadResponseError,
    EazyRestError,
    ForbiddenError,
    NotFoundError,
    RequestTimeoutError,
    ServerError,
    UnauthorizedError,
)
from ._codec import JsonCodec

logger = getLogger(__name__)

_STATUS_ERRORS = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    408: RequestTimeoutError,
}


class OutcomeResolver:
    """Classifies a transport response and decodes its body.

    The status code is always classified first, so an error status never
    reaches the decoder, whatever its body contains.
    """

    def __init__(self, codec: Optional[JsonCodec] = None) -> None:
        self._codec = codec or JsonCodec()

    @staticmethod
    def classify(response: Response) -> Optional[EazyRestError]:
        status_code = response.status_code
        error_type = _STATUS_ERRORS.get(status_code)
        if error_type is not None:
            return error_type(response)
        if not 200 <= status_code < 300:
            return ServerError(status_code, response)
        if not response.content:
            return BadResponseError(response)
        return None

    def resolve(self, response: Response, type_tag: Any) -> Any:
        error = self.classify(response)
        if error is not None:
            logger.debug(
                f"Response {response.status_code} classified as {error.kind.value}"
            )
            raise error

        if type_tag is bytes:
            return response.content

        return self._codec.decode(response.content, type_tag)
