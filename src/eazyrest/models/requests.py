from enum import Enum
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

ResponseT = TypeVar("ResponseT")

QueryParameters = List[Tuple[str, str]]

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class EazyRestRequest(BaseModel, Generic[ResponseT]):
    """Declarative description of one HTTP call and the shape of its answer.

    Subclass it once per endpoint. The pydantic fields of the subclass are the
    request fields; they are what gets JSON-encoded into the body of POST and
    PUT calls. Everything the transport needs is exposed through class
    variables and properties, which pydantic never serializes:

    ```python
    class CreateItem(EazyRestRequest[Item]):
        method: ClassVar[HttpMethod] = HttpMethod.POST
        resource_path: ClassVar[str] = "items"

        name: str
    ```

    The type parameter is the expected response type. ``bytes`` means the
    body is returned unchanged (binary downloads). A class variable
    ``response_type`` can be set instead of parametrizing the class.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        arbitrary_types_allowed=True,
    )

    method: ClassVar[HttpMethod] = HttpMethod.GET
    resource_path: ClassVar[str] = ""
    response_type: ClassVar[Any] = None

    @property
    def headers(self) -> Dict[str, str]:
        return dict(DEFAULT_HEADERS)

    @property
    def query_parameters(self) -> Optional[QueryParameters]:
        return None

    @property
    def body_override(self) -> Optional[bytes]:
        """Raw body sent verbatim instead of the encoded request fields."""
        return None

    @classmethod
    def expected_response_type(cls) -> Any:
        if cls.response_type is not None:
            return cls.response_type

        for klass in cls.__mro__:
            metadata = klass.__dict__.get("__pydantic_generic_metadata__")
            if not metadata or metadata.get("origin") is None:
                continue
            origin, args = metadata["origin"], metadata["args"]
            if (
                issubclass(origin, EazyRestRequest)
                and len(args) == 1
                and not isinstance(args[0], TypeVar)
            ):
                return args[0]

        return Any
