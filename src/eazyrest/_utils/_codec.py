from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..models.errors import DecodingError, EncodingFailedError


@lru_cache(maxsize=256)
def _type_adapter(type_tag: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_tag)


class JsonCodec:
    """JSON encode/decode capability backed by pydantic."""

    def encode(self, model: BaseModel) -> bytes:
        """Serialize the declared fields of ``model``; ``None`` fields are omitted."""
        try:
            return model.model_dump_json(by_alias=True, exclude_none=True).encode(
                "utf-8"
            )
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingFailedError(e) from e

    def decode(self, data: bytes, type_tag: Any) -> Any:
        try:
            return _type_adapter(type_tag).validate_json(data)
        except (ValidationError, TypeError, ValueError) as e:
            raise DecodingError(e) from e
