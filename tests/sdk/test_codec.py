import json
from datetime import date
from typing import Any, ClassVar, Dict, List, Optional

import pytest
from pydantic import BaseModel, Field

from eazyrest import (
    DecodingError,
    EazyRestRequest,
    EncodingFailedError,
    HttpMethod,
    JsonCodec,
)


class Item(BaseModel):
    value: int


class CreateReservation(EazyRestRequest[Item]):
    method: ClassVar[HttpMethod] = HttpMethod.POST
    resource_path: ClassVar[str] = "reservations"

    guest_name: str = Field(alias="guestName")
    nights: int
    arrival: date
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class Unserializable(EazyRestRequest[Item]):
    method: ClassVar[HttpMethod] = HttpMethod.POST
    resource_path: ClassVar[str] = "bad"

    handle: Any


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


class TestJsonCodec:
    class TestEncode:
        def test_encodes_declared_fields_by_alias(self, codec: JsonCodec):
            request = CreateReservation(
                guestName="Ada", nights=2, arrival=date(2025, 4, 28), tags=["vip"]
            )

            assert json.loads(codec.encode(request)) == {
                "guestName": "Ada",
                "nights": 2,
                "arrival": "2025-04-28",
                "tags": ["vip"],
            }

        def test_none_fields_are_omitted(self, codec: JsonCodec):
            request = CreateReservation(
                guestName="Ada", nights=1, arrival=date(2025, 1, 1)
            )

            assert "notes" not in json.loads(codec.encode(request))

        def test_unrepresentable_field_fails(self, codec: JsonCodec):
            with pytest.raises(EncodingFailedError) as exc_info:
                codec.encode(Unserializable(handle=object()))

            assert exc_info.value.cause is not None

        def test_round_trip_reproduces_fields(self, codec: JsonCodec):
            request = CreateReservation(
                guestName="Ada",
                nights=3,
                arrival=date(2025, 6, 1),
                notes="late check-in",
                tags=["a", "b"],
            )

            decoded = codec.decode(codec.encode(request), CreateReservation)

            assert decoded == request

    class TestDecode:
        def test_decodes_model(self, codec: JsonCodec):
            assert codec.decode(b'{"value": 7}', Item) == Item(value=7)

        def test_decodes_generic_types(self, codec: JsonCodec):
            assert codec.decode(b'{"a": 1}', Dict[str, int]) == {"a": 1}
            assert codec.decode(b'[{"value": 1}]', List[Item]) == [Item(value=1)]

        def test_decodes_any(self, codec: JsonCodec):
            assert codec.decode(b'{"anything": [1, "two"]}', Any) == {
                "anything": [1, "two"]
            }

        def test_missing_field_fails(self, codec: JsonCodec):
            with pytest.raises(DecodingError):
                codec.decode(b'{"wrong": 1}', Item)

        def test_malformed_json_fails(self, codec: JsonCodec):
            with pytest.raises(DecodingError):
                codec.decode(b"{not json", Item)
