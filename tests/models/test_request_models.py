from typing import Any, ClassVar, Dict, List, Optional

import pytest
from pydantic import BaseModel, ValidationError

from eazyrest import (
    DEFAULT_HEADERS,
    EazyRestRequest,
    EazyRestResponse,
    HttpMethod,
)


class Item(BaseModel):
    value: int


class GetItem(EazyRestRequest[Item]):
    resource_path: ClassVar[str] = "items"


class CreateItem(EazyRestRequest[Item]):
    method: ClassVar[HttpMethod] = HttpMethod.POST
    resource_path: ClassVar[str] = "items"

    name: str


class DownloadFile(EazyRestRequest[bytes]):
    resource_path: ClassVar[str] = "files/report.pdf"


class ListItems(EazyRestRequest[EazyRestResponse[List[Item]]]):
    resource_path: ClassVar[str] = "items"


class Untyped(EazyRestRequest):
    resource_path: ClassVar[str] = "anything"


class ExplicitType(EazyRestRequest):
    resource_path: ClassVar[str] = "explicit"
    response_type: ClassVar[Any] = Dict[str, int]


class ItemById(EazyRestRequest[Item]):
    item_id: int

    @property
    def resource_path(self) -> str:  # type: ignore[override]
        return f"items/{self.item_id}"

    @property
    def query_parameters(self) -> Optional[List[tuple]]:
        return [("expand", "owner")]

    @property
    def headers(self) -> Dict[str, str]:
        return {**DEFAULT_HEADERS, "X-Trace": "abc"}


class TestEazyRestRequest:
    class TestDefaults:
        def test_default_method_is_get(self):
            assert GetItem().method == HttpMethod.GET

        def test_default_headers(self):
            request = GetItem()
            assert request.headers["Accept"] == "application/json"
            assert request.headers["Content-Type"] == "application/json"

        def test_default_headers_are_a_copy(self):
            request = GetItem()
            request.headers["Accept"] = "text/plain"

            assert request.headers["Accept"] == "application/json"
            assert DEFAULT_HEADERS["Accept"] == "application/json"

        def test_default_query_and_body_override(self):
            request = GetItem()
            assert request.query_parameters is None
            assert request.body_override is None

    class TestTransportAttributes:
        def test_transport_attributes_are_not_fields(self):
            assert set(CreateItem.model_fields) == {"name"}

        def test_dump_contains_only_declared_fields(self):
            assert CreateItem(name="x").model_dump() == {"name": "x"}

        def test_per_instance_overrides(self):
            request = ItemById(item_id=3)

            assert request.resource_path == "items/3"
            assert request.query_parameters == [("expand", "owner")]
            assert request.headers["X-Trace"] == "abc"

        def test_requests_are_immutable(self):
            request = CreateItem(name="x")
            with pytest.raises(ValidationError):
                request.name = "y"  # type: ignore[misc]

    class TestExpectedResponseType:
        def test_model_parameter(self):
            assert GetItem.expected_response_type() is Item

        def test_bytes_parameter(self):
            assert DownloadFile.expected_response_type() is bytes

        def test_envelope_parameter(self):
            assert (
                ListItems.expected_response_type() == EazyRestResponse[List[Item]]
            )

        def test_inherited_from_parametrized_parent(self):
            class GetItemVerbose(GetItem):
                pass

            assert GetItemVerbose.expected_response_type() is Item

        def test_explicit_class_variable(self):
            assert ExplicitType.expected_response_type() == Dict[str, int]

        def test_unparametrized_request_decodes_any(self):
            assert Untyped.expected_response_type() is Any


class TestHttpMethod:
    def test_values(self):
        assert [m.value for m in HttpMethod] == [
            "GET",
            "POST",
            "PUT",
            "DELETE",
            "PATCH",
            "HEAD",
            "OPTIONS",
        ]

    def test_is_string(self):
        assert HttpMethod.PATCH == "PATCH"
