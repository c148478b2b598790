"""Tests for spec.py."""

import pytest
from pydantic import ValidationError

from oasmore.kernel.spec import Operation, SchemaRef, Specification

from conftest import make_spec, op


def test_load_valid_spec():
    """Test loading a minimal OpenAPI 3 document."""
    spec = make_spec(
        paths={"/ping": {"get": op("ping", "Ping", ["health"], x_api_group="ops")}},
        tags=["health"],
    )
    assert spec.title == "Test API"
    assert spec.openapi == "3.0.3"
    get = spec.paths["/ping"].get
    assert get.operation_id == "ping"
    assert get.summary == "Ping"
    assert get.tags == ["health"]
    assert spec.tags[0].name == "health"


def test_unknown_keys_are_kept():
    """Unmodeled keys survive as extras and are dumped back."""
    spec = make_spec(paths={"/ping": {"get": op("ping")}}, basePath="/v1")
    dumped = spec.model_dump(by_alias=True, exclude_unset=True)
    assert dumped["basePath"] == "/v1"
    assert dumped["paths"]["/ping"]["get"]["responses"] == {"200": {"description": "OK"}}
    assert dumped["paths"]["/ping"]["get"]["operationId"] == "ping"


def test_operation_extensions_only_x_prefixed():
    operation = Operation.model_validate({
        "operationId": "a",
        "description": "not an extension",
        "x-api-group": "core",
        "x-limit": 5,
    })
    assert operation.extensions == {"x-api-group": "core", "x-limit": 5}
    assert operation.get_extension("description") == (None, False)


def test_get_extension_string():
    operation = Operation.model_validate({
        "x-str": "value",
        "x-int": 100,
        "x-obj": {"b": 1, "a": [True]},
        "x-null": None,
    })
    assert operation.get_extension_string("x-str") == ("value", True)
    assert operation.get_extension_string("x-int") == ("100", True)
    assert operation.get_extension_string("x-obj") == ('{"a":[true],"b":1}', True)
    assert operation.get_extension_string("x-null") == ("", False)
    assert operation.get_extension_string("x-missing") == ("", False)


def test_document_level_extensions():
    spec = make_spec(**{"x-logo": {"url": "logo.png"}})
    assert spec.get_extension("x-logo") == ({"url": "logo.png"}, True)


def test_schema_ref_from_json():
    ref = SchemaRef.from_json({"$ref": "#/components/schemas/Pet"})
    assert ref.ref == "#/components/schemas/Pet"
    assert ref.value is None

    inline = SchemaRef.from_json({"type": "string"})
    assert inline.ref == ""
    assert inline.value == {"type": "string"}

    empty = SchemaRef.from_json({})
    assert empty.ref == ""
    assert empty.value == {}


def test_schema_ref_round_trip():
    spec = make_spec(schemas={
        "Pet": {"type": "object"},
        "Alias": {"$ref": "#/components/schemas/Pet", "description": "alias"},
    })
    dumped = spec.model_dump(by_alias=True, exclude_unset=True)
    schemas = dumped["components"]["schemas"]
    assert schemas["Pet"] == {"type": "object"}
    assert schemas["Alias"] == {"$ref": "#/components/schemas/Pet", "description": "alias"}


def test_inline_schemas_named_like_model_fields_stay_inline():
    spec = make_spec(schemas={
        "Wrapped": {"value": {"type": "string"}},
        "Numbered": {"ref": 5},
        "Both": {"ref": "a", "value": "b"},
    })
    schemas = spec.components.schemas
    assert schemas["Wrapped"].ref == ""
    assert schemas["Wrapped"].value == {"value": {"type": "string"}}
    assert schemas["Numbered"].value == {"ref": 5}
    assert schemas["Both"].ref == ""

    dumped = spec.model_dump(by_alias=True, exclude_unset=True)["components"]["schemas"]
    assert dumped == {
        "Wrapped": {"value": {"type": "string"}},
        "Numbered": {"ref": 5},
        "Both": {"ref": "a", "value": "b"},
    }


def test_schema_ref_neither_serializes_to_null():
    assert SchemaRef(ref="", value=None).model_dump() is None


def test_schema_map_prefers_components():
    spec = Specification.model_validate({
        "swagger": "2.0",
        "info": {"title": "t"},
        "definitions": {"A": {"type": "string"}},
    })
    assert list(spec.schema_map()) == ["A"]

    spec3 = make_spec(schemas={"B": {}})
    assert list(spec3.schema_map()) == ["B"]
    assert make_spec().schema_map() is None


def test_invalid_operation_shape_rejected():
    with pytest.raises(ValidationError):
        Specification.model_validate({
            "openapi": "3.0.0",
            "info": {"title": "t"},
            "paths": {"/x": {"get": "not an operation"}},
        })
