"""Tests for the JSON codec."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pytest
from pydantic import BaseModel

from methodapi.core.utils.json import body_adapter, decode_json, encode_json
from methodapi.runtime.exceptions import BadRequestError, EncodingError, UnsupportedBodyType


class Color(Enum):
    """Test enum for color values."""

    RED = "red"
    GREEN = "green"


class SimpleModel(BaseModel):
    """Simple Pydantic model for testing."""

    name: str
    value: int


class NestedModel(BaseModel):
    """Nested Pydantic model for testing."""

    simple: SimpleModel
    color: Color


@dataclass
class Point:
    x: int
    y: int


class Opaque:
    pass


class TestEncodeJson:
    """Test encode_json with supported and unsupported payloads."""

    def test_primitives(self) -> None:
        assert encode_json("Hi") == b'"Hi"'
        assert encode_json(1234) == b"1234"
        assert encode_json(True) == b"true"
        assert encode_json(None) == b"null"

    def test_output_is_compact(self) -> None:
        assert encode_json({"a": [1, 2], "b": {"c": None}}) == b'{"a":[1,2],"b":{"c":null}}'

    def test_enum_value(self) -> None:
        assert encode_json(Color.RED) == b'"red"'

    def test_nested_model(self) -> None:
        model = NestedModel(simple=SimpleModel(name="n", value=1), color=Color.GREEN)

        assert encode_json(model) == b'{"simple":{"name":"n","value":1},"color":"green"}'

    def test_dataclass(self) -> None:
        assert encode_json(Point(x=1, y=2)) == b'{"x":1,"y":2}'

    def test_unknown_type(self) -> None:
        with pytest.raises(EncodingError, match="Opaque"):
            encode_json(Opaque())

    def test_unknown_type_nested(self) -> None:
        with pytest.raises(EncodingError):
            encode_json({"inner": [Opaque()]})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, {"ratio": math.nan}])
    def test_non_finite_floats_rejected(self, value) -> None:
        with pytest.raises(EncodingError):
            encode_json(value)


class TestDecodeJson:
    """Test decode_json driven by body annotations."""

    def test_string(self) -> None:
        assert decode_json(body_adapter(str), b'"sup"') == "sup"

    def test_bool(self) -> None:
        assert decode_json(body_adapter(bool), b"false") is False

    def test_model(self) -> None:
        value = decode_json(body_adapter(SimpleModel), b'{"name": "a", "value": 3}')

        assert value == SimpleModel(name="a", value=3)

    def test_dataclass(self) -> None:
        assert decode_json(body_adapter(Point), b'{"x": 1, "y": 2}') == Point(x=1, y=2)

    def test_optional(self) -> None:
        assert decode_json(body_adapter(Optional[Point]), b"null") is None

    def test_unannotated_is_plain_json(self) -> None:
        import inspect

        adapter = body_adapter(inspect.Parameter.empty)

        assert decode_json(adapter, b'{"a": [1]}') == {"a": [1]}

    def test_invalid_json(self) -> None:
        with pytest.raises(BadRequestError, match="Invalid JSON"):
            decode_json(body_adapter(str), b"yo")

    def test_wrong_type(self) -> None:
        with pytest.raises(BadRequestError):
            decode_json(body_adapter(SimpleModel), b'{"name": "a"}')

    @pytest.mark.parametrize(
        "annotation,data",
        [(int, b'"1234"'), (bool, b'"true"'), (float, b'"1.5"'), (str, b"12")],
    )
    def test_no_type_coercion(self, annotation, data) -> None:
        with pytest.raises(BadRequestError):
            decode_json(body_adapter(annotation), data)

    def test_strict_model_from_object(self) -> None:
        value = decode_json(body_adapter(NestedModel), b'{"simple": {"name": "n", "value": 1}, "color": "green"}')

        assert value.color is Color.GREEN


class TestBodyAdapter:
    """Test body_adapter construction."""

    def test_unsupported_type(self) -> None:
        with pytest.raises(UnsupportedBodyType):
            body_adapter(Opaque)
