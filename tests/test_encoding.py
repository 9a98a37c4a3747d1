"""Tests for the encoding primitives, value model and object codec."""

from __future__ import annotations

import json
import zlib
from datetime import datetime, timezone

import pytest

from django_signing.encoding import (
    Array,
    Base62,
    Base64,
    Bool,
    Float,
    Int,
    JSONSerializer,
    Null,
    Object,
    ObjectCodec,
    String,
    UnixTimestamper,
    compression_worthwhile,
    to_value,
)
from django_signing.exceptions import ConversionError, EncodingError, ObjectFormatError


def test_base64_encode_strips_padding() -> None:
    """Test that encoding is URL-safe and unpadded."""
    assert Base64.encode(b"hello") == "aGVsbG8"
    assert Base64.encode(b"\xfb\xff") == "-_8"
    assert Base64.encode(b"") == ""


def test_base64_decode() -> None:
    """Test that unpadded base64url decodes."""
    assert Base64.decode("aGVsbG8") == b"hello"
    assert Base64.decode("-_8") == b"\xfb\xff"
    assert Base64.decode("") == b""


@pytest.mark.parametrize("encoded", ["aGVsbG8=", "+/8", "aGVs bG8", "a", "aGVsbG9"])
def test_base64_decode_rejects_non_canonical(encoded: str) -> None:
    """Test that padding, standard alphabet, junk and stray bits are refused."""
    with pytest.raises(EncodingError):
        Base64.decode(encoded)


def test_base62_encode() -> None:
    """Test base62 encoding over the 0-9A-Za-z alphabet."""
    assert Base62.encode(0) == "0"
    assert Base62.encode(9) == "9"
    assert Base62.encode(10) == "A"
    assert Base62.encode(61) == "z"
    assert Base62.encode(62) == "10"
    assert Base62.encode(1640995200) == "1n3RoW"


def test_base62_encode_rejects_negative() -> None:
    """Test that negative numbers cannot be encoded."""
    with pytest.raises(ValueError):
        Base62.encode(-1)


def test_base62_decode() -> None:
    """Test that base62 decoding inverts encoding."""
    assert Base62.decode("0") == 0
    assert Base62.decode("10") == 62
    assert Base62.decode("1n3RoW") == 1640995200
    assert Base62.decode(Base62.encode(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize("encoded", ["", "abc!", "-1", "1.5"])
def test_base62_decode_rejects_invalid(encoded: str) -> None:
    """Test that empty and non-alphanumeric input is refused."""
    with pytest.raises(EncodingError):
        Base62.decode(encoded)


def test_timestamper_format_and_parse() -> None:
    """Test that timestamps are whole unix seconds in base62."""
    timestamper = UnixTimestamper()
    when = datetime(2022, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)

    assert timestamper.format(when) == "1n3RoW"
    assert timestamper.format(when.replace(tzinfo=None)) == "1n3RoW"
    assert timestamper.parse("1n3RoW") == datetime(2022, 1, 1, tzinfo=timezone.utc)
    assert timestamper.parse(when) is when


def test_timestamper_parse_rejects_out_of_range() -> None:
    """Test that timestamps outside 64 bits or the datetime range are refused."""
    timestamper = UnixTimestamper()

    with pytest.raises(EncodingError):
        timestamper.parse(Base62.encode(2**64))

    with pytest.raises(EncodingError):
        timestamper.parse(Base62.encode(2**63))


def test_timestamper_now_is_utc() -> None:
    """Test that the wall clock is timezone-aware UTC."""
    assert UnixTimestamper().now().tzinfo == timezone.utc


def test_to_value_variants() -> None:
    """Test conversion of every supported Python type."""
    assert to_value(None) == Null()
    assert to_value(True) == Bool(True)
    assert to_value(7) == Int(7)
    assert to_value(2.5) == Float(2.5)
    assert to_value("x") == String("x")
    assert to_value([1, "a"]) == Array((Int(1), String("a")))
    assert to_value((1,)) == Array((Int(1),))
    assert to_value({"k": None}) == Object({"k": Null()})


def test_to_value_bool_is_not_int() -> None:
    """Test that booleans keep their own variant."""
    assert to_value(False) == Bool(False)
    assert to_value(False) != Int(0)


def test_object_equality_ignores_order() -> None:
    """Test that objects compare equal regardless of key order."""
    assert to_value({"a": 1, "b": 2}) == to_value({"b": 2, "a": 1})


def test_values_are_hashable() -> None:
    """Test that equal values hash equally, objects included."""
    first = to_value({"a": 1, "b": [2, {"c": None}]})
    second = to_value({"b": [2, {"c": None}], "a": 1})

    assert hash(first) == hash(second)
    assert len({first, second, to_value([1]), to_value([1])}) == 2


def test_object_keys_are_stringified() -> None:
    """Test that non-string keys become strings."""
    value = to_value({None: 1, True: 2, False: 3, 4: 5, 1.5: 6})

    assert value.to_python() == {"null": 1, "true": 2, "false": 3, "4": 5, "1.5": 6}


def test_to_value_integer_range() -> None:
    """Test that integers must fit in i64 or u64."""
    assert to_value(2**64 - 1) == Int(2**64 - 1)
    assert to_value(-(2**63)) == Int(-(2**63))

    for number in (2**64, -(2**63) - 1):
        with pytest.raises(ConversionError):
            to_value(number)


@pytest.mark.parametrize(
    "obj",
    [object(), {1, 2}, b"bytes", float("nan"), float("inf"), {"nested": [object()]}],
)
def test_to_value_rejects_unsupported(obj: object) -> None:
    """Test that unsupported values raise a typed conversion error."""
    with pytest.raises(ConversionError) as excinfo:
        to_value(obj)

    assert isinstance(excinfo.value, TypeError)
    assert excinfo.value.type_name


def test_to_value_rejects_self_reference() -> None:
    """Test that a container holding itself is a conversion error."""
    items: list = []
    items.append(items)
    members: dict = {}
    members["self"] = members

    for obj in (items, members, {"outer": [items]}):
        with pytest.raises(ConversionError):
            to_value(obj)


def test_to_value_rejects_deep_nesting() -> None:
    """Test that nesting beyond the interpreter's limit is a conversion error."""
    obj: list = []
    for _ in range(100000):
        obj = [obj]

    with pytest.raises(ConversionError) as excinfo:
        to_value(obj)

    assert isinstance(excinfo.value, TypeError)


def test_to_value_allows_shared_members() -> None:
    """Test that the same list appearing twice is not mistaken for a cycle."""
    shared = [1]

    assert to_value([shared, shared]) == Array((Array((Int(1),)), Array((Int(1),))))


def test_conversion_error_names_type() -> None:
    """Test that the error reports the offending type."""
    with pytest.raises(ConversionError) as excinfo:
        to_value({"when": datetime(2022, 1, 1)})

    assert excinfo.value.type_name == "datetime"


def test_to_python_round_trip() -> None:
    """Test that converting back yields plain JSON-native values."""
    obj = {"a": [1, 2.5, None, True, "s"], "b": {"c": ()}}

    assert to_value(obj).to_python() == {"a": [1, 2.5, None, True, "s"], "b": {"c": []}}


def test_json_serializer_is_compact() -> None:
    """Test that output has no whitespace and keeps non-ASCII raw."""
    serializer = JSONSerializer()

    assert serializer.dumps({"a": 1, "b": [1, 2]}) == b'{"a":1,"b":[1,2]}'
    assert serializer.dumps({"k": "é"}) == '{"k":"é"}'.encode("utf-8")
    assert serializer.loads(b'{"a":1}') == {"a": 1}


def test_json_serializer_rejects_unsupported() -> None:
    """Test that serialization goes through the value model."""
    with pytest.raises(ConversionError):
        JSONSerializer().dumps({"a": {1, 2}})


def test_compression_worthwhile() -> None:
    """Test that compression must save at least two bytes."""
    original = b"x" * 10

    assert compression_worthwhile(original, b"c" * 8)
    assert not compression_worthwhile(original, b"c" * 9)
    assert not compression_worthwhile(original, b"c" * 10)


def test_compression_never_worthwhile_for_empty_payload() -> None:
    """Test that an empty payload is never replaced by compressed bytes."""
    assert not compression_worthwhile(b"", b"")
    assert not compression_worthwhile(b"", zlib.compress(b""))


def test_codec_encode_uncompressed() -> None:
    """Test the uncompressed encoding of a small object."""
    assert ObjectCodec().encode({"a": 1}) == "eyJhIjoxfQ"


def test_codec_small_payload_is_not_compressed() -> None:
    """Test that compression is skipped when it does not pay off."""
    codec = ObjectCodec()

    encoded = codec.encode({"a": 1}, compress=True)

    assert encoded == "eyJhIjoxfQ"
    assert codec.decode(encoded) == {"a": 1}


def test_codec_compresses_repetitive_payload() -> None:
    """Test that a compressible payload is marked and inflates back."""
    codec = ObjectCodec()
    obj = ["abcdefgh"] * 50

    encoded = codec.encode(obj, compress=True)

    assert encoded.startswith(".")
    assert "." not in encoded[1:]
    assert len(encoded) < len(codec.encode(obj))
    assert json.loads(zlib.decompress(Base64.decode(encoded[1:]))) == obj
    assert codec.decode(encoded) == obj


def test_codec_without_compress_never_marks() -> None:
    """Test that the marker only appears when compression was requested."""
    assert not ObjectCodec().encode(["abcdefgh"] * 50).startswith(".")


@pytest.mark.parametrize(
    "text",
    [
        "!!!",  # not base64
        ".",  # empty compressed payload
        ".eyJhIjoxfQ",  # marked compressed but not zlib
        Base64.encode(b"not json"),
        Base64.encode(b"\xff\xfe"),  # not UTF-8
        Base64.encode(b"[" * 100000 + b"]" * 100000),  # nested too deeply
    ],
)
def test_codec_decode_rejects_malformed(text: str) -> None:
    """Test that every decoding failure is an object format error."""
    with pytest.raises(ObjectFormatError):
        ObjectCodec().decode(text)


class ReprSerializer:
    """Serializer storing Python reprs of strings, for injection tests."""

    def dumps(self, obj: str) -> bytes:
        return repr(obj).encode("utf-8")

    def loads(self, data: bytes) -> str:
        text = data.decode("utf-8")
        if len(text) < 2 or text[0] != "'" or text[-1] != "'":
            raise ValueError("not a string repr")
        return text[1:-1]


def test_codec_uses_injected_serializer() -> None:
    """Test that the serializer is pluggable."""
    codec = ObjectCodec(ReprSerializer())

    encoded = codec.encode("hello")

    assert Base64.decode(encoded) == b"'hello'"
    assert codec.decode(encoded) == "hello"
