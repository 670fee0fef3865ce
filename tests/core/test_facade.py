"""Tests for the synchronous serialization helpers.

This test suite covers:
- The literal encode/decode scenarios for int arrays and key/value pairs
- Pretty output layout and configurable line terminators
- Stream ownership (streams stay open, written streams are flushed)
- File handle release on success and on error
- None handling for every required argument
"""

import io
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, List

import pytest

from jsonhelpers.core import facade
from jsonhelpers.core.facade import (
    parse_from_file,
    parse_from_stream,
    parse_from_string,
    serialize_to_file,
    serialize_to_pretty_file,
    serialize_to_pretty_stream,
    serialize_to_pretty_string,
    serialize_to_stream,
    serialize_to_string,
)
from jsonhelpers.errors import EncodeError, InvalidArgumentError, ParseError
from jsonhelpers.models import KeyValuePair, SerializerOptions

INT_ARRAY_JSON = "[31,32,33,34]"
PI_OBJECT_JSON = '{"Key":"Pi","Value":3.14159}'

PiPair = KeyValuePair[str, float]


@dataclass
class Reading:
    sensor: str
    taken_at: datetime
    values: List[float]


def _pretty_pi(newline: str = os.linesep) -> str:
    return newline.join(["{", '  "Key": "Pi",', '  "Value": 3.14159', "}"])


def test_int_array_to_json() -> None:
    assert serialize_to_string([31, 32, 33, 34]) == INT_ARRAY_JSON


def test_key_value_pair_to_json(pi_pair: PiPair) -> None:
    assert serialize_to_string(pi_pair) == PI_OBJECT_JSON


def test_key_value_pair_to_indented_json(pi_pair: PiPair) -> None:
    """Pretty output is a 4-line block joined by the platform line terminator."""
    assert serialize_to_pretty_string(pi_pair) == _pretty_pi()


def test_pretty_json_explicit_newline(pi_pair: PiPair) -> None:
    """An explicit newline gives byte-exact output on any platform."""
    options = SerializerOptions(newline="\r\n")
    assert serialize_to_pretty_string(pi_pair, options) == _pretty_pi("\r\n")


def test_pretty_json_custom_indent() -> None:
    options = SerializerOptions(indent=4, newline="\n")
    assert serialize_to_pretty_string({"a": [1]}, options) == (
        '{\n    "a": [\n        1\n    ]\n}'
    )


def test_pretty_newline_does_not_touch_string_content() -> None:
    """Newlines inside string values stay escaped."""
    options = SerializerOptions(newline="\r\n")
    result = serialize_to_pretty_string({"text": "a\nb"}, options)
    assert '"a\\nb"' in result
    assert parse_from_string(result) == {"text": "a\nb"}


def test_json_to_int_array() -> None:
    assert parse_from_string("[31, 32, 33, 34]", list[int]) == [31, 32, 33, 34]


def test_json_to_key_value_pair() -> None:
    result = parse_from_string(PI_OBJECT_JSON, PiPair)
    assert result.key == "Pi"
    assert result.value == 3.14159


def test_parse_without_target_type_returns_plain_values() -> None:
    assert parse_from_string(PI_OBJECT_JSON) == {"Key": "Pi", "Value": 3.14159}


def test_parse_accepts_bytes() -> None:
    assert parse_from_string(b"[1,2]", list[int]) == [1, 2]


def test_round_trip_compact_and_pretty(pi_pair: PiPair) -> None:
    """Indentation never changes the decoded content."""
    assert parse_from_string(serialize_to_string(pi_pair), PiPair) == pi_pair
    assert parse_from_string(serialize_to_pretty_string(pi_pair), PiPair) == pi_pair


def test_round_trip_dataclass() -> None:
    reading = Reading("t1", datetime(2024, 5, 1, 12, 30), [1.5, 2.25])
    text = serialize_to_string(reading)
    assert text == '{"sensor":"t1","taken_at":"2024-05-01T12:30:00","values":[1.5,2.25]}'
    assert parse_from_string(text, Reading) == reading


def test_parse_invalid_json_raises_parse_error() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_from_string("[31, 32,", list[int])
    assert exc_info.value.errors
    assert exc_info.value.__cause__ is not None


def test_parse_wrong_shape_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_from_string('{"Key": "Pi"}', PiPair)


def test_strict_mode_rejects_coercion() -> None:
    assert parse_from_string('["1"]', list[int]) == [1]
    with pytest.raises(ParseError):
        parse_from_string('["1"]', list[int], SerializerOptions(strict=True))


def test_serialize_unknown_type_raises_encode_error() -> None:
    with pytest.raises(EncodeError):
        serialize_to_string({"value": object()})


def test_serialize_cycle_raises_encode_error() -> None:
    cyclic: List[Any] = []
    cyclic.append(cyclic)
    with pytest.raises(EncodeError):
        serialize_to_string(cyclic)


def test_serialize_non_finite_float_raises_encode_error() -> None:
    """NaN and Infinity are rejected rather than silently written as null."""
    with pytest.raises(EncodeError):
        serialize_to_string({"v": float("inf")})
    with pytest.raises(EncodeError):
        serialize_to_pretty_string([1.0, float("nan")])


def test_non_finite_float_opt_in_null() -> None:
    options = SerializerOptions(inf_nan_mode="null")
    assert serialize_to_string([1.0, float("inf")], options) == "[1.0,null]"


def test_non_finite_float_leaves_existing_file_untouched(tmp_path: Path) -> None:
    target = tmp_path / "floats.json"
    target.write_text("[1.0]")
    with pytest.raises(EncodeError):
        serialize_to_file([float("nan")], target)
    assert target.read_text() == "[1.0]"


def test_pretty_does_not_mutate_caller_options(pi_pair: PiPair) -> None:
    """A shared options instance stays compact after a pretty call."""
    options = SerializerOptions()
    serialize_to_pretty_string(pi_pair, options)
    assert options.indented is False
    assert serialize_to_string(pi_pair, options) == PI_OBJECT_JSON


def test_pretty_overrides_caller_indented_false(pi_pair: PiPair) -> None:
    options = SerializerOptions(indented=False, newline="\n")
    assert "\n" in serialize_to_pretty_string(pi_pair, options)


def test_stream_to_key_value_pair_keeps_stream_open() -> None:
    """The modern stream reader never takes ownership of the stream."""
    stream = io.BytesIO(PI_OBJECT_JSON.encode("utf-8"))
    result = parse_from_stream(stream, PiPair)

    stream.seek(0)  # must not raise
    assert not stream.closed
    assert result.key == "Pi"
    assert result.value == 3.14159


def test_parse_from_stream_reads_from_current_position() -> None:
    stream = io.BytesIO(b"garbage[1,2]")
    stream.seek(len("garbage"))
    assert parse_from_stream(stream, list[int]) == [1, 2]


def test_parse_from_text_stream() -> None:
    assert parse_from_stream(io.StringIO("[1, 2]"), list[int]) == [1, 2]


def test_serialize_to_binary_stream(pi_pair: PiPair) -> None:
    stream = io.BytesIO()
    serialize_to_stream(pi_pair, stream)
    assert not stream.closed
    assert stream.getvalue() == PI_OBJECT_JSON.encode("utf-8")


def test_serialize_to_text_stream(pi_pair: PiPair) -> None:
    stream = io.StringIO()
    serialize_to_pretty_stream(pi_pair, stream, SerializerOptions(newline="\n"))
    assert stream.getvalue() == _pretty_pi("\n")


def test_serialize_to_spooled_text_stream(pi_pair: PiPair) -> None:
    """Text wrappers outside io.TextIOBase are detected by their mode."""
    with tempfile.SpooledTemporaryFile(mode="w+") as stream:
        serialize_to_stream(pi_pair, stream)
        stream.seek(0)
        assert stream.read() == PI_OBJECT_JSON
        stream.seek(0)
        assert parse_from_stream(stream, PiPair) == pi_pair


def test_serialize_to_spooled_binary_stream(pi_pair: PiPair) -> None:
    with tempfile.SpooledTemporaryFile(mode="w+b") as stream:
        serialize_to_stream(pi_pair, stream)
        stream.seek(0)
        assert stream.read() == PI_OBJECT_JSON.encode("utf-8")


def test_serialize_to_stream_flushes(pi_pair: PiPair, tmp_path: Path) -> None:
    """All bytes are visible through another handle once the call returns."""
    target = tmp_path / "out.json"
    with open(target, "wb") as stream:
        serialize_to_stream(pi_pair, stream)
        assert target.read_bytes() == PI_OBJECT_JSON.encode("utf-8")


def test_file_round_trip(pi_pair: PiPair, tmp_path: Path) -> None:
    target = tmp_path / "pi.json"
    serialize_to_file(pi_pair, target)
    assert target.read_text(encoding="utf-8") == PI_OBJECT_JSON
    assert parse_from_file(target, PiPair) == pi_pair


def test_pretty_file(pi_pair: PiPair, tmp_path: Path) -> None:
    target = tmp_path / "pi.json"
    serialize_to_pretty_file(pi_pair, str(target), SerializerOptions(newline="\n"))
    assert target.read_bytes() == _pretty_pi("\n").encode("utf-8")


def test_serialize_to_file_truncates(tmp_path: Path) -> None:
    target = tmp_path / "data.json"
    target.write_text("[1,2,3,4,5,6,7,8,9,10]")
    serialize_to_file([1], target)
    assert target.read_text() == "[1]"


def test_encode_error_leaves_existing_file_untouched(tmp_path: Path) -> None:
    target = tmp_path / "data.json"
    target.write_text("[1]")
    with pytest.raises(EncodeError):
        serialize_to_file(object(), target)
    assert target.read_text() == "[1]"


def test_parse_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_from_file(tmp_path / "missing.json")


def test_serialize_to_missing_directory_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        serialize_to_file([1], tmp_path / "no" / "such" / "dir.json")


@pytest.fixture
def tracked_open(monkeypatch: pytest.MonkeyPatch) -> List[Any]:
    """Record every file object the facade opens."""
    opened: List[Any] = []

    def tracking_open(*args: Any, **kwargs: Any) -> Any:
        handle = open(*args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr(facade, "open", tracking_open, raising=False)
    return opened


def test_parse_from_file_closes_handle_on_success(
    tracked_open: List[Any], tmp_path: Path
) -> None:
    target = tmp_path / "ok.json"
    target.write_text(INT_ARRAY_JSON)
    parse_from_file(target, list[int])
    assert len(tracked_open) == 1
    assert tracked_open[0].closed
    target.unlink()  # path is free again


def test_parse_from_file_closes_handle_on_parse_error(
    tracked_open: List[Any], tmp_path: Path
) -> None:
    target = tmp_path / "bad.json"
    target.write_text("{not json")
    with pytest.raises(ParseError):
        parse_from_file(target)
    assert len(tracked_open) == 1
    assert tracked_open[0].closed


def test_serialize_to_file_closes_handle(
    tracked_open: List[Any], tmp_path: Path
) -> None:
    serialize_to_file([1, 2], tmp_path / "out.json")
    assert len(tracked_open) == 1
    assert tracked_open[0].closed


@pytest.mark.parametrize(
    "call, argument",
    [
        (lambda: parse_from_string(None), "json"),
        (lambda: parse_from_stream(None), "stream"),
        (lambda: parse_from_file(None), "path"),
        (lambda: serialize_to_stream([1], None), "stream"),
        (lambda: serialize_to_pretty_stream([1], None), "stream"),
        (lambda: serialize_to_file([1], None), "path"),
        (lambda: serialize_to_pretty_file([1], None), "path"),
    ],
)
def test_none_arguments_raise_invalid_argument(call: Any, argument: str) -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        call()
    assert exc_info.value.argument == argument


def test_none_argument_does_no_io(tracked_open: List[Any]) -> None:
    with pytest.raises(InvalidArgumentError):
        serialize_to_file(object(), None)
    assert tracked_open == []


def test_invalid_argument_is_value_error() -> None:
    """Callers catching ValueError keep working."""
    with pytest.raises(ValueError):
        parse_from_string(None)
