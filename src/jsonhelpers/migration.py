"""Legacy JSON helper API.

This module keeps the older ``create_from_json_*`` / ``write_to_json_*`` call
shapes working on top of core.facade.
- New code should use jsonhelpers.core.facade directly; everything here is a
  thin wrapper.
- One behavioural difference is preserved on purpose:
  ``create_from_json_stream`` closes the stream it was given after reading,
  as the legacy API always did. ``create_from_json_persistent_stream`` and the
  modern ``parse_from_stream`` leave the stream open.
"""

from typing import IO, Any, Optional

from jsonhelpers.core.facade import (
    PathLike,
    parse_from_file,
    parse_from_stream,
    parse_from_string,
    serialize_to_file,
    serialize_to_pretty_file,
    serialize_to_pretty_string,
    serialize_to_string,
)
from jsonhelpers.errors import require
from jsonhelpers.models.options import Converter, SerializerOptions


def create_from_json_stream(stream: IO[Any], target_type: Any = Any) -> Any:
    """Read an instance from a JSON stream, then close the stream.

    The stream is closed whether or not decoding succeeds; any later access
    raises ``ValueError: I/O operation on closed file``.
    """
    require(stream, "stream")
    try:
        return parse_from_stream(stream, target_type)
    finally:
        stream.close()


def create_from_json_persistent_stream(stream: IO[Any], target_type: Any = Any) -> Any:
    """Read an instance from a JSON stream, leaving the stream open."""
    return parse_from_stream(stream, target_type)


def create_from_json_string(
    json: str, target_type: Any = Any, encoding: Optional[str] = None
) -> Any:
    """Create an instance from a JSON string.

    Reason:
        ``encoding`` was accepted by the legacy API and never used; it is kept
        so existing call sites still work.
    """
    return parse_from_string(json, target_type)


def create_from_json_file(path: PathLike, target_type: Any = Any) -> Any:
    """Read an instance from a JSON file."""
    return parse_from_file(path, target_type)


def write_to_json_file(instance: Any, path: PathLike, indented: bool = False) -> None:
    """Write an instance to a JSON file, optionally indented."""
    if indented:
        serialize_to_pretty_file(instance, path)
    else:
        serialize_to_file(instance, path)


def write_to_json_string(
    instance: Any, *converters: Converter, indented: bool = False
) -> str:
    """Convert an instance to a JSON string using the given converters."""
    options = SerializerOptions(converters=converters)
    if indented:
        return serialize_to_pretty_string(instance, options)
    return serialize_to_string(instance, options)
