"""Synchronous JSON read/write helpers.

Each helper is a single request/response around the engine (core.engine):
- ``parse_from_*`` decode JSON from a string, a stream or a file.
- ``serialize_to_*`` encode an instance to a string, a stream or a file, in a
  compact and a pretty (indented) variant.

Resource ownership:
- Streams are owned by the caller. They are read from / written to at their
  current position and are never closed here. Written streams are flushed.
- Files are opened and closed here, inside a ``with`` block, so the handle is
  released on success and on error.

Required arguments are checked before any I/O, so an InvalidArgumentError
never leaves a handle behind.
"""

import io
import logging
import os
from typing import IO, Any, Optional, Union

from jsonhelpers.core import engine
from jsonhelpers.errors import require
from jsonhelpers.models.options import (
    SerializerOptions,
    effective_options,
    pretty_options,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def is_text_stream(stream: Any) -> bool:
    """Return True when *stream* expects ``str`` rather than ``bytes``.

    Wrappers that are not ``io.TextIOBase`` subclasses (e.g.
    ``tempfile.SpooledTemporaryFile``) are recognised by their ``mode``.
    """
    if isinstance(stream, io.TextIOBase):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" not in mode


def payload_for(stream: Any, data: bytes) -> Union[str, bytes]:
    """Return *data* in the form *stream* accepts."""
    return data.decode("utf-8") if is_text_stream(stream) else data


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def parse_from_string(
    json: engine.JsonInput,
    target_type: Any = Any,
    options: Optional[SerializerOptions] = None,
) -> Any:
    """Create an instance of *target_type* from a JSON string.

    Args:
        json: JSON source text (``str``, ``bytes`` or ``bytearray``).
        target_type: Type to decode into; ``Any`` yields plain JSON values.
        options: Serializer options; None means engine defaults.

    Returns:
        A new instance of *target_type*.

    Raises:
        InvalidArgumentError: If *json* is None.
        ParseError: If *json* cannot be decoded as *target_type*.
    """
    require(json, "json")
    return engine.decode(json, target_type, effective_options(options))


def parse_from_stream(
    stream: IO[Any],
    target_type: Any = Any,
    options: Optional[SerializerOptions] = None,
) -> Any:
    """Read an instance of *target_type* from a JSON stream.

    The stream is read to the end from its current position and left open.

    Raises:
        InvalidArgumentError: If *stream* is None.
        ParseError: On malformed content.
        OSError: If reading fails.
    """
    require(stream, "stream")
    data = stream.read()
    return engine.decode(data, target_type, effective_options(options))


def parse_from_file(
    path: PathLike,
    target_type: Any = Any,
    options: Optional[SerializerOptions] = None,
) -> Any:
    """Read an instance of *target_type* from a JSON file.

    Raises:
        InvalidArgumentError: If *path* is None.
        FileNotFoundError: If *path* does not exist.
        OSError: If the file cannot be opened or read.
        ParseError: On malformed content.
    """
    require(path, "path")
    with open(path, "rb") as f:
        data = f.read()
    logger.debug("Read %d bytes from %s", len(data), path)
    return engine.decode(data, target_type, effective_options(options))


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def serialize_to_string(
    instance: Any, options: Optional[SerializerOptions] = None
) -> str:
    """Convert an instance to a JSON string.

    Raises:
        EncodeError: If *instance* cannot be represented as JSON.
    """
    return engine.encode(instance, effective_options(options)).decode("utf-8")


def serialize_to_pretty_string(
    instance: Any, options: Optional[SerializerOptions] = None
) -> str:
    """Convert an instance to an indented JSON string.

    *options* is used as given except that ``indented`` is forced on; the
    caller's instance is left untouched.
    """
    return serialize_to_string(instance, pretty_options(options))


def _write_stream(instance: Any, stream: IO[Any], options: SerializerOptions) -> None:
    data = engine.encode(instance, options)
    stream.write(payload_for(stream, data))
    stream.flush()


def serialize_to_stream(
    instance: Any, stream: IO[Any], options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to a stream as JSON.

    Binary streams receive UTF-8 bytes, text streams receive ``str``. The
    stream is flushed but not closed.

    Raises:
        InvalidArgumentError: If *stream* is None.
        EncodeError: If *instance* cannot be represented as JSON.
    """
    require(stream, "stream")
    _write_stream(instance, stream, effective_options(options))


def serialize_to_pretty_stream(
    instance: Any, stream: IO[Any], options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to a stream as indented JSON."""
    require(stream, "stream")
    _write_stream(instance, stream, pretty_options(options))


def _write_file(instance: Any, path: PathLike, options: SerializerOptions) -> None:
    # Encode before opening so an EncodeError leaves an existing file intact.
    data = engine.encode(instance, options)
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)


def serialize_to_file(
    instance: Any, path: PathLike, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to a JSON file, creating or truncating it.

    Raises:
        InvalidArgumentError: If *path* is None.
        EncodeError: If *instance* cannot be represented as JSON.
        OSError: If *path* cannot be opened for writing.
    """
    require(path, "path")
    _write_file(instance, path, effective_options(options))


def serialize_to_pretty_file(
    instance: Any, path: PathLike, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to an indented JSON file, creating or truncating it."""
    require(path, "path")
    _write_file(instance, path, pretty_options(options))
