"""Asynchronous JSON read/write helpers.

Async counterparts of the I/O-bound helpers in core.facade, built on anyio so
they run under asyncio or trio.
- Streams are async file objects with awaitable ``read()``/``write()`` (and
  optionally ``flush()``), e.g. :class:`anyio.AsyncFile` from
  ``anyio.open_file`` or ``anyio.wrap_file``. They are never closed here.
- Files are opened with ``anyio.open_file`` inside ``async with``, so they are
  closed on success, on error and on cancellation.

Cancellation is not caught anywhere in this module; it reaches the caller as
the event loop's own cancellation exception.
"""

import logging
from typing import Any, Optional

import anyio

from jsonhelpers.core import engine
from jsonhelpers.core.facade import PathLike, payload_for
from jsonhelpers.errors import require
from jsonhelpers.models.options import (
    SerializerOptions,
    effective_options,
    pretty_options,
)

logger = logging.getLogger(__name__)


def _underlying(stream: Any) -> Any:
    # anyio.AsyncFile exposes the wrapped sync file object as ``wrapped``.
    return getattr(stream, "wrapped", stream)


async def parse_from_stream_async(
    stream: Any,
    target_type: Any = Any,
    options: Optional[SerializerOptions] = None,
) -> Any:
    """Read an instance of *target_type* from an async JSON stream.

    The stream is read to the end from its current position and left open.

    Raises:
        InvalidArgumentError: If *stream* is None.
        ParseError: On malformed content.
        OSError: If reading fails.
    """
    require(stream, "stream")
    data = await stream.read()
    return engine.decode(data, target_type, effective_options(options))


async def parse_from_file_async(
    path: PathLike,
    target_type: Any = Any,
    options: Optional[SerializerOptions] = None,
) -> Any:
    """Read an instance of *target_type* from a JSON file without blocking.

    Raises:
        InvalidArgumentError: If *path* is None.
        FileNotFoundError: If *path* does not exist.
        OSError: If the file cannot be opened or read.
        ParseError: On malformed content.
    """
    require(path, "path")
    async with await anyio.open_file(path, "rb") as f:
        data = await f.read()
    logger.debug("Read %d bytes from %s", len(data), path)
    return engine.decode(data, target_type, effective_options(options))


async def _write_stream(
    instance: Any, stream: Any, options: SerializerOptions
) -> None:
    data = engine.encode(instance, options)
    await stream.write(payload_for(_underlying(stream), data))
    flush = getattr(stream, "flush", None)
    if flush is not None:
        await flush()


async def serialize_to_stream_async(
    instance: Any, stream: Any, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to an async stream as JSON; flush, do not close.

    Raises:
        InvalidArgumentError: If *stream* is None.
        EncodeError: If *instance* cannot be represented as JSON.
    """
    require(stream, "stream")
    await _write_stream(instance, stream, effective_options(options))


async def serialize_to_pretty_stream_async(
    instance: Any, stream: Any, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to an async stream as indented JSON."""
    require(stream, "stream")
    await _write_stream(instance, stream, pretty_options(options))


async def _write_file(
    instance: Any, path: PathLike, options: SerializerOptions
) -> None:
    data = engine.encode(instance, options)
    async with await anyio.open_file(path, "wb") as f:
        await f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)


async def serialize_to_file_async(
    instance: Any, path: PathLike, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to a JSON file without blocking.

    The file is created or truncated.

    Raises:
        InvalidArgumentError: If *path* is None.
        EncodeError: If *instance* cannot be represented as JSON.
        OSError: If *path* cannot be opened for writing.
    """
    require(path, "path")
    await _write_file(instance, path, effective_options(options))


async def serialize_to_pretty_file_async(
    instance: Any, path: PathLike, options: Optional[SerializerOptions] = None
) -> None:
    """Write an instance to an indented JSON file without blocking."""
    require(path, "path")
    await _write_file(instance, path, pretty_options(options))
