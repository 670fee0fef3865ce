"""Core serialization helpers for jsonhelpers.

- facade: synchronous read/write helpers.
- aio: asynchronous read/write helpers (anyio).
- engine: adapter around the pydantic JSON engine.
"""

from jsonhelpers.core.aio import (
    parse_from_file_async,
    parse_from_stream_async,
    serialize_to_file_async,
    serialize_to_pretty_file_async,
    serialize_to_pretty_stream_async,
    serialize_to_stream_async,
)

__all__ = [
    "parse_from_stream_async",
    "parse_from_file_async",
    "serialize_to_stream_async",
    "serialize_to_pretty_stream_async",
    "serialize_to_file_async",
    "serialize_to_pretty_file_async",
]
