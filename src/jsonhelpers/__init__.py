# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""jsonhelpers - convenience helpers around a JSON serializer."""

from jsonhelpers.__about__ import __version__
from jsonhelpers.core.aio import (
    parse_from_file_async,
    parse_from_stream_async,
    serialize_to_file_async,
    serialize_to_pretty_file_async,
    serialize_to_pretty_stream_async,
    serialize_to_stream_async,
)
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
from jsonhelpers.errors import (
    ConfigurationError,
    EncodeError,
    InvalidArgumentError,
    JsonHelpersError,
    ParseError,
)
from jsonhelpers.models import KeyValuePair, SerializerOptions

__all__ = [
    "__version__",
    "parse_from_string",
    "parse_from_stream",
    "parse_from_file",
    "serialize_to_string",
    "serialize_to_pretty_string",
    "serialize_to_stream",
    "serialize_to_pretty_stream",
    "serialize_to_file",
    "serialize_to_pretty_file",
    "parse_from_stream_async",
    "parse_from_file_async",
    "serialize_to_stream_async",
    "serialize_to_pretty_stream_async",
    "serialize_to_file_async",
    "serialize_to_pretty_file_async",
    "JsonHelpersError",
    "InvalidArgumentError",
    "ParseError",
    "EncodeError",
    "ConfigurationError",
    "KeyValuePair",
    "SerializerOptions",
]
