"""Data models for jsonhelpers."""

from jsonhelpers.models.options import (
    Converter,
    SerializerOptions,
    effective_options,
    pretty_options,
)
from jsonhelpers.models.pair import KeyValuePair

__all__ = [
    "Converter",
    "SerializerOptions",
    "effective_options",
    "pretty_options",
    "KeyValuePair",
]
