"""Serializer options.

This module defines the options bag handed to every facade call.
- Options are immutable: pydantic's frozen config rejects attribute assignment,
  so an instance can be shared between compact and pretty calls.
- Derived configurations (pretty output, extra converters) are produced by
  copying the instance and overriding fields, never by mutation.

Design:
- Field names mirror the engine knobs they map to (see core.engine).
- ``newline`` is explicit so byte-exact pretty output can be requested on any
  platform; it defaults to the host line terminator.
"""

import os
from typing import Any, Callable, Literal, Self, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

Converter = Callable[[Any], Any]
"""Fallback callable for values the engine cannot encode.

Returns a JSON-representable value, or raises TypeError to let the next
converter try.
"""

InfNanMode = Literal["error", "null", "constants", "strings"]

_ALLOWED_NEWLINES = {"\n", "\r\n", "\r"}


class SerializerOptions(BaseModel):
    """Options controlling how instances are encoded and decoded.

    Passing ``None`` instead of an instance to any facade call is equivalent to
    ``SerializerOptions()``, i.e. engine defaults.
    """

    model_config = ConfigDict(frozen=True)

    indented: bool = False
    """Emit indented (pretty) output."""

    indent: int = Field(default=2, ge=1)
    """Spaces per nesting level when indented."""

    newline: str = os.linesep
    """Line terminator between structural elements of indented output."""

    by_alias: bool = True
    """Encode record fields under their alias (e.g. ``Key`` for ``key``)."""

    exclude_none: bool = False
    """Drop record fields whose value is None."""

    inf_nan_mode: InfNanMode = "error"
    """How non-finite floats are written; "error" rejects them."""

    strict: bool = False
    """Decode in strict mode (no type coercion)."""

    converters: Tuple[Converter, ...] = ()
    """Fallback converters, tried in order."""

    @field_validator("newline")
    @classmethod
    def _check_newline(cls, value: str) -> str:
        if value not in _ALLOWED_NEWLINES:
            raise ValueError(f"newline must be one of {sorted(map(repr, _ALLOWED_NEWLINES))}")
        return value

    def pretty(self: Self) -> Self:
        """Return a copy of these options with ``indented`` forced on."""
        return self.model_copy(update={"indented": True})

    def with_converters(self: Self, *converters: Converter) -> Self:
        """Return a copy of these options with *converters* appended."""
        return self.model_copy(update={"converters": self.converters + tuple(converters)})


def effective_options(options: "SerializerOptions | None") -> SerializerOptions:
    """Return *options*, or engine defaults when None."""
    return options if options is not None else SerializerOptions()


def pretty_options(options: "SerializerOptions | None") -> SerializerOptions:
    """Return the effective options for a pretty request.

    The caller's instance is never modified; a fresh copy with
    ``indented=True`` is returned.
    """
    return effective_options(options).pretty()
