"""Adapter between jsonhelpers and the pydantic JSON engine.

This is the only module that calls into pydantic for encoding and decoding.
- Decoding goes through ``pydantic.TypeAdapter(target_type).validate_json``,
  so any type pydantic can validate is a valid target.
- Encoding goes through ``pydantic_core.to_json``, which infers how to encode
  the instance at runtime (models, dataclasses, builtins, datetimes, paths).
- Engine exceptions are translated into ParseError / EncodeError with the
  original exception chained as ``__cause__``.

Numeric formatting is the engine's: floats are written in their shortest
round-trip form, so ``3.14159`` encodes as ``3.14159``.
"""

import logging
from typing import Any, Callable, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, from_json, to_json

from jsonhelpers.errors import EncodeError, ParseError
from jsonhelpers.models.options import Converter, SerializerOptions

logger = logging.getLogger(__name__)

JsonInput = Union[str, bytes, bytearray]

# Indented engine output always uses LF between lines.
_ENGINE_NEWLINE = b"\n"


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


def _engine_inf_nan_mode(options: SerializerOptions) -> str:
    # "error" is enforced after encoding; the engine writes bare constants meanwhile.
    return "constants" if options.inf_nan_mode == "error" else options.inf_nan_mode


def _reject_non_finite(instance: Any, data: bytes) -> None:
    """Raise EncodeError if *data* holds a bare NaN or Infinity token."""
    if b"NaN" not in data and b"Infinity" not in data:
        return
    try:
        from_json(data, allow_inf_nan=False)
    except ValueError as exc:
        logger.debug("Non-finite float in %s: %s", type(instance).__name__, exc)
        raise EncodeError(
            f"Cannot encode {type(instance).__name__} as JSON: "
            "non-finite float (NaN or Infinity) is not valid JSON"
        ) from exc


def chain_converters(
    converters: Sequence[Converter],
) -> Optional[Callable[[Any], Any]]:
    """Combine *converters* into a single engine fallback.

    Converters are tried in order; a converter declines a value by raising
    TypeError. Returns None when there are no converters so the engine keeps
    its default handling of unknown values.
    """
    if not converters:
        return None

    def fallback(value: Any) -> Any:
        for converter in converters:
            try:
                return converter(value)
            except TypeError:
                continue
        raise TypeError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )

    return fallback


def decode(data: JsonInput, target_type: Any, options: SerializerOptions) -> Any:
    """Decode *data* into an instance of *target_type*.

    Raises:
        ParseError: If *data* is not valid JSON or does not match *target_type*.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(target_type)
    try:
        return adapter.validate_json(data, strict=options.strict)
    except ValidationError as exc:
        logger.debug("Failed to decode JSON as %s: %s", _type_name(target_type), exc)
        raise ParseError(
            f"Cannot decode JSON as {_type_name(target_type)}: "
            f"{exc.error_count()} error(s)",
            target_type=target_type,
            errors=exc.errors(include_url=False),
        ) from exc


def encode(instance: Any, options: SerializerOptions) -> bytes:
    """Encode *instance* as UTF-8 JSON bytes.

    Raises:
        EncodeError: If the engine cannot represent *instance*.
    """
    try:
        data = to_json(
            instance,
            indent=options.indent if options.indented else None,
            by_alias=options.by_alias,
            exclude_none=options.exclude_none,
            inf_nan_mode=_engine_inf_nan_mode(options),
            fallback=chain_converters(options.converters),
        )
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        logger.debug("Failed to encode %s: %s", type(instance).__name__, exc)
        raise EncodeError(
            f"Cannot encode {type(instance).__name__} as JSON: {exc}"
        ) from exc

    if options.inf_nan_mode == "error":
        _reject_non_finite(instance, data)

    if options.indented and options.newline != "\n":
        # JSON strings escape raw newlines, so every LF here is structural.
        data = data.replace(_ENGINE_NEWLINE, options.newline.encode("ascii"))
    return data
