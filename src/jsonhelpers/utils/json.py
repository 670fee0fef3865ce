"""Ready-made converters for values the engine cannot encode on its own.

The engine already handles builtins, pydantic models, dataclasses, datetimes,
Path, Enum, UUID and Decimal. These converters cover the rest:
- ``object_dict``: plain classes, encoded from their public attributes.
- ``to_string``: anything, encoded as ``str(value)``. Put it last, since it
  never declines.

Usage:
    options = SerializerOptions(converters=(object_dict, to_string))
"""

from typing import Any, Dict


def object_dict(obj: object) -> Dict[str, Any]:
    """Convert a plain object to a dict of its public attributes.

    Raises:
        TypeError: If *obj* has no ``__dict__`` (e.g. it uses ``__slots__``).
    """
    try:
        attributes = vars(obj)
    except TypeError:
        raise TypeError(f"{type(obj).__name__} has no __dict__") from None
    return {k: v for k, v in attributes.items() if not k.startswith("_")}


def to_string(obj: object) -> str:
    """Convert any object to its ``str()`` form."""
    return str(obj)
