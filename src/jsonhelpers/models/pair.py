"""Generic key/value record.

Encodes as ``{"Key": ..., "Value": ...}``, the shape legacy JSON documents use
for single dictionary entries.
"""

from typing import Generic, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field

K = TypeVar("K")
V = TypeVar("V")


class KeyValuePair(BaseModel, Generic[K, V]):
    """An immutable key/value pair.

    Can be built by field name (``key=``/``value=``) or by alias
    (``Key=``/``Value=``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: K = Field(alias="Key")
    value: V = Field(alias="Value")

    def as_tuple(self) -> Tuple[K, V]:
        """Return the pair as a plain ``(key, value)`` tuple."""
        return self.key, self.value
