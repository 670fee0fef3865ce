"""Exception types raised by jsonhelpers.

Every failure surfaces to the caller as a distinct, catchable exception:

- InvalidArgumentError: a required argument was None. Raised before any I/O
  or engine call, so it never leaves a handle open.
- ParseError: the engine could not decode the input into the requested type.
- EncodeError: the engine could not represent the instance as JSON.
- ConfigurationError: a default read from the config file or environment
  is not a valid option value.

File and stream failures are not wrapped: the builtin OSError family
(FileNotFoundError, PermissionError, ...) propagates unchanged, and so does
task cancellation in the async helpers.
"""

from typing import Any, Dict, List, Optional


class JsonHelpersError(Exception):
    """Base class for all jsonhelpers errors."""


class InvalidArgumentError(JsonHelpersError, ValueError):
    """A required argument was missing (None)."""

    def __init__(self, argument: str) -> None:
        """Create the error for the named argument.

        Args:
            argument: Name of the offending parameter.
        """
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument


class ParseError(JsonHelpersError, ValueError):
    """JSON input could not be decoded into the requested type."""

    def __init__(
        self,
        message: str,
        target_type: Any = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.target_type = target_type
        self.errors = errors or []


class EncodeError(JsonHelpersError, ValueError):
    """An instance could not be encoded as JSON."""


def require(value: object, argument: str) -> None:
    """Raise InvalidArgumentError when *value* is None."""
    if value is None:
        raise InvalidArgumentError(argument)


class ConfigurationError(JsonHelpersError, ValueError):
    """A configured default (config file or environment) is invalid."""
