"""Utility modules for jsonhelpers."""

from jsonhelpers.utils.config import load_default_options, save_default_options
from jsonhelpers.utils.json import object_dict, to_string

__all__ = [
    "object_dict",
    "to_string",
    "load_default_options",
    "save_default_options",
]
