"""Core types: results, exit codes and settings."""

from .config import ConfigError, Settings, load_settings, resolve_settings
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "Settings",
    "load_settings",
    "resolve_settings",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
