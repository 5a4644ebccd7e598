"""Helpers for reading configuration from environment variables, logged with loguru."""
from __future__ import annotations

from .errors import EnvironmentAbort, MissingEnvironmentVariableError
from .utils.env import (
    SECRET_MASK,
    EnvAccessor,
    get_env_or_default,
    get_env_or_fail,
    get_env_or_panic,
    get_env_or_warn,
    get_env_secret_or_fail,
    get_env_secret_or_panic,
    get_env_secret_or_warn,
    get_logger,
    set_logger,
)

__version__ = "1.0.0"

__all__ = [
    "SECRET_MASK",
    "EnvAccessor",
    "EnvironmentAbort",
    "MissingEnvironmentVariableError",
    "get_env_or_default",
    "get_env_or_fail",
    "get_env_or_panic",
    "get_env_or_warn",
    "get_env_secret_or_fail",
    "get_env_secret_or_panic",
    "get_env_secret_or_warn",
    "get_logger",
    "set_logger",
]
