"""Environment variable lookups with logged outcomes.

Every lookup reads the environment once, treats an unset variable and one
set to the empty string the same way, writes exactly one log line and
returns. Secret variants mask the value in the log line only; the real
value is always returned.
"""
from __future__ import annotations

import os
import sys
import threading
from typing import Any, Mapping

from loguru import logger as default_logger

from ..errors import EnvironmentAbort, MissingEnvironmentVariableError

SECRET_MASK = "**********"


class EnvAccessor:
    """Reads environment variables and reports the outcome to a logger."""

    def __init__(self, logger: Any = None, environ: Mapping[str, str] | None = None):
        """Initialize the accessor.

        Args:
            logger: Sink exposing info/warning/error/critical. Defaults to
                    the loguru logger, which writes to stderr.
            environ: Mapping to read from. Defaults to ``os.environ``, read
                     at call time.
        """
        self.logger = logger if logger is not None else default_logger
        self._environ = environ

    def _lookup(self, name: str) -> str:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(name) or ""

    def _log_found(self, name: str, value: str, secret: bool) -> None:
        if secret:
            self.logger.info(f"using configured secret '{SECRET_MASK}' for '{name}'")
        else:
            self.logger.info(f"using configured value '{value}' for '{name}'")

    def _warn(self, name: str, secret: bool) -> str:
        value = self._lookup(name)
        if len(value) == 0:
            self.logger.warning(f"environment variable '{name}' is not set")
        else:
            self._log_found(name, value, secret)
        return value

    def _terminate(self, abort: EnvironmentAbort) -> None:
        complete = getattr(self.logger, "complete", None)
        if callable(complete):
            complete()
        sys.stderr.write(f"{abort.message}\n")
        sys.stderr.flush()
        os._exit(1)

    def _fail(self, name: str, secret: bool) -> tuple[str, MissingEnvironmentVariableError | None]:
        value = self._lookup(name)
        if len(value) == 0:
            error = MissingEnvironmentVariableError(name)
            self.logger.error(str(error))
            return "", error
        self._log_found(name, value, secret)
        return value, None

    def _panic(self, name: str, secret: bool) -> str:
        value = self._lookup(name)
        if len(value) == 0:
            abort = EnvironmentAbort(name)
            self.logger.critical(abort.message)
            if threading.current_thread() is not threading.main_thread():
                # SystemExit would only end this thread
                self._terminate(abort)
            raise abort
        self._log_found(name, value, secret)
        return value

    def get_env_or_warn(self, name: str) -> str:
        """Return the variable's value, or "" after logging a warning."""
        return self._warn(name, secret=False)

    def get_env_secret_or_warn(self, name: str) -> str:
        """Like get_env_or_warn, but the value is masked in the log."""
        return self._warn(name, secret=True)

    def get_env_or_default(self, name: str, default: str) -> str:
        """Return the variable's value, or ``default`` when it is not set.

        Args:
            name: Environment variable name
            default: Value returned verbatim when the variable is absent or empty

        Returns:
            The configured value or the default
        """
        value = self._lookup(name)
        if len(value) == 0:
            self.logger.info(f"environment variable '{name}' is not set, defaulting to {default}")
            return default
        self._log_found(name, value, secret=False)
        return value

    def get_env_or_fail(self, name: str) -> tuple[str, MissingEnvironmentVariableError | None]:
        """Look up a required variable without raising.

        Args:
            name: Environment variable name

        Returns:
            ``(value, None)`` when set, ``("", error)`` when absent or empty
        """
        return self._fail(name, secret=False)

    def get_env_secret_or_fail(self, name: str) -> tuple[str, MissingEnvironmentVariableError | None]:
        """Like get_env_or_fail, but the value is masked in the log."""
        return self._fail(name, secret=True)

    def get_env_or_panic(self, name: str) -> str:
        """Return a required variable or terminate the process.

        Args:
            name: Environment variable name

        Returns:
            The configured value

        Raises:
            EnvironmentAbort: If the variable is absent or empty. This is a
                SystemExit subclass and is logged at CRITICAL first. Outside
                the main thread the process exits with status 1 instead.
        """
        return self._panic(name, secret=False)

    def get_env_secret_or_panic(self, name: str) -> str:
        """Like get_env_or_panic, but the value is masked in the log."""
        return self._panic(name, secret=True)


# Process-wide accessor behind the module-level functions.
_default_accessor = EnvAccessor()


def set_logger(new_logger: Any) -> None:
    """Replace the logger used by the module-level lookup functions.

    Passing None restores the loguru logger. Not synchronized against
    lookups running concurrently in other threads.
    """
    _default_accessor.logger = new_logger if new_logger is not None else default_logger


def get_logger() -> Any:
    """Return the logger used by the module-level lookup functions."""
    return _default_accessor.logger


def get_env_or_warn(name: str) -> str:
    """Return the variable's value, or "" after logging a warning.

    Args:
        name: Environment variable name

    Returns:
        The configured value, or an empty string when absent or empty
    """
    return _default_accessor.get_env_or_warn(name)


def get_env_secret_or_warn(name: str) -> str:
    """Like get_env_or_warn, but the value is masked in the log."""
    return _default_accessor.get_env_secret_or_warn(name)


def get_env_or_default(name: str, default: str) -> str:
    """Return the variable's value, or ``default`` when it is not set."""
    return _default_accessor.get_env_or_default(name, default)


def get_env_or_fail(name: str) -> tuple[str, MissingEnvironmentVariableError | None]:
    """Return ``(value, None)``, or ``("", error)`` when the variable is missing."""
    return _default_accessor.get_env_or_fail(name)


def get_env_secret_or_fail(name: str) -> tuple[str, MissingEnvironmentVariableError | None]:
    """Like get_env_or_fail, but the value is masked in the log."""
    return _default_accessor.get_env_secret_or_fail(name)


def get_env_or_panic(name: str) -> str:
    """Return a required variable or terminate the process.

    Args:
        name: Environment variable name

    Returns:
        The configured value

    Raises:
        EnvironmentAbort: If the variable is absent or empty
    """
    return _default_accessor.get_env_or_panic(name)


def get_env_secret_or_panic(name: str) -> str:
    """Like get_env_or_panic, but the value is masked in the log."""
    return _default_accessor.get_env_secret_or_panic(name)
