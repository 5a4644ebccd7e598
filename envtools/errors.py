"""Errors raised or returned when required configuration is missing."""
from __future__ import annotations


def missing_variable_message(name: str) -> str:
    """Build the message shared by the fail and abort policies."""
    return f"please set the environment variable '{name}'"


class MissingEnvironmentVariableError(RuntimeError):
    """A required environment variable is not set or is empty.

    Returned (not raised) by the ``*_or_fail`` lookups so the caller decides
    whether to raise it, log it or fall back.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(missing_variable_message(name))


class EnvironmentAbort(SystemExit):
    """Terminal signal raised by the ``*_or_panic`` lookups.

    Derives from ``SystemExit`` so ``except Exception`` blocks let it through.
    Left unhandled, the interpreter prints the message to stderr and exits
    with status 1.
    """

    def __init__(self, name: str):
        self.name = name
        self.message = missing_variable_message(name)
        super().__init__(self.message)
