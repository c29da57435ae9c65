"""Severity levels shared by the multiplexer and every leveled sink."""

from __future__ import annotations

from enum import IntEnum


class InvalidSeverityError(ValueError):
    """Raised when a value cannot be interpreted as a severity."""


class Severity(IntEnum):
    """Ordered logging severities, lowest first."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    UNKNOWN = 5

    @classmethod
    def coerce(cls, value: int | str | Severity) -> Severity:
        """Return the ``Severity`` for an int, a member or a name.

        Names are case-insensitive; ``"warning"`` is accepted for ``WARN``.
        Digit strings such as ``"2"`` (e.g. from the environment) are ints.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key.lstrip("-").isdigit():
                return cls.coerce(int(key))
            if key == "WARNING":
                key = "WARN"
            try:
                return cls[key]
            except KeyError:
                raise InvalidSeverityError(f"invalid log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidSeverityError(f"invalid log level: {value!r}") from None
        raise InvalidSeverityError(f"invalid log level: {value!r}")


def severity_name(value: int) -> str:
    """Label for *value*; ``"ANY"`` when it is outside the known range."""
    try:
        return Severity(value).name
    except ValueError:
        return "ANY"
