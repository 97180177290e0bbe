# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagline.

Every failure is structured: it carries an `ErrorKind`, the offending token or
flag name(s), and a human-readable message that is also returned by `str()`.
Registration-time errors abort the registration of a single rule and leave the
registry untouched. Parse-time errors abort the whole parse; there is no partial
result.

Exception Hierarchy:
- FlaglineError
    ├── FlagDefinitionError
    │   ├── MalformedFlagNameError
    │   └── DuplicateFlagError
    └── FlagParseError
        ├── UnrecognisedFlagError
        ├── MissingArgumentError
        ├── UnexpectedSeparatorError
        ├── MissingSeparatorError
        ├── TooManyOperandsError
        └── MissingRequiredFlagsError
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorKind(Enum):
    """Stable identifiers for every failure Flagline can report."""

    MALFORMED_FLAG_NAME = "malformed_flag_name"
    DUPLICATE_FLAG = "duplicate_flag"
    UNRECOGNISED_FLAG = "unrecognised_flag"
    MISSING_ARGUMENT = "missing_argument"
    UNEXPECTED_SEPARATOR = "unexpected_separator"
    MISSING_SEPARATOR = "missing_separator"
    TOO_MANY_OPERANDS = "too_many_operands"
    MISSING_REQUIRED_FLAGS = "missing_required_flags"

    def __str__(self) -> str:
        return self.value


class FlaglineError(Exception):
    """Base exception for Flagline."""

    kind: ErrorKind

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind}, message={self.message!r})"


class FlagDefinitionError(FlaglineError):
    """Raised when a flag rule cannot be registered."""


class FlagParseError(FlaglineError):
    """Raised when an argument vector violates the registered flag rules."""


class MalformedFlagNameError(FlagDefinitionError):
    """Exception raised when a declared flag spelling is not a valid flag."""

    kind = ErrorKind.MALFORMED_FLAG_NAME

    def __init__(
        self, spelling: str, character: str | None = None, leading: bool = False
    ) -> None:
        if character is None:
            message = (
                f"Flag '{spelling}' is malformed: it must start with one or two "
                "dashes followed by a name"
            )
        elif leading:
            message = (
                f"Flag '{spelling}' must start with a letter after '--', "
                f"found '{character}'"
            )
        else:
            message = f"Flag '{spelling}' contains an illegal character '{character}'"
        super().__init__(message, token=spelling)
        self.spelling = spelling
        self.character = character


class DuplicateFlagError(FlagDefinitionError):
    """Exception raised when a flag with the same canonical name already exists."""

    kind = ErrorKind.DUPLICATE_FLAG

    def __init__(self, spelling: str, existing: str) -> None:
        super().__init__(
            f"Flag '{spelling}' is already defined as '{existing}'", token=spelling
        )
        self.spelling = spelling
        self.existing = existing


class UnrecognisedFlagError(FlagParseError):
    """Exception raised when a dash-prefixed token matches no registered flag."""

    kind = ErrorKind.UNRECOGNISED_FLAG

    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognised flag '{token}'", token=token)


class MissingArgumentError(FlagParseError):
    """Exception raised when a value-bearing flag never receives its value."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, flag: str, token: str | None = None) -> None:
        if token is None:
            message = f"Flag '{flag}' is missing an argument"
        else:
            message = f"Flag '{flag}' expects an argument, found '{token}'"
        super().__init__(message, token=token)
        self.flag = flag


class UnexpectedSeparatorError(FlagParseError):
    """Exception raised when '=' is used with a flag that does not allow it."""

    kind = ErrorKind.UNEXPECTED_SEPARATOR

    def __init__(self, flag: str, token: str | None = None) -> None:
        super().__init__(
            f"The value separator ('=') is not permitted for flag '{flag}'", token=token
        )
        self.flag = flag


class MissingSeparatorError(FlagParseError):
    """Exception raised when a flag requires '=' before its value."""

    kind = ErrorKind.MISSING_SEPARATOR

    def __init__(self, flag: str, token: str | None = None) -> None:
        super().__init__(
            f"Flag '{flag}' requires a value separator ('=') before its value",
            token=token,
        )
        self.flag = flag


class TooManyOperandsError(FlagParseError):
    """Exception raised when more free-standing operands are given than allowed."""

    kind = ErrorKind.TOO_MANY_OPERANDS

    def __init__(self, operands: Sequence[str], limit: int) -> None:
        self.operands = tuple(operands)
        self.limit = limit
        self.excess = self.operands[limit:]
        plural = "" if limit == 1 else "s"
        super().__init__(
            f"Too many operands: {len(self.operands)} found, at most {limit} "
            f"operand{plural} allowed. Unexpected: {', '.join(self.excess)}",
            token=self.excess[0] if self.excess else None,
        )


class MissingRequiredFlagsError(FlagParseError):
    """Exception raised once for all required flags that were never handled."""

    kind = ErrorKind.MISSING_REQUIRED_FLAGS

    def __init__(self, flags: Sequence[str]) -> None:
        self.flags = tuple(flags)
        plural = "s" if len(self.flags) > 1 else ""
        super().__init__(f"Missing required flag{plural}: [{', '.join(self.flags)}]")
