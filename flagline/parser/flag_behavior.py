# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagBehavior` and `FlagCategory`, the two closed sets of variants that
describe a registered flag.

`FlagBehavior` is declared by the caller at registration time and controls how
the engine binds values to the flag. `FlagCategory` is never declared: it is
derived once from the flag spelling (`-v`, `-value` or `--verbose`).

Supports alias coercion for config-friendly values, mirroring the way other
enum-driven settings are accepted from YAML/TOML files.

Example:
    FlagBehavior("arg_required") → FlagBehavior.ARG_REQUIRED
    FlagBehavior("switch")       → FlagBehavior.BLANK (via alias)
    FlagBehavior("SEP-OPTIONAL") → FlagBehavior.SEP_OPTIONAL
"""
from __future__ import annotations

from enum import Enum


class FlagBehavior(Enum):
    """
    Defines how a flag relates to values on the command line.

    Members:
        BLANK: Stand-alone switch that never takes a value (e.g. `--verbose`).
        ARG_REQUIRED: Mandatory flag followed by a value (e.g. `-f value`, `-fvalue`).
        ARG_OPTIONAL: Optional flag; when present it is followed by a value.
        SEP_REQUIRED: Mandatory flag whose value follows a `=` (e.g. `--file=data.txt`).
        SEP_OPTIONAL: Optional flag whose value follows a `=`.

    Aliases:
        - "switch" / "flag" → "blank"
        - "required" → "arg_required"
        - "optional" → "arg_optional"

    Both separator behaviours also accept comma-separated value lists such as
    `--range=12,24,36`.
    """

    BLANK = "blank"
    ARG_REQUIRED = "arg_required"
    ARG_OPTIONAL = "arg_optional"
    SEP_REQUIRED = "sep_required"
    SEP_OPTIONAL = "sep_optional"

    @property
    def expects_argument(self) -> bool:
        """True for every behaviour that binds a value to the flag."""
        return self is not FlagBehavior.BLANK

    @property
    def is_required(self) -> bool:
        """True if the flag must appear in every parse."""
        return self in (FlagBehavior.ARG_REQUIRED, FlagBehavior.SEP_REQUIRED)

    @property
    def expects_separator(self) -> bool:
        """True if the value must be introduced by a `=` separator."""
        return self in (FlagBehavior.SEP_REQUIRED, FlagBehavior.SEP_OPTIONAL)

    @classmethod
    def choices(cls) -> list[FlagBehavior]:
        """Return a list of all flag behaviours."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "switch": "blank",
            "flag": "blank",
            "required": "arg_required",
            "optional": "arg_optional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagBehavior:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the flag behaviour."""
        return self.value


class FlagCategory(Enum):
    """
    Syntactic family of a flag, derived from its declared spelling.

    Members:
        SHORT: One dash and a single character (`-v`). May be clustered (`-abc`).
        EXTENDED_SHORT: One dash and a multi-character name (`-value`).
        LONG: Two dashes (`--verbose`).
    """

    SHORT = "short"
    EXTENDED_SHORT = "extended_short"
    LONG = "long"

    @classmethod
    def from_spelling(cls, spelling: str) -> FlagCategory:
        """Derive the category from an already validated flag spelling."""
        if spelling.startswith("--"):
            return cls.LONG
        if len(spelling) == 2:
            return cls.SHORT
        return cls.EXTENDED_SHORT

    def __str__(self) -> str:
        return self.value
