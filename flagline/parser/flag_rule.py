# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `FlagSpec` and `FlagRule` dataclasses that describe one recognised
command-line flag.

`FlagSpec` is the immutable part: the declared spelling, the caller's
`FlagBehavior` and the derived canonical name and `FlagCategory`. It is
validated once, when it is created.

`FlagRule` wraps a `FlagSpec` together with the mutable per-parse state the
engine fills in (collected values, handled flag, separator and value-list
markers). That state is cleared with `reset()` so a registry can be reused.

Spelling Rules:
- One or two leading dashes followed by a non-dash character.
- Every character after the dash prefix is a letter, a digit, `_`, `?` or `@`.
- A long flag name starts with an ASCII letter (`--2fa` is rejected).
- `--name` is a LONG flag, `-n` a SHORT flag and `-name` an EXTENDED_SHORT flag.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from flagline.exceptions import MalformedFlagNameError
from flagline.parser.classifier import strip_leading_dashes
from flagline.parser.flag_behavior import FlagBehavior, FlagCategory

_FLAG_PREFIX = re.compile(r"-{1,2}[^-]")
_EXTRA_NAME_CHARACTERS = frozenset("_?@")
# long flags are only recognised on the command line when a letter follows "--"
_LONG_NAME_START = re.compile(r"[A-Za-z]")


def _is_name_character(character: str) -> bool:
    return character.isalnum() or character in _EXTRA_NAME_CHARACTERS


def validate_spelling(spelling: str) -> None:
    """
    Check that a declared flag spelling is well formed.

    Args:
        spelling (str): The flag as the caller wrote it, e.g. `-v` or `--depth`.

    Raises:
        MalformedFlagNameError: If the prefix is wrong, a long name does not
            start with a letter, or the name contains an illegal character. The
            error names the first offending character.
    """
    if not isinstance(spelling, str) or not _FLAG_PREFIX.match(spelling):
        raise MalformedFlagNameError(str(spelling))
    if spelling.startswith("--") and not _LONG_NAME_START.match(spelling[2]):
        raise MalformedFlagNameError(spelling, spelling[2], leading=True)
    for character in strip_leading_dashes(spelling):
        if not _is_name_character(character):
            raise MalformedFlagNameError(spelling, character)


@dataclass(frozen=True)
class FlagSpec:
    """
    Immutable descriptor of a registered flag.

    Attributes:
        spelling (str): The declared spelling including dashes (`--depth`).
        behavior (FlagBehavior): How values bind to this flag.
    """

    spelling: str
    behavior: FlagBehavior = FlagBehavior.BLANK

    def __post_init__(self) -> None:
        validate_spelling(self.spelling)
        if not isinstance(self.behavior, FlagBehavior):
            object.__setattr__(self, "behavior", FlagBehavior(self.behavior))

    @property
    def name(self) -> str:
        """Canonical name: the spelling with its leading dashes removed."""
        return strip_leading_dashes(self.spelling)

    @property
    def category(self) -> FlagCategory:
        return FlagCategory.from_spelling(self.spelling)


@dataclass
class FlagRule:
    """
    A registered flag and the state collected for it during the current parse.

    Attributes:
        spec (FlagSpec): The immutable descriptor. Read-only once the rule exists.
        values (list[str]): Values in the order they were assigned, duplicates kept.
        handled (bool): True once the flag was seen and, if needed, given a value.
        separator_seen (bool): True if `=` introduced the value of this occurrence.
        has_value_list (bool): True if this occurrence assigned a comma list.
    """

    _spec: FlagSpec
    values: list[str] = field(default_factory=list)
    handled: bool = False
    separator_seen: bool = False
    has_value_list: bool = False

    @classmethod
    def define(
        cls, spelling: str, behavior: FlagBehavior | str = FlagBehavior.BLANK
    ) -> FlagRule:
        """Validate a spelling and behaviour and build a fresh rule."""
        return cls(FlagSpec(spelling, behavior))  # type: ignore[arg-type]

    @property
    def spec(self) -> FlagSpec:
        return self._spec

    @property
    def spelling(self) -> str:
        return self.spec.spelling

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def category(self) -> FlagCategory:
        return self.spec.category

    @property
    def behavior(self) -> FlagBehavior:
        return self.spec.behavior

    def begin_occurrence(self) -> None:
        """Clear the markers that only describe a single appearance of the flag."""
        self.separator_seen = False
        self.has_value_list = False

    def add_value(self, value: str) -> None:
        """Append a value and mark the flag as handled."""
        self.values.append(value)
        self.handled = True

    def mark_handled(self) -> None:
        self.handled = True

    def reset(self) -> None:
        """Clear all per-parse state so the rule can take part in a new parse."""
        self.values.clear()
        self.handled = False
        self.separator_seen = False
        self.has_value_list = False

    def __str__(self) -> str:
        state = "set" if self.handled else "not set"
        return (
            f"FlagRule({self.spelling}, behavior={self.behavior}, "
            f"state={state}, values={self.values})"
        )
