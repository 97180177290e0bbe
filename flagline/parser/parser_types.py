# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State and result models for the Flagline parsing engine.

Contents:
- `ParseState`: The explicit state threaded through one parse pass: the flag
  currently awaiting a value, whether a comma list is still open, and the
  operands collected so far.
- `FlagResult`: A frozen snapshot of one flag after parsing.
- `ParseOutcome`: The immutable result of a successful parse. It stays valid
  after the registry is reset or reused for another parse.

`ParseOutcome` accepts flag names with or without dashes. Asking about a flag
that was never registered answers "not handled" with no values, so callers can
query optional flags without guarding every lookup.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from rich import box
from rich.console import Group
from rich.table import Table

from flagline.parser.classifier import strip_leading_dashes
from flagline.parser.flag_behavior import FlagBehavior
from flagline.parser.flag_rule import FlagRule


@dataclass
class ParseState:
    """Tracks the open flag and the operands during a single parse."""

    active_rule: FlagRule | None = None
    in_value_list: bool = False
    operands: list[str] = field(default_factory=list)

    def open(self, rule: FlagRule) -> None:
        self.active_rule = rule
        self.in_value_list = False

    def close(self) -> None:
        self.active_rule = None
        self.in_value_list = False


@dataclass(frozen=True)
class FlagResult:
    """Snapshot of a single flag at the end of a parse."""

    spelling: str
    behavior: FlagBehavior
    handled: bool
    values: tuple[str, ...]
    separator_seen: bool
    has_value_list: bool

    @classmethod
    def from_rule(cls, rule: FlagRule) -> FlagResult:
        return cls(
            spelling=rule.spelling,
            behavior=rule.behavior,
            handled=rule.handled,
            values=tuple(rule.values),
            separator_seen=rule.separator_seen,
            has_value_list=rule.has_value_list,
        )


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of a successful parse.

    Attributes:
        flags (dict[str, FlagResult]): Snapshot of every registered flag keyed by
            canonical name, in registration order.
        operands (tuple[str, ...]): Free-standing arguments in input order.
        tokens (tuple[str, ...]): The logical tokens the parse consumed.
    """

    flags: dict[str, FlagResult]
    operands: tuple[str, ...] = ()
    tokens: tuple[str, ...] = ()

    @classmethod
    def from_rules(
        cls,
        rules: Iterable[FlagRule],
        operands: Iterable[str],
        tokens: Iterable[str] = (),
    ) -> ParseOutcome:
        return cls(
            flags={rule.name: FlagResult.from_rule(rule) for rule in rules},
            operands=tuple(operands),
            tokens=tuple(tokens),
        )

    def _result(self, flag: str) -> FlagResult | None:
        return self.flags.get(strip_leading_dashes(flag))

    def is_handled(self, flag: str) -> bool:
        """True if the flag appeared and received any value it requires."""
        result = self._result(flag)
        return result is not None and result.handled

    def values(self, flag: str) -> tuple[str, ...]:
        """All values assigned to the flag, in order."""
        result = self._result(flag)
        return result.values if result is not None else ()

    def value(self, flag: str, index: int = 0, default: str = "") -> str:
        """
        Return one value of a flag.

        Args:
            flag (str): Flag name, with or without dashes.
            index (int): Position in the flag's value list.
            default (str): Returned when the flag has no value at `index`.
        """
        values = self.values(flag)
        if -len(values) <= index < len(values):
            return values[index]
        return default

    def value_count(self, flag: str) -> int:
        return len(self.values(flag))

    def has_value_list(self, flag: str) -> bool:
        """True if the flag's last occurrence assigned a comma-separated list."""
        result = self._result(flag)
        return result is not None and result.has_value_list

    def used_separator(self, flag: str) -> bool:
        """True if the flag's last occurrence used `=` before its value."""
        result = self._result(flag)
        return result is not None and result.separator_seen

    def handled_flags(self) -> list[str]:
        """Spellings of every handled flag in registration order."""
        return [result.spelling for result in self.flags.values() if result.handled]

    @property
    def operand_count(self) -> int:
        return len(self.operands)

    def operand(self, index: int, default: str = "") -> str:
        if -len(self.operands) <= index < len(self.operands):
            return self.operands[index]
        return default

    @property
    def first_operand(self) -> str:
        return self.operand(0)

    @property
    def last_operand(self) -> str:
        return self.operand(-1)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of handled flags to their value lists, plus operands."""
        return {
            "flags": {
                result.spelling: list(result.values)
                for result in self.flags.values()
                if result.handled
            },
            "operands": list(self.operands),
        }

    def __rich__(self) -> Group:
        flag_table = Table(title="Flag mapping list", box=box.SIMPLE)
        flag_table.add_column("Flag", style="bold")
        flag_table.add_column("Behavior")
        flag_table.add_column("Values")
        for result in self.flags.values():
            if result.handled or result.values:
                flag_table.add_row(
                    result.spelling, str(result.behavior), ", ".join(result.values)
                )

        operand_table = Table(title="Operands", box=box.SIMPLE)
        operand_table.add_column("#", justify="right")
        operand_table.add_column("Operand")
        for position, operand in enumerate(self.operands):
            operand_table.add_row(str(position), operand)

        return Group(flag_table, operand_table)
