# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagRegistry`, the ordered collection of `FlagRule` objects owned by one
parser configuration.

Rules are keyed by canonical (dash-stripped) name, so `-v` and `--v` collide.
The registry lives from configuration time through any number of parses;
per-parse state is cleared with `reset_all()` rather than by rebuilding it.

Lookups:
- `lookup(name)`: exact canonical name (leading dashes are tolerated).
- `longest_prefix_match(body, category)`: the rule of the given category whose
  name is the longest prefix of a token body. `--portal99` resolves to
  `--portal` rather than `--port` regardless of registration order.
"""
from __future__ import annotations

from typing import Iterator

from rich import box
from rich.table import Table

from flagline.exceptions import DuplicateFlagError
from flagline.logger import logger
from flagline.parser.classifier import strip_leading_dashes
from flagline.parser.flag_behavior import FlagCategory
from flagline.parser.flag_rule import FlagRule


class FlagRegistry:
    """Ordered registry of flag rules keyed by canonical name."""

    def __init__(self) -> None:
        self._rules: dict[str, FlagRule] = {}
        self._required: list[str] = []

    def register(self, rule: FlagRule) -> FlagRule:
        """
        Add a rule to the registry.

        Args:
            rule (FlagRule): The rule to add.

        Returns:
            FlagRule: The registered rule.

        Raises:
            DuplicateFlagError: If a rule with the same canonical name exists.
                The registry is left unchanged.
        """
        existing = self._rules.get(rule.name)
        if existing is not None:
            raise DuplicateFlagError(rule.spelling, existing.spelling)
        self._rules[rule.name] = rule
        if rule.behavior.is_required:
            self._required.append(rule.name)
        logger.debug("Registered flag '%s' as %s", rule.spelling, rule.behavior)
        return rule

    def lookup(self, name: str) -> FlagRule | None:
        """Return the rule for a canonical name, or None."""
        return self._rules.get(strip_leading_dashes(name))

    def longest_prefix_match(
        self, body: str, category: FlagCategory
    ) -> FlagRule | None:
        """
        Find the most specific rule of `category` whose name starts `body`.

        Args:
            body (str): A token with its leading dashes removed.
            category (FlagCategory): Only rules of this category are considered.

        Returns:
            FlagRule | None: The rule with the longest matching name.
        """
        best: FlagRule | None = None
        for rule in self._rules.values():
            if rule.category is not category or not body.startswith(rule.name):
                continue
            if best is None or len(rule.name) > len(best.name):
                best = rule
        return best

    def reset_all(self) -> None:
        """Clear collected values and markers on every rule."""
        for rule in self._rules.values():
            rule.reset()

    @property
    def required_names(self) -> list[str]:
        """Canonical names of rules that must appear in every parse."""
        return list(self._required)

    def unsatisfied_required(self) -> list[str]:
        """Spellings of required rules not handled in the current parse."""
        return [
            self._rules[name].spelling
            for name in self._required
            if not self._rules[name].handled
        ]

    def __iter__(self) -> Iterator[FlagRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and strip_leading_dashes(name) in self._rules

    def __rich__(self) -> Table:
        table = Table(title="Flag Registry", box=box.SIMPLE)
        table.add_column("Flag", style="bold")
        table.add_column("Category")
        table.add_column("Behavior")
        table.add_column("Required")
        for rule in self._rules.values():
            table.add_row(
                rule.spelling,
                str(rule.category),
                str(rule.behavior),
                "yes" if rule.behavior.is_required else "",
            )
        return table

    def __str__(self) -> str:
        return "\n".join(
            f"Flag: {rule.spelling:<20}{rule.behavior}" for rule in self._rules.values()
        )
