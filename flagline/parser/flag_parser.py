# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, the Flagline parsing engine. It classifies
each token of an argument vector as a long flag, an extended short flag, a short
flag cluster, a value bound to a flag, or a free-standing operand, validates it
against the registered `FlagRule` set, and returns an immutable `ParseOutcome`.

The engine is a single left-to-right pass over the tokenizer's output with one
token of lookahead. Its only state is an explicit `ParseState` (the flag waiting
for a value, whether a comma list is still open, and the operands so far).

Supported Forms:
- Long flags: `--L`, `--LV` (value glued on), `--L=V`, `--L=V1,V2,V3`
- Extended short flags: `-E`, `-EV`, `-E=V`, `-E=V1,V2,V3`
- Short flags: `-S`, `-SV`, `-S=V`, clusters `-S1S2`, `-S1S2V`, `-S1S2=V`
- Space-separated values: `-S V`, `--L V`, and `--L = V` after tokenizing
- Negative numbers as values (`--offset -5`) and as operands

Public Interface:
- `register(spelling, behavior)`: Declare a flag (`-v`, `-value`, `--verbose`).
- `set_operand_limit(limit)`: Maximum number of operands (default 1).
- `parse(args)`: Parse an argument vector into a `ParseOutcome`.

Example Usage:
    parser = FlagParser()
    parser.register("-v", FlagBehavior.BLANK)
    parser.register("--depth", FlagBehavior.ARG_REQUIRED)
    parser.register("--range", FlagBehavior.SEP_OPTIONAL)

    outcome = parser.parse(["-v", "--depth82", "--range=", "12,24", "input.txt"])

    # outcome.is_handled("-v") is True
    # outcome.values("--depth") == ("82",)
    # outcome.values("--range") == ("12", "24")
    # outcome.operands == ("input.txt",)

Concurrency:
Rules hold mutable per-parse state, so one parser must not run concurrent parses
from several threads. Use one parser per thread or serialise access.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from flagline.console import console
from flagline.exceptions import (
    MissingArgumentError,
    MissingRequiredFlagsError,
    MissingSeparatorError,
    TooManyOperandsError,
    UnexpectedSeparatorError,
    UnrecognisedFlagError,
)
from flagline.logger import logger
from flagline.parser.classifier import (
    is_extended_short_option,
    is_long_option,
    is_negative_numeric,
    is_short_option,
    is_value,
    strip_leading_dashes,
)
from flagline.parser.flag_behavior import FlagBehavior, FlagCategory
from flagline.parser.flag_rule import FlagRule
from flagline.parser.parser_types import ParseOutcome, ParseState
from flagline.parser.registry import FlagRegistry
from flagline.parser.tokenizer import flatten_arguments, tokenize
from flagline.utils import enable_debug_logging


@dataclass(frozen=True)
class FlagMatch:
    """A token resolved to a registered flag, plus the text glued after its name."""

    category: FlagCategory
    rule: FlagRule
    attached: str = ""


class FlagParser:
    """
    Command-line flag parser for Flagline.

    Flags are registered once with a `FlagBehavior`; the parser can then be used
    for any number of parses. Every parse starts by resetting the state of all
    registered rules.

    Features:
    - Long, short and extended short flags derived from the declared spelling.
    - POSIX-style clustering of short flags (`-abc`, `-abVALUE`).
    - Glued values resolved by longest registered name (`--portal99`).
    - Value separators (`=`) enforced or rejected per behaviour.
    - Comma-separated value lists, including lists split by the shell.
    - Required flags reported together, operand count limits.
    - Optional rich debug output of registry, tokens and outcome, with the
      engine's DEBUG log records shown on the console.
    """

    def __init__(self, operand_limit: int = 1, debug: bool = False) -> None:
        self.console: Console = console
        self.registry: FlagRegistry = FlagRegistry()
        self.operand_limit: int = 1
        self.set_operand_limit(operand_limit)
        self.debug: bool = debug
        self.last_outcome: ParseOutcome | None = None
        if debug:
            enable_debug_logging()

    def register(
        self, spelling: str, behavior: FlagBehavior | str = FlagBehavior.BLANK
    ) -> FlagRule:
        """
        Declare a flag.

        Args:
            spelling (str): The flag including dashes: `-v`, `-value` or `--verbose`.
            behavior (FlagBehavior | str): How values bind to the flag.

        Returns:
            FlagRule: The registered rule.

        Raises:
            MalformedFlagNameError: If the spelling is not a valid flag.
            DuplicateFlagError: If the canonical name is already registered.
        """
        return self.registry.register(FlagRule.define(spelling, behavior))

    def register_many(
        self, definitions: Iterable[tuple[str, FlagBehavior | str]]
    ) -> list[FlagRule]:
        """Register several `(spelling, behavior)` pairs in order."""
        return [
            self.register(spelling, behavior) for spelling, behavior in definitions
        ]

    def set_operand_limit(self, limit: int) -> None:
        """
        Set the maximum number of free-standing operands.

        Raises:
            ValueError: If the limit is not a non-negative integer.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(
                f"Operand limit must be a non-negative integer, got {limit!r}"
            )
        self.operand_limit = limit

    def get_rule(self, name: str) -> FlagRule | None:
        """Return the registered rule for a flag name, with or without dashes."""
        return self.registry.lookup(name)

    def parse(self, args: Sequence[str] | None = None) -> ParseOutcome:
        """
        Parse an argument vector against the registered flags.

        Args:
            args (Sequence[str] | None): Raw process arguments, without the program
                name. None is treated as an empty vector.

        Returns:
            ParseOutcome: Handled flags, their values and the operands.

        Raises:
            FlagParseError: The first rule violation found. Nothing is returned
                for a failed parse.
        """
        self.registry.reset_all()
        self.last_outcome = None
        tokens = tokenize(args or [])
        logger.debug("Tokenized %d argument(s) into %s", len(args or []), tokens)

        state = ParseState()
        for index, token in enumerate(tokens):
            next_token = tokens[index + 1] if index + 1 < len(tokens) else None
            if state.active_rule is not None:
                self._continue_value(token, state)
            else:
                self._dispatch(token, state)
            self._check_integrity(next_token, state)

        self._validate(state)
        outcome = ParseOutcome.from_rules(self.registry, state.operands, tokens)
        self.last_outcome = outcome
        logger.debug(
            "Parse complete: handled=%s operands=%s",
            outcome.handled_flags(),
            list(outcome.operands),
        )
        if self.debug:
            self.render_debug(outcome)
        return outcome

    def _match_named(self, token: str, category: FlagCategory) -> FlagMatch | None:
        """Resolve a long or extended short token, with or without `=`."""
        head, separator, tail = token.partition("=")
        body = strip_leading_dashes(head)
        if separator:
            rule = self.registry.lookup(body)
            if rule is None or rule.category is not category:
                return None
            return FlagMatch(category, rule, separator + tail)

        rule = self.registry.longest_prefix_match(body, category)
        if rule is None:
            return None
        attached = body[len(rule.name) :]
        if attached and not rule.behavior.expects_argument:
            return None
        return FlagMatch(category, rule, attached)

    def _match_flag(self, token: str) -> FlagMatch | None:
        if is_negative_numeric(token):
            return None
        head = token.partition("=")[0]
        if is_long_option(head):
            named = self._match_named(token, FlagCategory.LONG)
            if named is not None:
                return named
        if is_extended_short_option(head):
            named = self._match_named(token, FlagCategory.EXTENDED_SHORT)
            if named is not None:
                return named
        if is_short_option(head):
            rule = self.registry.lookup(token[1])
            if rule is not None and rule.category is FlagCategory.SHORT:
                return FlagMatch(FlagCategory.SHORT, rule, token[2:])
        return None

    def _dispatch(self, token: str, state: ParseState) -> None:
        flag_match = self._match_flag(token)
        if flag_match is None:
            self._add_operand(token, state)
            return

        logger.debug(
            "Token '%s' matched %s flag '%s'",
            token,
            flag_match.category,
            flag_match.rule.spelling,
        )
        match flag_match.category:
            case FlagCategory.LONG | FlagCategory.EXTENDED_SHORT:
                self._open_flag(flag_match.rule, flag_match.attached, state)
            case FlagCategory.SHORT:
                self._handle_short_cluster(token, state)

    def _handle_short_cluster(self, token: str, state: ParseState) -> None:
        """Walk `-abc` style clusters until a flag that takes a value."""
        body = token[1:]
        previous: FlagRule | None = None
        for position, character in enumerate(body):
            rule = self.registry.lookup(character)
            if rule is None or rule.category is not FlagCategory.SHORT:
                if character == "=" and previous is not None:
                    raise UnexpectedSeparatorError(previous.spelling, token)
                raise UnrecognisedFlagError(f"-{character}")
            if rule.behavior.expects_argument:
                # the rest of the token belongs to this flag
                self._open_flag(rule, body[position + 1 :], state)
                return
            self._open_flag(rule, "", state)
            previous = rule

    def _open_flag(self, rule: FlagRule, attached: str, state: ParseState) -> None:
        """Start an occurrence of `rule`, binding any text glued onto it."""
        rule.begin_occurrence()
        if not rule.behavior.expects_argument:
            if attached:
                raise UnexpectedSeparatorError(rule.spelling, attached)
            rule.mark_handled()
            return

        state.open(rule)
        if attached:
            self._bind_value(attached, state)

    def _continue_value(self, token: str, state: ParseState) -> None:
        """Consume `token` as the value of the flag that is waiting for one."""
        rule = state.active_rule
        assert rule is not None, "no flag is waiting for a value"
        if not is_value(token):
            raise MissingArgumentError(rule.spelling, token)
        if (
            "=" in token
            and not token.startswith("=")
            and not rule.behavior.expects_separator
        ):
            raise UnexpectedSeparatorError(rule.spelling, token)
        self._bind_value(token, state)

    def _bind_value(self, text: str, state: ParseState) -> None:
        """Assign `text` to the open flag, enforcing its separator policy."""
        rule = state.active_rule
        assert rule is not None, "no flag is waiting for a value"
        if text.startswith("="):
            if not rule.behavior.expects_separator:
                raise UnexpectedSeparatorError(rule.spelling, text)
            rule.separator_seen = True
            text = text[1:]
            if not text:
                return

        if rule.behavior.expects_separator and not rule.separator_seen:
            raise MissingSeparatorError(rule.spelling, text)

        if "," in text:
            fragments = [fragment.strip() for fragment in text.split(",")]
            fragments = [fragment for fragment in fragments if fragment]
            if not fragments:
                return
            rule.has_value_list = True
            for fragment in fragments:
                rule.add_value(fragment)
            state.in_value_list = True
            logger.debug("Flag '%s' received value list %s", rule.spelling, fragments)
        else:
            rule.add_value(text)
            state.close()
            logger.debug("Flag '%s' received value '%s'", rule.spelling, text)

    def _check_integrity(self, next_token: str | None, state: ParseState) -> None:
        rule = state.active_rule
        if rule is None:
            return
        if state.in_value_list:
            if next_token is not None and is_value(next_token) and "," in next_token:
                return
            state.close()
            return
        if next_token is None:
            raise MissingArgumentError(rule.spelling)

    def _add_operand(self, token: str, state: ParseState) -> None:
        if token.startswith("-") and len(token) > 1 and not is_negative_numeric(token):
            raise UnrecognisedFlagError(token)
        state.operands.append(token)

    def _validate(self, state: ParseState) -> None:
        if len(state.operands) > self.operand_limit:
            raise TooManyOperandsError(state.operands, self.operand_limit)
        missing = self.registry.unsatisfied_required()
        if missing:
            raise MissingRequiredFlagsError(missing)

    def render_debug(self, outcome: ParseOutcome) -> None:
        """Print the registry, the token stream and the outcome to the console."""
        self.console.print(self.registry)
        if outcome.tokens:
            tokens = Text(flatten_arguments(outcome.tokens))
        else:
            tokens = Text("<empty>", style="dim")
        self.console.print(Panel(tokens, title="Tokens"))
        self.console.print(outcome)

    def __str__(self) -> str:
        required = len(self.registry.required_names)
        return (
            f"FlagParser(flags={len(self.registry)}, required={required}, "
            f"operand_limit={self.operand_limit})"
        )

    def __repr__(self) -> str:
        return str(self)
