# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Normalises a raw argument vector into self-contained logical tokens.

Shells split arguments on whitespace, so a user typing `--range= 12,24,36` or
`-b = 747` produces fragments that only make sense together. The tokenizer glues
adjacent fragments back together around two delimiter classes:

- `=` (value separator): glued when the later fragment starts with `=`, or
  when the earlier one ends with `=` and the later one is not a new flag.
- `,` (value-list separator): glued when the earlier fragment ends with `,` or
  the later one starts with `,`, unless the later fragment starts a new flag
  (a dash followed by a letter). Negative numbers such as `-5` are glued.

Each finished token is then normalised: comma runs collapse to one comma, a
comma right after `=` is removed and leading/trailing commas are stripped.
Empty fragments and tokens that normalise to nothing are dropped.

Example:
    tokenize(["--range=", ",,,108", "-b", "=", "747"])
    → ["--range=108", "-b=747"]

The functions here are pure and never consult the flag registry.
"""
from __future__ import annotations

import re
from typing import Iterable, Sequence

from flagline.parser.classifier import starts_new_flag

_COMMA_RUN = re.compile(r",{2,}")


def _glues_on_separator(previous: str, current: str) -> bool:
    if current.startswith("="):
        return True
    # a dangling '=' never swallows the next flag
    return previous.endswith("=") and not starts_new_flag(current)


def _glues_on_list(previous: str, current: str) -> bool:
    if starts_new_flag(current):
        return False
    return previous.endswith(",") or current.startswith(",")


def normalise_token(token: str) -> str:
    """
    Clean up comma noise inside a single logical token.

    Args:
        token (str): A token produced by gluing raw fragments.

    Returns:
        str: The token with comma runs collapsed, `=,` reduced to `=` and
        leading/trailing commas removed. May be empty.
    """
    token = _COMMA_RUN.sub(",", token)
    token = token.replace("=,", "=")
    return token.strip(",")


def tokenize(args: Iterable[str]) -> list[str]:
    """
    Convert raw process arguments into logical tokens.

    Args:
        args (Iterable[str]): The argument vector as supplied by the shell.

    Returns:
        list[str]: Logical tokens in their original order.
    """
    fragments = [fragment for fragment in args if fragment]
    if not fragments:
        return []

    pending: list[str] = [fragments[0]]
    joined: list[str] = []
    for previous, current in zip(fragments, fragments[1:]):
        if _glues_on_separator(previous, current) or _glues_on_list(previous, current):
            pending.append(current)
        else:
            joined.append("".join(pending))
            pending = [current]
    joined.append("".join(pending))

    tokens = []
    for token in joined:
        normalised = normalise_token(token)
        if normalised:
            tokens.append(normalised)
    return tokens


def flatten_arguments(tokens: Sequence[str]) -> str:
    """Join tokens with single spaces, e.g. for debug output."""
    return " ".join(tokens)
