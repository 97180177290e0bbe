"""
Flagline CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag_behavior import FlagBehavior, FlagCategory
from .flag_parser import FlagParser
from .flag_rule import FlagRule, FlagSpec
from .parser_types import FlagResult, ParseOutcome, ParseState
from .registry import FlagRegistry
from .tokenizer import flatten_arguments, tokenize

__all__ = [
    "FlagBehavior",
    "FlagCategory",
    "FlagParser",
    "FlagRegistry",
    "FlagResult",
    "FlagRule",
    "FlagSpec",
    "ParseOutcome",
    "ParseState",
    "flatten_arguments",
    "tokenize",
]
