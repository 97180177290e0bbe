"""
Flagline CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import FlagDefinitionError, FlaglineError, FlagParseError
from .parser import FlagBehavior, FlagParser, ParseOutcome

logger = logging.getLogger("flagline")


__all__ = [
    "FlagBehavior",
    "FlagDefinitionError",
    "FlaglineError",
    "FlagParseError",
    "FlagParser",
    "ParseOutcome",
]
