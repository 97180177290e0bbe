# Flagline CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Pure, registry-independent predicates that classify a single token by syntax.

The parsing engine combines these with registry lookups to decide how each token
is dispatched. None of them consult registered rules, so a token that *looks*
like a flag may still turn out to be unrecognised.

Functions:
- is_long_option: `--L`, `--LV`, `--L=V`
- is_extended_short_option: `-E`, `-EV`, `-E=V`
- is_short_option: `-S`, `-SV`, `-S=V`, `-S1S2`, `-S1S2=V`
- is_negative_number: `-42`, `-3.14`, `-1e5`
- is_negative_number_list / is_negative_numeric: `-1,-2`, `-0.5,-3`
- is_option / is_value: the combined views used while a value is expected
- starts_new_flag: the tokenizer's guard against swallowing the next flag
- strip_leading_dashes: canonical name of a flag spelling
"""
import re

_LONG_OPTION = re.compile(r"--[A-Za-z]")
_SINGLE_DASH_OPTION = re.compile(r"-[^-]")
_NEGATIVE_NUMBER = re.compile(r"-(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_NEW_FLAG = re.compile(r"--?[A-Za-z]")


def is_long_option(token: str) -> bool:
    """Two leading dashes followed by a letter."""
    return bool(_LONG_OPTION.match(token)) and len(token) > 2


def is_extended_short_option(token: str) -> bool:
    """One leading dash followed by a non-dash character, longer than two characters."""
    return bool(_SINGLE_DASH_OPTION.match(token)) and len(token) > 2


def is_short_option(token: str) -> bool:
    """One leading dash followed by a non-dash character."""
    return bool(_SINGLE_DASH_OPTION.match(token)) and len(token) > 1


def is_negative_number(token: str) -> bool:
    """True if the whole token is a signed decimal number such as `-7` or `-0.5`."""
    return bool(_NEGATIVE_NUMBER.fullmatch(token))


def is_negative_number_list(token: str) -> bool:
    """True for a comma list whose non-empty fragments are all negative numbers."""
    if "," not in token:
        return False
    fragments = [fragment.strip() for fragment in token.split(",")]
    fragments = [fragment for fragment in fragments if fragment]
    return bool(fragments) and all(is_negative_number(f) for f in fragments)


def is_negative_numeric(token: str) -> bool:
    """True for a negative number or a comma list made only of them."""
    return is_negative_number(token) or is_negative_number_list(token)


def is_option(token: str) -> bool:
    """True if the token has the syntax of any flag category."""
    return (
        is_long_option(token)
        or is_extended_short_option(token)
        or is_short_option(token)
    )


def is_value(token: str) -> bool:
    """
    True if the token may be bound to a flag that is waiting for a value.

    Negative numbers take priority over option syntax, so `-5` and `-1,-2`
    are values.
    """
    return not is_option(token) or is_negative_numeric(token)


def starts_new_flag(token: str) -> bool:
    """True if the token begins with one or two dashes and a letter."""
    return bool(_NEW_FLAG.match(token))


def strip_leading_dashes(token: str) -> str:
    """Remove one or two leading dashes from a flag spelling."""
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token
