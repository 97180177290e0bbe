import pytest

from flagline.exceptions import UnexpectedSeparatorError, UnrecognisedFlagError
from flagline.parser import FlagBehavior, FlagParser


@pytest.fixture
def parser():
    parser = FlagParser()
    parser.register("-a")
    parser.register("-b")
    parser.register("-c")
    return parser


def test_cluster_of_blank_flags(parser):
    outcome = parser.parse(["-abc"])
    assert outcome.handled_flags() == ["-a", "-b", "-c"]


def test_cluster_last_flag_takes_next_token():
    parser = FlagParser()
    parser.register("-a")
    parser.register("-b")
    parser.register("-c", FlagBehavior.ARG_REQUIRED)

    outcome = parser.parse(["-abc", "value"])

    assert outcome.is_handled("-a")
    assert outcome.is_handled("-b")
    assert outcome.values("-c") == ("value",)
    assert outcome.operands == ()


def test_unknown_character_in_cluster(parser):
    with pytest.raises(UnrecognisedFlagError) as excinfo:
        parser.parse(["-abz"])
    assert excinfo.value.token == "-z"


def test_unknown_leading_character(parser):
    with pytest.raises(UnrecognisedFlagError) as excinfo:
        parser.parse(["-za"])
    assert excinfo.value.token == "-za"


def test_separator_after_blank_flag(parser):
    with pytest.raises(UnexpectedSeparatorError) as excinfo:
        parser.parse(["-a=5"])
    assert excinfo.value.flag == "-a"


def test_separator_rejected_for_arg_flag():
    parser = FlagParser()
    parser.register("-b", FlagBehavior.ARG_REQUIRED)

    with pytest.raises(UnexpectedSeparatorError):
        parser.parse(["-b=5"])


def test_separator_accepted_for_sep_flag():
    parser = FlagParser()
    parser.register("-a")
    parser.register("-b", FlagBehavior.SEP_REQUIRED)

    outcome = parser.parse(["-ab=5"])

    assert outcome.is_handled("-a")
    assert outcome.values("-b") == ("5",)
    assert outcome.used_separator("-b")


def test_nothing_after_value_flag_is_a_flag():
    parser = FlagParser()
    parser.register("-b", FlagBehavior.ARG_REQUIRED)
    parser.register("-c")

    outcome = parser.parse(["-bc"])

    assert outcome.values("-b") == ("c",)
    assert not outcome.is_handled("-c")


def test_attached_value_on_optional_flag():
    parser = FlagParser()
    parser.register("-k", FlagBehavior.ARG_OPTIONAL)

    outcome = parser.parse(["-k707"])

    assert outcome.values("-k") == ("707",)


def test_extended_short_flag_wins_over_cluster(parser):
    parser.register("-ab")

    outcome = parser.parse(["-ab"])

    assert outcome.handled_flags() == ["-ab"]


def test_repeated_short_flag_accumulates_values():
    parser = FlagParser()
    parser.register("-I", FlagBehavior.ARG_OPTIONAL)

    outcome = parser.parse(["-Iinclude", "-I", "vendor"])

    assert outcome.values("-I") == ("include", "vendor")
    assert outcome.value_count("-I") == 2
