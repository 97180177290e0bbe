import pytest

from flagline.exceptions import (
    ErrorKind,
    MissingRequiredFlagsError,
    TooManyOperandsError,
)
from flagline.parser import FlagBehavior, FlagParser


def test_blank_flag_is_handled():
    parser = FlagParser()
    parser.register("-v", FlagBehavior.BLANK)

    outcome = parser.parse(["-v"])

    assert outcome.is_handled("-v")
    assert outcome.values("-v") == ()
    assert outcome.operands == ()


def test_value_glued_onto_long_flag():
    parser = FlagParser()
    parser.register("--depth", FlagBehavior.ARG_REQUIRED)

    outcome = parser.parse(["--depth82"])

    assert outcome.values("--depth") == ("82",)
    assert not outcome.used_separator("--depth")


def test_separator_value_list_on_short_flag():
    parser = FlagParser()
    parser.register("-b", FlagBehavior.SEP_OPTIONAL)

    outcome = parser.parse(["-b=7,14,21"])

    assert outcome.values("-b") == ("7", "14", "21")
    assert outcome.has_value_list("-b")
    assert outcome.used_separator("-b")


def test_missing_required_flag_is_reported():
    parser = FlagParser()
    parser.register("-x", FlagBehavior.ARG_REQUIRED)

    with pytest.raises(MissingRequiredFlagsError) as excinfo:
        parser.parse([])

    assert excinfo.value.kind is ErrorKind.MISSING_REQUIRED_FLAGS
    assert excinfo.value.flags == ("-x",)
    assert str(excinfo.value) == "Missing required flag: [-x]"


def test_too_many_operands_with_default_limit():
    parser = FlagParser()

    with pytest.raises(TooManyOperandsError) as excinfo:
        parser.parse(["file1.txt", "file2.txt"])

    assert excinfo.value.limit == 1
    assert excinfo.value.excess == ("file2.txt",)
    assert excinfo.value.token == "file2.txt"


def test_cluster_ending_in_value_bearing_flag():
    parser = FlagParser()
    parser.register("-a", FlagBehavior.BLANK)
    parser.register("-b", FlagBehavior.ARG_REQUIRED)

    outcome = parser.parse(["-abVALUE"])

    assert outcome.is_handled("-a")
    assert outcome.values("-b") == ("VALUE",)


@pytest.mark.parametrize(
    "order", [("--port", "--portal"), ("--portal", "--port")]
)
def test_longest_prefix_wins_regardless_of_order(order):
    parser = FlagParser()
    for spelling in order:
        parser.register(spelling, FlagBehavior.ARG_REQUIRED)
    parser.register("--other", FlagBehavior.ARG_OPTIONAL)

    with pytest.raises(MissingRequiredFlagsError) as excinfo:
        parser.parse(["--portal99"])

    # --portal took the value before the required-flag check ran
    assert parser.get_rule("--portal").values == ["99"]
    assert not parser.get_rule("--port").handled
    assert excinfo.value.flags == ("--port",)


def test_longest_prefix_with_both_required_flags_supplied():
    parser = FlagParser()
    parser.register("--port", FlagBehavior.ARG_REQUIRED)
    parser.register("--portal", FlagBehavior.ARG_REQUIRED)

    outcome = parser.parse(["--portal99", "--port", "8080"])

    assert outcome.values("--portal") == ("99",)
    assert outcome.values("--port") == ("8080",)


def test_longest_prefix_assigns_value_to_longer_name():
    parser = FlagParser()
    parser.register("--port", FlagBehavior.ARG_OPTIONAL)
    parser.register("--portal", FlagBehavior.ARG_OPTIONAL)

    outcome = parser.parse(["--portal99"])

    assert outcome.values("--portal") == ("99",)
    assert not outcome.is_handled("--port")


def test_reset_between_parses():
    parser = FlagParser()
    parser.register("-v")
    parser.register("--depth", FlagBehavior.ARG_OPTIONAL)
    parser.parse(["-v", "--depth", "3"])

    parser.parse([])

    for rule in parser.registry:
        assert not rule.handled
        assert rule.values == []


def test_space_separated_values():
    parser = FlagParser()
    parser.register("-h")
    parser.register("-x", FlagBehavior.ARG_REQUIRED)
    parser.register("-n", FlagBehavior.ARG_OPTIONAL)

    outcome = parser.parse(["-h", "-x", "nina", "-n", "/var/trigger.xlsx"])

    assert outcome.handled_flags() == ["-h", "-x", "-n"]
    assert outcome.value("-x") == "nina"
    assert outcome.value("-n") == "/var/trigger.xlsx"


def test_mixed_vector():
    parser = FlagParser(operand_limit=2)
    parser.register("-a")
    parser.register("-c", FlagBehavior.ARG_REQUIRED)
    parser.register("--verbose")
    parser.register("--range", FlagBehavior.SEP_OPTIONAL)

    outcome = parser.parse(
        ["-acp31", "input.txt", "--verbose", "--range=", "12,", "24", "out.txt"]
    )

    assert outcome.is_handled("-a")
    assert outcome.values("-c") == ("p31",)
    assert outcome.is_handled("--verbose")
    assert outcome.values("--range") == ("12", "24")
    assert outcome.operands == ("input.txt", "out.txt")


def test_parse_none_is_empty_vector():
    parser = FlagParser()
    parser.register("-v")

    outcome = parser.parse()

    assert outcome.handled_flags() == []
    assert outcome.operand_count == 0
    assert parser.last_outcome is outcome


def test_register_returns_rule_and_register_many():
    parser = FlagParser()
    rule = parser.register("--depth", "required")
    rules = parser.register_many([("-v", "switch"), ("-value", "sep_optional")])

    assert rule.behavior is FlagBehavior.ARG_REQUIRED
    assert [r.spelling for r in rules] == ["-v", "-value"]
    assert parser.get_rule("value") is rules[1]
    assert str(parser) == "FlagParser(flags=3, required=1, operand_limit=1)"
