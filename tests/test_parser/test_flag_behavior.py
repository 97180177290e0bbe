import pytest

from flagline.parser.flag_behavior import FlagBehavior, FlagCategory


@pytest.mark.parametrize(
    "value, expected",
    [
        ("blank", FlagBehavior.BLANK),
        ("arg-required", FlagBehavior.ARG_REQUIRED),
        (" SEP_OPTIONAL ", FlagBehavior.SEP_OPTIONAL),
        ("Sep-Required", FlagBehavior.SEP_REQUIRED),
        ("switch", FlagBehavior.BLANK),
        ("flag", FlagBehavior.BLANK),
        ("required", FlagBehavior.ARG_REQUIRED),
        ("optional", FlagBehavior.ARG_OPTIONAL),
    ],
)
def test_flag_behavior_coercion(value, expected):
    assert FlagBehavior(value) is expected


def test_flag_behavior_invalid_value():
    with pytest.raises(ValueError, match="Must be one of"):
        FlagBehavior("bogus")

    with pytest.raises(ValueError):
        FlagBehavior(3)


def test_flag_behavior_properties():
    assert not FlagBehavior.BLANK.expects_argument
    assert all(
        behavior.expects_argument
        for behavior in FlagBehavior.choices()
        if behavior is not FlagBehavior.BLANK
    )
    assert {b for b in FlagBehavior if b.is_required} == {
        FlagBehavior.ARG_REQUIRED,
        FlagBehavior.SEP_REQUIRED,
    }
    assert {b for b in FlagBehavior if b.expects_separator} == {
        FlagBehavior.SEP_REQUIRED,
        FlagBehavior.SEP_OPTIONAL,
    }


def test_flag_behavior_str():
    assert str(FlagBehavior.ARG_OPTIONAL) == "arg_optional"


@pytest.mark.parametrize(
    "spelling, expected",
    [
        ("-v", FlagCategory.SHORT),
        ("-value", FlagCategory.EXTENDED_SHORT),
        ("--verbose", FlagCategory.LONG),
        ("--v", FlagCategory.LONG),
    ],
)
def test_flag_category_from_spelling(spelling, expected):
    assert FlagCategory.from_spelling(spelling) is expected
