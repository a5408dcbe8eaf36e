import pytest

from ledger.services.splits import (
    SplitError, build_split_details, equal_split, percentage_split, unequal_split,
)


def _amounts(details):
    return {d.user_id: d.amount for d in details}


def test_equal_split():
    assert _amounts(equal_split(300, ["a", "b", "c"])) == {"a": 100, "b": 100, "c": 100}


def test_equal_split_remainder_goes_to_first():
    details = equal_split(100, ["a", "b", "c"])
    assert _amounts(details) == {"a": 33.34, "b": 33.33, "c": 33.33}
    assert sum(d.amount for d in details) == pytest.approx(100)


def test_equal_split_needs_participants():
    with pytest.raises(SplitError):
        equal_split(100, [])
    with pytest.raises(SplitError, match="Duplicate"):
        equal_split(100, ["a", "a"])


def test_unequal_split():
    assert _amounts(unequal_split(100, {"a": 70, "b": 30})) == {"a": 70, "b": 30}


def test_unequal_split_must_add_up():
    with pytest.raises(SplitError, match="must equal expense amount"):
        unequal_split(100, {"a": 70, "b": 20})
    with pytest.raises(SplitError):
        unequal_split(100, {})
    with pytest.raises(SplitError):
        unequal_split(100, {"a": 110, "b": -10})


def test_percentage_split():
    assert _amounts(percentage_split(200, {"a": 50, "b": 25, "c": 25})) == {"a": 100, "b": 50, "c": 50}


def test_percentage_split_absorbs_rounding():
    details = percentage_split(10, {"a": 33.33, "b": 33.33, "c": 33.34})
    assert sum(d.amount for d in details) == pytest.approx(10)


def test_percentage_split_must_total_100():
    with pytest.raises(SplitError, match="must equal 100"):
        percentage_split(100, {"a": 50, "b": 40})


@pytest.mark.parametrize("split_type, kwargs", [
    ("equal", {"user_ids": ["a", "b"]}),
    ("unequal", {"shares": {"a": 25, "b": 25}}),
    ("percentage", {"percentages": {"a": 50, "b": 50}}),
])
def test_build_split_details(split_type, kwargs):
    assert _amounts(build_split_details(split_type, 50, **kwargs)) == {"a": 25, "b": 25}


def test_build_split_details_rejects_bad_input():
    with pytest.raises(SplitError, match="Invalid split type"):
        build_split_details("custom", 50, user_ids=["a"])
    with pytest.raises(SplitError, match="positive"):
        build_split_details("equal", 0, user_ids=["a"])
