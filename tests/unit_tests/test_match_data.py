"""
Unit tests for MatchData and CaptureGroup.
"""
import re

import pytest
from strscan.match_data import CaptureGroup, MatchData


def test_from_match_offsets_spans():
    """Spans are shifted by the slice offset."""
    match = re.compile(r"(\w+)-(\d+)").match("ab-12 rest")
    data = MatchData.from_match(match, offset=10)
    assert data.span == (10, 15)
    assert data.group(1) == CaptureGroup(10, 12, "ab")
    assert data.group(2) == CaptureGroup(13, 15, "12")
    assert len(data) == 3


def test_non_participating_group_is_none():
    match = re.compile(r"(x)?(y)").match("y")
    data = MatchData.from_match(match)
    assert data.group(1) is None
    assert data.group(2).value == "y"
    assert data.values() == ("y", None, "y")


def test_empty_group_is_not_none():
    """A group matching nothing is an empty capture, not an absent one."""
    match = re.compile(r"(x*)y").match("y")
    data = MatchData.from_match(match)
    assert data.group(1) == CaptureGroup(0, 0, "")
    assert len(data.group(1)) == 0


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_group_out_of_range(index):
    data = MatchData.from_match(re.compile(r"(a)").match("a"))
    assert data.group(index) is None


def test_named_groups():
    match = re.compile(r"(?P<word>\w+)(?P<bang>!)?").match("hi")
    data = MatchData.from_match(match, offset=3)
    assert data.named("word") == CaptureGroup(3, 5, "hi")
    assert data.named("bang") is None
    assert data.named("nope") is None
    assert data.matched == "hi"


def test_match_data_is_immutable():
    data = MatchData.from_match(re.compile(r"a").match("a"))
    with pytest.raises(AttributeError):
        data.groups = ()


def test_match_data_is_hashable():
    """Equal match data hash equally and can be used as dict keys."""
    pattern = re.compile(r"(?P<word>\w+)")
    first = MatchData.from_match(pattern.match("hi"))
    second = MatchData.from_match(pattern.match("hi"))
    assert first == second
    assert hash(first) == hash(second)
    assert {first: "seen"}[second] == "seen"


def test_group_names_are_read_only():
    data = MatchData.from_match(re.compile(r"(?P<word>\w+)").match("hi"))
    with pytest.raises(TypeError):
        data.group_names["word"] = 5
    assert data.named("word").value == "hi"


def test_named_with_out_of_range_index():
    """A name mapped past the last group reads as absent."""
    data = MatchData(groups=(CaptureGroup(0, 1, "a"),), group_names={"ghost": 3})
    assert data.named("ghost") is None
