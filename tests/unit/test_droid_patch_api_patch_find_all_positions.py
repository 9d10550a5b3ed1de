"""Unit tests for droid_patch.api.patch.find_all_positions."""

import pytest

from droid_patch.api.patch.find_all_positions import find_all_positions

pytestmark = pytest.mark.patch


def test_finds_every_occurrence_in_order():
    assert find_all_positions(b"xxisCustom:!0yyisCustom:!0zz", b"isCustom:!0") == [2, 15]


def test_no_match_returns_empty_list():
    assert find_all_positions(b"nothing here", b"isCustom:!0") == []


def test_matches_do_not_overlap():
    assert find_all_positions(b"aaaa", b"aa") == [0, 2]


def test_match_at_buffer_edges():
    assert find_all_positions(b"abXab", b"ab") == [0, 3]


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        find_all_positions(b"abc", b"")
