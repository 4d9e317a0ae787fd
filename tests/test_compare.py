import pytest

from followcheck.compare import compare_handles, display_sort
from followcheck.normalize import extract_handles


SET_PAIRS = [
    (set(), set()),
    ({"alice"}, set()),
    (set(), {"alice"}),
    ({"alice", "bob"}, {"alice", "bob", "carol"}),
    ({"a.b", "c_d", "e99"}, {"xyz", "e99"}),
    ({"same", "sets"}, {"same", "sets"}),
]


def test_example_comparison(following_text, followers_text):
    result = compare_handles(extract_handles(following_text), extract_handles(followers_text))

    assert result.non_followers == set()
    assert result.followers_only == {"carol"}
    assert result.mutuals == {"alice", "bob"}


@pytest.mark.parametrize("following,followers", SET_PAIRS)
def test_partitions_are_disjoint(following, followers):
    result = compare_handles(following, followers)

    assert not result.non_followers & result.followers_only
    assert not result.non_followers & result.mutuals
    assert not result.followers_only & result.mutuals


@pytest.mark.parametrize("following,followers", SET_PAIRS)
def test_partitions_cover_inputs(following, followers):
    result = compare_handles(following, followers)

    assert result.non_followers | result.mutuals == following
    assert result.followers_only | result.mutuals == followers


@pytest.mark.parametrize("following,followers", SET_PAIRS)
def test_comparison_symmetry(following, followers):
    forward = compare_handles(following, followers)
    backward = compare_handles(followers, following)

    assert forward.mutuals == backward.mutuals
    assert forward.non_followers == backward.followers_only


def test_inputs_are_not_mutated():
    following = {"alice", "bob"}
    followers = {"bob"}
    compare_handles(following, followers)

    assert following == {"alice", "bob"}
    assert followers == {"bob"}


def test_display_sort_order():
    handles = {"zed", "alice", "9lives", "_under", ".dot", "al.ice", "al_ice", "ali"}
    assert display_sort(handles) == [
        "_under", ".dot", "9lives", "al_ice", "al.ice", "ali", "alice", "zed",
    ]


def test_display_sort_empty():
    assert display_sort(set()) == []
