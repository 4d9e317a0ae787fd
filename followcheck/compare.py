"""
Set comparison of following and followers handle sets
"""

from typing import Iterable, List, Set, Tuple

from .models import ComparisonResult


# Collation order for the handle alphabet, matching locale-aware comparison:
# punctuation first (underscore before dot), then digits, then letters
_COLLATION = "_.0123456789abcdefghijklmnopqrstuvwxyz"
_COLLATION_RANK = {ch: rank for rank, ch in enumerate(_COLLATION)}


def compare_handles(following: Set[str], followers: Set[str]) -> ComparisonResult:
    """
    Compare the two handle sets
    Returns non-followers, followers-only and mutuals; recomputed on every call
    """
    following = frozenset(following)
    followers = frozenset(followers)

    return ComparisonResult(
        non_followers=following - followers,
        followers_only=followers - following,
        mutuals=following & followers,
    )


def _collation_key(handle: str) -> Tuple[int, ...]:
    # Characters outside the handle alphabet sort after it, by code point
    return tuple(_COLLATION_RANK.get(ch, len(_COLLATION) + ord(ch)) for ch in handle)


def display_sort(handles: Iterable[str]) -> List[str]:
    """Sort handles for display"""
    return sorted(handles, key=_collation_key)
