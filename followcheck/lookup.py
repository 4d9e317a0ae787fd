"""
Handle lookup: explain a handle's category, find handles by substring
"""

from typing import Dict, List, Set

from .compare import display_sort
from .models import (
    CATEGORY_FOLLOWER_ONLY,
    CATEGORY_MUTUAL,
    CATEGORY_NON_FOLLOWER,
    CATEGORY_NOT_FOUND,
    LookupResult,
)
from .normalize import clean_handle_token


CATEGORY_LABELS = {
    CATEGORY_MUTUAL: "Mutuals",
    CATEGORY_NON_FOLLOWER: "They don't follow you back",
    CATEGORY_FOLLOWER_ONLY: "You don't follow them back",
    CATEGORY_NOT_FOUND: "Not in Following or Followers",
}


def explain_handle(query: str, following: Set[str], followers: Set[str]) -> LookupResult:
    """
    Report which list(s) hold a handle and the resulting category
    The query is cleaned like any pasted handle; an invalid one is not found
    """
    handle = clean_handle_token((query or "").strip().lstrip("@")) or ""

    in_following = bool(handle) and handle in following
    in_followers = bool(handle) and handle in followers

    if in_following and in_followers:
        category = CATEGORY_MUTUAL
    elif in_following:
        category = CATEGORY_NON_FOLLOWER
    elif in_followers:
        category = CATEGORY_FOLLOWER_ONLY
    else:
        category = CATEGORY_NOT_FOUND

    return LookupResult(
        handle=handle,
        in_following=in_following,
        in_followers=in_followers,
        category=category,
    )


def find_handles(pattern: str, following: Set[str], followers: Set[str],
                 limit: int = 10) -> Dict[str, List[str]]:
    """Case-insensitive substring search over both lists, capped per list"""
    pat = (pattern or "").strip().lower()
    if not pat:
        return {"following": [], "followers": []}

    return {
        "following": display_sort(h for h in following if pat in h)[:limit],
        "followers": display_sort(h for h in followers if pat in h)[:limit],
    }
