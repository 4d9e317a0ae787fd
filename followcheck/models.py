"""
Data models for follower/following comparison
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List


CATEGORY_MUTUAL = "mutual"
CATEGORY_NON_FOLLOWER = "non_follower"
CATEGORY_FOLLOWER_ONLY = "follower_only"
CATEGORY_NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ComparisonResult:
    """
    Raw set comparison of two handle sets
    """
    non_followers: FrozenSet[str]  # you follow them, they don't follow you
    followers_only: FrozenSet[str]  # they follow you, you don't follow them
    mutuals: FrozenSet[str]


@dataclass
class ComparisonReport:
    """
    Display view of a comparison: sorted lists, org filter already applied
    to the three derived lists only
    """
    following: List[str] = field(default_factory=list)
    followers: List[str] = field(default_factory=list)
    non_followers: List[str] = field(default_factory=list)
    followers_only: List[str] = field(default_factory=list)
    mutuals: List[str] = field(default_factory=list)
    exclude_orgs: bool = False

    @property
    def following_count(self) -> int:
        return len(self.following)

    @property
    def followers_count(self) -> int:
        return len(self.followers)

    def is_empty(self) -> bool:
        """Check if neither input produced a handle"""
        return not self.following and not self.followers


@dataclass(frozen=True)
class LookupResult:
    handle: str
    in_following: bool
    in_followers: bool
    category: str
