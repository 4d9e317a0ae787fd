"""
Comparison pipeline orchestrator
Coordinates extraction, comparison and the display filter for one input pair
"""

import logging
from typing import Any, Dict

from .compare import compare_handles, display_sort
from .models import ComparisonReport
from .normalize import HandleNormalizer
from .org_filter import filter_orgs, load_org_hints


logger = logging.getLogger(__name__)


class ComparisonPipeline:
    def __init__(self, options: Dict[str, Any] = None):
        self.options = options or {}
        self.exclude_orgs = bool(self.options.get('exclude_orgs', False))

        hints = self.options.get('org_hints')
        self.org_hints = list(hints) if hints is not None else load_org_hints()

        self.normalizer = HandleNormalizer()

    def run(self, following_text: str, followers_text: str) -> ComparisonReport:
        """
        Main processing pipeline
        Returns a ComparisonReport with sorted lists ready for display and export
        """
        # Step 1: Extract handles from both text blocks
        following = self.normalizer.extract_handles(following_text)
        followers = self.normalizer.extract_handles(followers_text)

        # Step 2: Set comparison on the full, unfiltered sets
        result = compare_handles(following, followers)

        # Step 3: Sort, then apply the org filter to the derived lists only
        report = ComparisonReport(
            following=display_sort(following),
            followers=display_sort(followers),
            non_followers=self._display_list(result.non_followers),
            followers_only=self._display_list(result.followers_only),
            mutuals=self._display_list(result.mutuals),
            exclude_orgs=self.exclude_orgs,
        )

        logger.debug(
            "Compared %d following / %d followers: %d non-followers, %d followers-only, %d mutuals",
            report.following_count, report.followers_count,
            len(report.non_followers), len(report.followers_only), len(report.mutuals),
        )

        return report

    def _display_list(self, handles) -> list:
        return filter_orgs(display_sort(handles), self.org_hints, enabled=self.exclude_orgs)
