"""
Handle normalization utilities
Turns raw pasted follower/following text into a set of clean handles
"""

import re
from typing import Optional, Set


MIN_HANDLE_LENGTH = 3
MAX_HANDLE_LENGTH = 30


class HandleNormalizer:
    def __init__(self, min_length: int = MIN_HANDLE_LENGTH, max_length: int = MAX_HANDLE_LENGTH):
        self.min_length = min_length
        self.max_length = max_length

        # Compile regex patterns for efficiency
        self.line_break_pattern = re.compile(r'\r?\n')
        self.disallowed_pattern = re.compile(r'[^a-z0-9._]')
        self.separator_pattern = re.compile(r'[^a-zA-Z0-9._]+')

    def clean_handle_token(self, token: str) -> Optional[str]:
        """
        Lowercase, keep only [a-z0-9._] and length-check
        Returns the handle, or None when the cleaned token is out of bounds
        """
        cleaned = self.disallowed_pattern.sub('', (token or '').lower())
        if self.min_length <= len(cleaned) <= self.max_length:
            return cleaned
        return None

    def extract_handles(self, raw_text: str) -> Set[str]:
        """
        Extract the set of handles from a raw text block

        Every non-empty line yields at most one handle. The whole line is
        tried first; only when that fails is the first token before any
        separator (spaces, pipes, bullets, emoji) tried.
        """
        handles = set()
        if not raw_text:
            return handles

        for line in self.line_break_pattern.split(raw_text):
            line = line.strip()
            if not line:
                continue

            handle = self._extract_from_line(line)
            if handle:
                handles.add(handle)

        return handles

    def _extract_from_line(self, line: str) -> Optional[str]:
        """Apply the whole-line then first-token strategy to one line"""
        # Step 1: the whole line may already be a handle
        whole = self.clean_handle_token(line)
        if whole:
            return whole

        # Step 2: first token before any separator run
        first_token = self.separator_pattern.split(line)[0]
        return self.clean_handle_token(first_token)


_default_normalizer = HandleNormalizer()


def clean_handle_token(token: str) -> Optional[str]:
    return _default_normalizer.clean_handle_token(token)


def extract_handles(raw_text: str) -> Set[str]:
    return _default_normalizer.extract_handles(raw_text)
