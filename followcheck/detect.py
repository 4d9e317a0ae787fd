"""
Handle column detection utilities
Finds the username column in tabular list exports using header name matching
"""

import re
from typing import List, Optional, Sequence

import pandas as pd


class HandleColumnDetector:
    def __init__(self):
        # Handle column header patterns (case-insensitive)
        self.handle_patterns = [
            r'^username$',
            r'^user[_\s]name$',
            r'^handle$',
            r'^instagram([_\s](handle|username|user))?$',
            r'^ig[_\s](handle|username|user)$',
            r'^account([_\s]name)?$',
            r'^user$',
        ]

    def match_header(self, header: Sequence[str]) -> Optional[int]:
        """
        Find the handle column in a header row
        Returns column position if found, None otherwise
        Prefers exact 'username' match if multiple candidates exist
        """
        candidates = self.get_all_handle_columns(header)

        if not candidates:
            return None

        for pos in candidates:
            if str(header[pos]).strip().lower() == 'username':
                return pos

        return candidates[0]

    def get_all_handle_columns(self, header: Sequence[str]) -> List[int]:
        handle_cols = []

        for pos, col in enumerate(header):
            col_clean = str(col).strip().lower()

            for pattern in self.handle_patterns:
                if re.match(pattern, col_clean):
                    handle_cols.append(pos)
                    break

        return handle_cols

    def detect_handle_column(self, df: pd.DataFrame) -> Optional[int]:
        """
        Detect the handle column in a headerless DataFrame
        Falls back to the first column holding any text
        """
        if df.empty:
            return None

        header = [str(v) for v in df.iloc[0]]
        pos = self.match_header(header)
        if pos is not None:
            return pos

        return self._detect_by_content(df)

    def has_header(self, df: pd.DataFrame) -> bool:
        if df.empty:
            return False
        return self.match_header([str(v) for v in df.iloc[0]]) is not None

    def _detect_by_content(self, df: pd.DataFrame) -> Optional[int]:
        for pos in range(len(df.columns)):
            column = df.iloc[:, pos].astype(str).str.strip()
            if column.ne('').any():
                return pos
        return None
