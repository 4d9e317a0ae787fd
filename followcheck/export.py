"""
CSV export of comparison results
Three side-by-side columns padded to the longest, every field quoted
"""

import csv
from typing import Dict, List, Sequence

import pandas as pd


EXPORT_FILENAME = "ig_compare_results.csv"

EXPORT_COLUMNS = [
    "you_follow_but_they_dont_follow_you",
    "they_follow_you_but_you_dont_follow",
    "mutuals",
]


def _pad(values: Sequence[str], length: int) -> List[str]:
    return list(values) + [""] * (length - len(values))


def build_export_frame(non_followers: Sequence[str],
                       followers_only: Sequence[str],
                       mutuals: Sequence[str]) -> pd.DataFrame:
    """
    Build the export table
    Columns keep their given order and are padded with empty strings
    """
    columns = [non_followers, followers_only, mutuals]
    max_len = max(len(c) for c in columns)

    data: Dict[str, List[str]] = {
        name: _pad(values, max_len) for name, values in zip(EXPORT_COLUMNS, columns)
    }
    return pd.DataFrame(data, columns=EXPORT_COLUMNS, dtype=str)


def to_csv(non_followers: Sequence[str],
           followers_only: Sequence[str],
           mutuals: Sequence[str]) -> str:
    """Save comparison columns to CSV format and return string"""
    df = build_export_frame(non_followers, followers_only, mutuals)
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
