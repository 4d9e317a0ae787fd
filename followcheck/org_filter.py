"""
Brand / organization heuristic for the display filter
Best-effort substring matching; false positives are expected
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)

ORG_HINTS_ENV = "FOLLOWCHECK_ORG_HINTS"
DEFAULT_ORG_HINTS_PATH = Path(__file__).resolve().parent.parent / "config" / "org_hints.txt"

# Embedded fallback when no hint file is present
EMBED_ORG_HINTS = [
    "official", "inc", "club", "school", "university", "college", "gov",
    "news", "store", "shop", "brand", "team", "miami", "umiami",
    "herbert", "alumni", "football", "soccer", "hockey", "baseball",
    "barstool", "daily", "studio", "photography", "kitchen", "scuba",
    "kite", "freediving", "buildon", "bestparties", "cornerdeli", "ifc",
]


def _load_list(path: Path) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [ln.strip().lower() for ln in f if ln.strip() and not ln.startswith("#")]
    except FileNotFoundError:
        return []


def load_org_hints(path: Optional[str] = None) -> List[str]:
    """
    Load the org hint list
    Lookup order: explicit path, FOLLOWCHECK_ORG_HINTS, config/org_hints.txt,
    then the embedded list
    """
    candidate = path or os.getenv(ORG_HINTS_ENV) or DEFAULT_ORG_HINTS_PATH
    hints = _load_list(Path(candidate))

    if not hints:
        logger.debug("No org hints found at %s, using embedded list", candidate)
        return list(EMBED_ORG_HINTS)

    return hints


def looks_like_org(handle: str, hints: Iterable[str]) -> bool:
    return any(hint in handle for hint in hints)


def filter_orgs(handles: Iterable[str], hints: Iterable[str], enabled: bool = True) -> List[str]:
    """
    Drop handles that look like brands or organizations
    Order of the input is preserved; disabled filter returns everything
    """
    if not enabled:
        return list(handles)

    hints = list(hints)
    return [h for h in handles if not looks_like_org(h, hints)]
