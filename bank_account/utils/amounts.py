"""Raw input parsing for staged amounts"""

import re
from typing import Optional

_WHOLE_NUMBER = re.compile(r"[0-9]+")


def parse_amount(raw: str) -> Optional[int]:
    """
    Convert user-typed text into a non-negative integer amount.

    Surrounding whitespace is ignored and empty input counts as 0.
    Returns None for anything that is not an unsigned whole number
    ("-5", "12a", "1.5", "1e3"), which callers discard instead of dispatching.
    """
    text = raw.strip()
    if not text:
        return 0
    if not _WHOLE_NUMBER.fullmatch(text):
        return None
    return int(text)
