from __future__ import annotations

import re
from typing import Sequence

# ASCII digits only; "\d" would also accept other Unicode decimal digits.
PLACEHOLDER_RE = re.compile(r"%([0-9]+)")

# Ordinals are read as an unsigned byte; larger runs count as unparseable.
MAX_ORDINAL = 255


def _ordinal(digits: str) -> int | None:
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_ORDINAL)):
        return None
    n = int(significant)
    if n > MAX_ORDINAL:
        return None
    return n


def interpolate(text: str, values: Sequence[str]) -> str:
    """
    Replace %1, %2, ... in text with values[0], values[1], ...

    %0, an ordinal past the end of values, or a digit run that does not fit
    in 0..255 become the empty string. There is no escape for a literal
    "%<digits>".
    """

    def _sub(match: re.Match[str]) -> str:
        n = _ordinal(match.group(1))
        if n is None or n < 1 or n > len(values):
            return ""
        return str(values[n - 1])

    return PLACEHOLDER_RE.sub(_sub, text)
