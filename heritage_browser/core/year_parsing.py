"""
Construction-year parsing.

``year_built`` is free text in the source data. Filtering and sorting need a
signed integer (negative = BCE), so the descriptor is resolved with a fixed
table. A leading approximation marker (``circa``, ``ca.``, ``c.``, ``~``) is
dropped first, then the first rule that matches wins:

==  ==========================================  =====================  ==========
#   pattern                                     example                result
==  ==========================================  =====================  ==========
1   ``<N>(st|nd|rd|th) century [BCE|BC|CE|AD]``  ``7th century``        650
                                                ``1st century BCE``    -50
2   ``<N> AH`` (Hijri)                          ``750 AH``             1350
3   ``<A>-<B> [BCE|BC|CE|AD]``                  ``800-900 BCE``        -850
                                                ``1400 - 1500``        1450
4   leading ``BCE|BC <N>``                      ``BCE 800``            -800
5   ``-<N>``                                    ``-800``               -800
6   ``<N> BCE|BC``                              ``800 BCE``            -800
7   ``<N> [CE|AD]`` / leading ``AD <N>``        ``1250 CE``            1250
==  ==========================================  =====================  ==========

A century resolves to its midpoint, ``(N - 1) * 100 + 50``. A range resolves to
its midpoint, with a trailing era applied to both ends. Hijri years convert as
``622 + N * 0.97``. Halves round up. Numbers must stand alone: ``16th c.`` and
``2nd millennium`` have no year. Anything else is ``None`` and the filters treat
it as "no year".
"""

from __future__ import annotations

import math
import re
from typing import Optional

_APPROX_RE = re.compile(r"^(?:circa|ca\.|c\.|~)\s*", re.IGNORECASE)
_CENTURY_RE = re.compile(
    r"(\d+)\s*(?:st|nd|rd|th)[\s-]+century(?:\s+(bce|bc|ce|ad)\b)?",
    re.IGNORECASE,
)
_HIJRI_RE = re.compile(r"\b(\d+)\s*ah\b", re.IGNORECASE)
_RANGE_RE = re.compile(r"\b(\d+)\s*-\s*(\d+)\b(?:\s*(bce|bc|ce|ad)\b)?", re.IGNORECASE)
_LEADING_BCE_RE = re.compile(r"^(?:bce|bc)\.?\s*(\d+)\b", re.IGNORECASE)
_NEGATIVE_RE = re.compile(r"^-\s*(\d+)\b")
_YEAR_RE = re.compile(
    r"\b(\d+)\b(?!\s*(?:st|nd|rd|th)\b)(?:\s*(bce|bc|ce|ad)\b)?",
    re.IGNORECASE,
)

_BCE_MARKERS = {"bce", "bc"}
_HIJRI_EPOCH = 622
_HIJRI_YEAR_RATIO = 0.97


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def century_midpoint(century: int) -> int:
    return (century - 1) * 100 + 50


def hijri_to_gregorian(year: int) -> int:
    """Approximate Gregorian year for a Hijri (AH) year: 750 -> 1350."""
    return _round_half_up(_HIJRI_EPOCH + year * _HIJRI_YEAR_RATIO)


def parse_year_built(text: Optional[str]) -> Optional[int]:
    """
    Resolve a construction-year descriptor to a signed year, or None.
    """
    if not text:
        return None

    value = _APPROX_RE.sub("", text.strip())
    if not value:
        return None

    match = _CENTURY_RE.search(value)
    if match:
        century = int(match.group(1))
        if century <= 0:
            return None
        year = century_midpoint(century)
        era = (match.group(2) or "").lower()
        return -year if era in _BCE_MARKERS else year

    match = _HIJRI_RE.search(value)
    if match:
        return hijri_to_gregorian(int(match.group(1)))

    match = _RANGE_RE.search(value)
    if match:
        year = _round_half_up((int(match.group(1)) + int(match.group(2))) / 2)
        era = (match.group(3) or "").lower()
        return -year if era in _BCE_MARKERS else year

    match = _LEADING_BCE_RE.match(value)
    if match:
        return -int(match.group(1))

    match = _NEGATIVE_RE.match(value)
    if match:
        return -int(match.group(1))

    match = _YEAR_RE.search(value)
    if match:
        year = int(match.group(1))
        era = (match.group(2) or "").lower()
        return -year if era in _BCE_MARKERS else year

    return None


def format_year(year: int) -> str:
    """Render a signed year for display: -800 -> "800 BCE", 1250 -> "1250 CE"."""
    if year < 0:
        return f"{abs(year)} BCE"
    return f"{year} CE"
