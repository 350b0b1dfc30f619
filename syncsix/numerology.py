"""
Sync Six: Numerology Module v1.2
================================
Pure number derivations used by the scorer.

Features:
- Pythagorean Gematria (A=1..I=9, J=1..R=9, S=1..Z=8)
- Sync Six date fingerprint (6 numbers per calendar date)
- Prime checker (safe on junk jersey values)
"""

import math
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Union

from core.dates import parse_calendar_date
from core.invariants import RAW_DAY_INDEX, SYNC_SIX_COMPONENTS

# =============================================================================
# PYTHAGOREAN GEMATRIA
# =============================================================================

PYTHAGOREAN_GEMATRIA = {chr(i): ((i - 97) % 9) + 1 for i in range(97, 123)}  # a=1 .. i=9, j=1 ..


def get_gematria_value(text: Optional[str]) -> int:
    """Pythagorean reduction of a name. Anything outside a-z is ignored."""
    if not text or not isinstance(text, str):
        return 0
    return sum(PYTHAGOREAN_GEMATRIA.get(c, 0) for c in text.lower())


# =============================================================================
# SYNC SIX - Date Fingerprint
# =============================================================================
# [0] full_component     M + D + Y
# [1] partial_reduction  M + D + (Y % 100)
# [2] life_path          M + D
# [3] simplified_comp    M + Y
# [4] simplified_root    D + Y
# [5] raw_day            D (used for the jersey <-> date hit)
#
# Plain sums. No digit collapse happens despite the names.

def get_sync_six(value: Union[str, date, datetime]) -> Tuple[int, int, int, int, int, int]:
    """
    Compute the 6-number fingerprint for a calendar date.

    Raises:
        ValueError: if a string value cannot be parsed as a date
    """
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise ValueError(f"Cannot derive SYNC SIX from {value!r}")

    day = parsed.day
    month = parsed.month
    year = parsed.year

    return (
        month + day + year,
        month + day + (year % 100),
        month + day,
        month + year,
        day + year,
        day,
    )


def get_sync_six_components(date_nums) -> Dict[str, Any]:
    """Map fingerprint indices 0-4 onto their display names ("--" when absent)."""
    components = {}
    for index, name in enumerate(SYNC_SIX_COMPONENTS):
        components[name] = date_nums[index] if index < len(date_nums) else "--"
    return components


def get_raw_day(date_nums) -> Optional[int]:
    """Day-of-month slot of a fingerprint, or None for a short sequence."""
    return date_nums[RAW_DAY_INDEX] if len(date_nums) > RAW_DAY_INDEX else None


# =============================================================================
# PRIME CHECKER
# =============================================================================

def as_jersey_number(value: Any) -> Optional[int]:
    """
    Coerce a jersey value to an int.

    Only real integers (or integral floats) count. Strings, bools, None and
    NaN give None so they never match a date number or test prime.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def is_prime(n: Any) -> bool:
    """Trial division up to isqrt(n). Non-integers are never prime."""
    n = as_jersey_number(n)
    if n is None or n < 2:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True
