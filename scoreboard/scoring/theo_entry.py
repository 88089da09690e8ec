"""TheoEntry signal from entry/exit targets.

TheoEntry is green when either target pair offers enough reward and the
current price sits close enough to its entry:

- RR1 path: RR1 >= 60% and price <= entry1 * 1.05
- RR2 path: RR2 > 60% (strict) and price <= entry2 * 1.05

Both paths also require a positive price and a positive entry.
"""

from __future__ import annotations

import math

from scoreboard.domain.entry_exit import EntryExitValues

from .colors import ColorType
from .config import PRICE_TOLERANCE_GREEN, RR_GREEN_THRESHOLD_PERCENT


def calculate_rr(entry: float | None, exit_: float | None) -> float | None:
    """Reward ratio in percent: ``(exit - entry) / entry * 100``.

    None when either target is unset (0/None) or the result is not finite.
    """
    if not entry or not exit_:
        return None
    rr = (exit_ - entry) / entry * 100
    if not math.isfinite(rr):
        return None
    return rr


def calculate_rr1(values: EntryExitValues | None) -> float | None:
    if values is None:
        return None
    return calculate_rr(values.entry1, values.exit1)


def calculate_rr2(values: EntryExitValues | None) -> float | None:
    if values is None:
        return None
    return calculate_rr(values.entry2, values.exit2)


def _price_near_entry(entry: float, price: float | None) -> bool:
    if price is None or not math.isfinite(price):
        return False
    return entry > 0 and price > 0 and price <= entry * PRICE_TOLERANCE_GREEN


def is_entry1_green(values: EntryExitValues | None, price: float | None) -> bool:
    """Price is positive and within tolerance of entry1."""
    if values is None:
        return False
    return _price_near_entry(values.entry1 or 0, price)


def is_entry2_green(values: EntryExitValues | None, price: float | None) -> bool:
    """Price is positive and within tolerance of entry2."""
    if values is None:
        return False
    return _price_near_entry(values.entry2 or 0, price)


def is_rr1_green(values: EntryExitValues | None, price: float | None) -> bool:
    rr1 = calculate_rr1(values)
    return (
        rr1 is not None
        and rr1 >= RR_GREEN_THRESHOLD_PERCENT
        and is_entry1_green(values, price)
    )


def is_rr2_green_for_theo_entry(
    values: EntryExitValues | None, price: float | None
) -> bool:
    rr2 = calculate_rr2(values)
    return (
        rr2 is not None
        and rr2 > RR_GREEN_THRESHOLD_PERCENT
        and is_entry2_green(values, price)
    )


def is_theo_entry_green(values: EntryExitValues | None, price: float | None) -> bool:
    """True when the RR1 path or the RR2 path qualifies."""
    if values is None:
        return False
    return is_rr1_green(values, price) or is_rr2_green_for_theo_entry(values, price)


def get_theo_entry_color(values: EntryExitValues | None, price: float | None) -> ColorType:
    """GREEN or BLANK; TheoEntry never takes the middle band."""
    return ColorType.GREEN if is_theo_entry_green(values, price) else ColorType.BLANK
