"""Price and entry/exit lookups passed into the engine.

The engine only sees two callables keyed by ``(ticker, company_name)``.
These helpers build them from the shapes callers usually hold.
"""

from __future__ import annotations

from typing import Callable, Iterable, Mapping

from scoreboard.domain.entry_exit import EntryExitValues, entry_exit_key
from scoreboard.domain.stock import PriceRecord


PriceLookup = Callable[[str, str], "float | None"]
EntryExitLookup = Callable[[str, str], "EntryExitValues | None"]


def find_price(
    ticker: str,
    company_name: str,
    records: Iterable[PriceRecord],
) -> float | None:
    """Price of the first record whose ticker or company name matches.

    Both comparisons are case-insensitive.
    """
    ticker_lower = (ticker or "").lower()
    name_lower = (company_name or "").lower()
    for record in records:
        if (record.ticker is not None and record.ticker.lower() == ticker_lower) or (
            record.company_name is not None
            and record.company_name.lower() == name_lower
        ):
            return record.price
    return None


def price_lookup_from_records(records: Iterable[PriceRecord]) -> PriceLookup:
    """Build a price lookup over a list of price records."""
    snapshot = tuple(records)

    def lookup(ticker: str, company_name: str) -> float | None:
        return find_price(ticker, company_name, snapshot)

    return lookup


def entry_exit_lookup_from_mapping(
    values: Mapping[str, EntryExitValues],
) -> EntryExitLookup:
    """Build an entry/exit lookup over a ``"ticker-companyName"`` keyed map."""

    def lookup(ticker: str, company_name: str) -> EntryExitValues | None:
        return values.get(entry_exit_key(ticker, company_name))

    return lookup
