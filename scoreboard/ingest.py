"""Spreadsheet row ingestion.

Turns score board and threshold sheets, loaded as pandas DataFrames with
every cell kept as text, into domain models. Cells use European decimal
commas, may carry ``%``/``$`` decoration and spreadsheet error markers.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from scoreboard.core.exceptions import ValidationError
from scoreboard.core.logging import get_logger
from scoreboard.domain.stock import StockMetrics
from scoreboard.domain.thresholds import IndustryThreshold

logger = get_logger("ingest")


INVALID_VALUES = frozenset(
    {"#N/A", "N/A", "#NUM!", "#VALUE!", "#DIV/0!", "#REF!", "LOADING..."}
)
DIV_ZERO_MARKERS = frozenset({"#DIV/0!", "INF", "∞"})

# Leading float the way spreadsheet exports are read: trailing junk is ignored
_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Column names tried, in order, for every StockMetrics field
DEFAULT_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "company_name": ("Company Name", "Company"),
    "ticker": ("Ticker", "Ticket", "Symbol"),
    "industry": ("INDUSTRY",),
    "irr": ("IRR",),
    "munger_quality_score": ("Munger Quality Score",),
    "value_creation": ("VALUE CREATION", "VALUE_CREATION"),
    "ro40_f1": ("Ro40 F1",),
    "ro40_f2": ("Ro40 F2",),
    "leverage_f2": ("Leverage F2",),
    "cash_sdebt": ("Cash/SDebt",),
    "current_ratio": ("Current Ratio",),
    "pe1": ("P/E1", "P/E 1", "PE1"),
    "pe2": ("P/E2", "P/E 2", "PE2"),
    "pe1_industry": ("P/E1 INDUSTRY",),
    "pe2_industry": ("P/E2 INDUSTRY",),
    "tb_s_price": ("(TB/S)/Price",),
    "sma100": ("SMA(100)", "SMA100"),
    "sma200": ("SMA(200)", "SMA200"),
    "sma_cross": ("SMA Cross",),
    "price": ("Price",),
}

_REQUIRED_STOCK_FIELDS = ("ticker", "company_name")

_NUMERIC_STOCK_FIELDS = (
    "irr",
    "munger_quality_score",
    "value_creation",
    "ro40_f1",
    "ro40_f2",
    "leverage_f2",
    "cash_sdebt",
    "current_ratio",
    "pe1_industry",
    "pe2_industry",
    "tb_s_price",
    "sma100",
    "sma200",
    "price",
)

_THRESHOLD_FIELDS = (
    "irr",
    "leverage_f2_min",
    "leverage_f2_max",
    "ro40_min",
    "ro40_max",
    "cash_sdebt_min",
    "cash_sdebt_max",
    "current_ratio_min",
    "current_ratio_max",
)


def _cell_text(value: Any) -> str | None:
    """Trimmed text of a cell, None for empty or NaN cells."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


def is_valid_value(value: Any) -> bool:
    """False for empty cells and spreadsheet error markers."""
    text = _cell_text(value)
    if text is None:
        return False
    return text.upper() not in INVALID_VALUES


def parse_numeric(value: Any) -> float | None:
    """Parse a sheet cell into a float.

    Returns None for missing or invalid cells so that a real ``0`` stays
    distinguishable from "no data". Commas are decimal separators; spaces,
    ``#``, ``%`` and ``$`` are stripped.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, np.number)):
        number = float(value)
        return number if math.isfinite(number) else None

    if not is_valid_value(value):
        return None

    cleaned = re.sub(r"\s", "", str(value).replace(",", "."))
    cleaned = cleaned.replace("#", "").replace("%", "").replace("$", "")

    match = _NUMERIC_PREFIX.match(cleaned)
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def is_div_zero_marker(value: Any) -> bool:
    """True when a Cash/SDebt cell signals division by zero."""
    text = _cell_text(value)
    return text is not None and text.upper() in DIV_ZERO_MARKERS


def pe_industry_diff(pe: float | None, median: float | None) -> float | None:
    """Percentage difference of a P/E against its industry median."""
    if pe is None or median is None:
        return None
    if pe <= 0 or median <= 0:
        return None
    return (pe - median) / median * 100


def _normalize_column(name: Any) -> str:
    return re.sub(r"[^0-9a-z]+", "_", str(name).strip().lower()).strip("_")


def _column_lookup(frame: pd.DataFrame) -> dict[str, Any]:
    """Map of lower-cased column name to the frame's actual column label."""
    lookup: dict[str, Any] = {}
    for column in frame.columns:
        lookup.setdefault(str(column).strip().lower(), column)
    return lookup


def find_column(frame: pd.DataFrame, names: Sequence[str]) -> Any | None:
    """First column of ``frame`` matching any of ``names``, case-insensitively."""
    lookup = _column_lookup(frame)
    for name in names:
        column = lookup.get(name.strip().lower())
        if column is not None:
            return column
    return None


def industry_pe_medians(
    frame: pd.DataFrame,
    column: str,
    industry_column: str = "INDUSTRY",
) -> dict[str, float]:
    """Median of the positive values of ``column`` per industry.

    Keys are lower-cased industry names.
    """
    value_col = find_column(frame, [column])
    industry_col = find_column(frame, [industry_column])
    if value_col is None or industry_col is None:
        return {}

    data = pd.DataFrame(
        {
            "industry": frame[industry_col].map(
                lambda v: _cell_text(v).lower() if is_valid_value(v) else None
            ),
            "value": frame[value_col].map(parse_numeric).astype(float),
        }
    )
    data = data.dropna()
    data = data[data["value"] > 0]
    if data.empty:
        return {}

    medians = data.groupby("industry")["value"].median()
    return {str(industry): float(median) for industry, median in medians.items()}


def stock_metrics_from_frame(
    frame: pd.DataFrame,
    column_aliases: Mapping[str, Sequence[str]] | None = None,
) -> list[StockMetrics]:
    """Build StockMetrics from a score board sheet.

    Rows whose ticker or company name is missing or an error marker are
    skipped. When the sheet carries raw ``P/E1``/``P/E2`` columns but no
    precomputed industry difference, the difference is derived from the
    per-industry medians of the same frame.

    Raises:
        ValidationError: if the ticker or company name column is absent.
    """
    aliases = dict(DEFAULT_COLUMN_ALIASES)
    if column_aliases:
        aliases.update({key: tuple(names) for key, names in column_aliases.items()})

    columns = {field: find_column(frame, names) for field, names in aliases.items()}

    missing = [field for field in _REQUIRED_STOCK_FIELDS if columns.get(field) is None]
    if missing:
        raise ValidationError(
            message="Score board sheet is missing required columns",
            details={"missing": missing, "columns": [str(c) for c in frame.columns]},
        )

    pe_medians: dict[str, dict[str, float]] = {}
    for raw, derived in (("pe1", "pe1_industry"), ("pe2", "pe2_industry")):
        if columns.get(derived) is None and columns.get(raw) is not None:
            industry_col = columns.get("industry")
            pe_medians[derived] = (
                industry_pe_medians(frame, str(columns[raw]), str(industry_col))
                if industry_col is not None
                else {}
            )

    stocks: list[StockMetrics] = []
    skipped = 0
    for _, row in frame.iterrows():
        def cell(field: str) -> Any:
            column = columns.get(field)
            return row[column] if column is not None else None

        ticker = cell("ticker")
        company_name = cell("company_name")
        if not is_valid_value(ticker) or not is_valid_value(company_name):
            skipped += 1
            continue

        industry = _cell_text(cell("industry")) or ""
        values: dict[str, Any] = {
            field: parse_numeric(cell(field)) for field in _NUMERIC_STOCK_FIELDS
        }

        for raw, derived in (("pe1", "pe1_industry"), ("pe2", "pe2_industry")):
            if derived in pe_medians:
                median = (
                    pe_medians[derived].get(industry.lower())
                    if is_valid_value(industry)
                    else None
                )
                values[derived] = pe_industry_diff(parse_numeric(cell(raw)), median)

        sma_cross = cell("sma_cross")
        stocks.append(
            StockMetrics(
                ticker=_cell_text(ticker),
                company_name=_cell_text(company_name),
                industry=industry,
                is_cash_sdebt_div_zero=is_div_zero_marker(cell("cash_sdebt")),
                sma_cross=_cell_text(sma_cross) if is_valid_value(sma_cross) else None,
                **values,
            )
        )

    if skipped:
        logger.debug(
            "Skipped score board rows without ticker or company name",
            extra={"skipped": skipped, "rows": len(frame)},
        )
    return stocks


def thresholds_from_frame(frame: pd.DataFrame) -> list[IndustryThreshold]:
    """Build IndustryThresholds from a threshold sheet.

    Columns are matched after normalizing names, so ``"Leverage F2 Min"``
    and ``leverage_f2_min`` both work. Missing or invalid boundaries become
    0, the same as an unconfigured industry. Rows with no valid industry
    are skipped.
    """
    normalized: dict[str, Any] = {}
    for column in frame.columns:
        normalized.setdefault(_normalize_column(column), column)

    industry_col = normalized.get("industry")
    if industry_col is None:
        raise ValidationError(
            message="Threshold sheet is missing the industry column",
            details={"columns": [str(c) for c in frame.columns]},
        )

    thresholds: list[IndustryThreshold] = []
    for _, row in frame.iterrows():
        industry = row[industry_col]
        if not is_valid_value(industry):
            continue

        values: dict[str, float] = {}
        for field in _THRESHOLD_FIELDS:
            column = normalized.get(field)
            number = parse_numeric(row[column]) if column is not None else None
            values[field] = number if number is not None else 0.0

        thresholds.append(IndustryThreshold(industry=_cell_text(industry), **values))

    return thresholds
