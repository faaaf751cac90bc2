# src/ecommerce_analysis/etl/transform_funcs.py
import logging
import unicodedata
from datetime import date, datetime
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

import pandas as pd

from ecommerce_analysis.config import (
    ORDER_DATE_COL,
    PRODUCT_COL,
    STATE_CODE_COL,
    TOTAL_SALES_COL,
)

logger = logging.getLogger(__name__)

# day, then a numeric month between separators or a month name, then year
DMY_PATTERN = (
    r"^\s*(\d{1,2})"
    r"(?:[-/.\s]+(\d{1,2})[-/.\s]+|[-/.\s]*([A-Za-z]+)[-/.\s]*)"
    r"(\d{4}|\d{2})\s*$"
)
MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]
MONTH_LABEL_FORMAT = "%b %Y"

REQUIRED_FIELDS = ["order_date", "product", "total_sales", "state_code"]
NORMALIZED_COLUMNS = [
    "order_date",
    "product",
    "total_sales",
    "state_code",
    "month",
    "month_label",
    "year",
]


@dataclass(frozen=True)
class MissingSummary:
    """Counts of absent required fields in the raw extract."""

    missing_dates: int = 0
    missing_products: int = 0
    missing_sales: int = 0
    missing_states: int = 0

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(self)])


def is_blank(series: pd.Series) -> pd.Series:
    """True where a raw value is null or only whitespace."""
    return series.isna() | series.astype(str).str.strip().eq("")


def summarize_missing(df: pd.DataFrame) -> MissingSummary:
    """
    Count absent values per required column of the *raw* frame.

    Presence is judged on the raw text, so an unparsable but non-empty
    date still counts as present here.
    """
    return MissingSummary(
        missing_dates=int(is_blank(df[ORDER_DATE_COL]).sum()),
        missing_products=int(is_blank(df[PRODUCT_COL]).sum()),
        missing_sales=int(is_blank(df[TOTAL_SALES_COL]).sum()),
        missing_states=int(is_blank(df[STATE_CODE_COL]).sum()),
    )


def month_number(name) -> Optional[str]:
    """Month number for an English month name or abbreviation ("Mar", "Sept")."""
    if not isinstance(name, str) or len(name) < 3:
        return None
    name = name.lower()
    for number, full in enumerate(MONTH_NAMES, start=1):
        if full.startswith(name):
            return str(number)
    return None


def _is_datetime_cell(value) -> bool:
    return isinstance(value, (datetime, date)) and not pd.isna(value)


def parse_order_dates(series: pd.Series) -> pd.Series:
    """
    Parse day-month-year text to datetime, coercing anything else to NaT.

    Cells that already hold dates (spreadsheet inputs) are kept as-is,
    truncated to the day.
    """
    is_date_cell = series.map(_is_datetime_cell).astype(bool)
    text = series.where(~is_date_cell, None).astype("string")
    parts = text.str.extract(DMY_PATTERN).astype(object)

    day, numeric_month, named_month, year = parts[0], parts[1], parts[2], parts[3]
    month = numeric_month.where(
        numeric_month.notna(), named_month.map(month_number)
    )
    matched = day.notna() & month.notna() & year.notna()
    year_len = year.where(matched, "").map(len)

    dates = pd.Series(pd.NaT, index=series.index, dtype="datetime64[ns]")
    for length, fmt in ((4, "%d-%m-%Y"), (2, "%d-%m-%y")):
        mask = matched & year_len.eq(length)
        if mask.any():
            canonical = day[mask] + "-" + month[mask] + "-" + year[mask]
            dates.loc[mask] = pd.to_datetime(
                canonical, format=fmt, errors="coerce"
            )
    if is_date_cell.any():
        dates.loc[is_date_cell] = pd.to_datetime(
            series[is_date_cell].tolist()
        ).normalize()
    return dates


def parse_amount(value) -> Optional[Decimal]:
    """
    Strip currency symbols, thousands separators and whitespace, then
    parse as Decimal. Returns None when nothing parsable is left.
    """
    if value is None or pd.isna(value):
        return None
    text = "".join(
        ch
        for ch in str(value)
        if ch != "," and not ch.isspace() and unicodedata.category(ch) != "Sc"
    )
    if not text:
        return None
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def parse_sales(series: pd.Series) -> pd.Series:
    """Convert currency text to Decimal amounts (None where unparsable)."""
    return series.map(parse_amount).astype(object)


def clean_text(series: pd.Series) -> pd.Series:
    """Keep text verbatim, mapping blank values to None."""
    return series.astype(object).where(~is_blank(series), None)


def derive_month_fields(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add month (first of month), month_label ("Mar 2021") and year.
    All three stay null where order_date is null.
    """
    df = df.copy()
    df["month"] = df["order_date"].dt.to_period("M").dt.to_timestamp()
    df["month_label"] = df["month"].dt.strftime(MONTH_LABEL_FORMAT)
    df["year"] = df["order_date"].dt.year.astype("Int64")
    return df


def normalize_records(df: pd.DataFrame) -> pd.DataFrame:
    """
    Build the typed record frame: same length and order as the raw input.
    """
    normalized = pd.DataFrame(
        {
            "order_date": parse_order_dates(df[ORDER_DATE_COL]),
            "product": clean_text(df[PRODUCT_COL]),
            "total_sales": parse_sales(df[TOTAL_SALES_COL]),
            "state_code": clean_text(df[STATE_CODE_COL]),
        },
        index=df.index,
    )
    normalized = derive_month_fields(normalized)

    bad_dates = int(
        (~is_blank(df[ORDER_DATE_COL]) & normalized["order_date"].isna()).sum()
    )
    bad_sales = int(
        (~is_blank(df[TOTAL_SALES_COL]) & normalized["total_sales"].isna()).sum()
    )
    if bad_dates:
        logger.warning(f"{bad_dates} unparsable dates in {ORDER_DATE_COL}")
    if bad_sales:
        logger.warning(f"{bad_sales} unparsable sales in {TOTAL_SALES_COL}")

    return normalized[NORMALIZED_COLUMNS]


def filter_valid(df: pd.DataFrame) -> pd.DataFrame:
    """
    Keep only records with every required field present, ordered by month.

    The sort is stable so records within a month keep their input order.
    """
    mask = df[REQUIRED_FIELDS].notna().all(axis=1)
    dropped = int((~mask).sum())
    if dropped:
        logger.info(f"Dropped {dropped} of {len(df)} records with missing fields")

    return (
        df[mask]
        .sort_values("month", kind="mergesort")
        .reset_index(drop=True)
    )
