# src/ecommerce_analysis/etl/aggregate_funcs.py
from decimal import Decimal
from typing import Iterable

import pandas as pd

MONTHLY_COLUMNS = ["month_label", "summed_sales"]
PRODUCT_COLUMNS = ["product", "summed_sales"]
STATE_COLUMNS = ["state_code", "customer_count"]


def decimal_sum(values: Iterable) -> Decimal:
    """Exact sum of Decimal amounts."""
    return sum(values, Decimal("0"))


def _sum_sales_by(df: pd.DataFrame, key: str) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(
            {key: pd.Series(dtype=object), "summed_sales": pd.Series(dtype=object)}
        )
    return (
        df.groupby(key, sort=False)["total_sales"]
        .agg(decimal_sum)
        .rename("summed_sales")
        .reset_index()
    )


def monthly_sales(valid: pd.DataFrame) -> pd.DataFrame:
    """
    Sum sales per month label, in the chronological order of the
    (month-sorted) valid records.
    """
    return _sum_sales_by(valid, "month_label")[MONTHLY_COLUMNS]


def product_sales(valid: pd.DataFrame) -> pd.DataFrame:
    """
    Sum sales per product.
    """
    return _sum_sales_by(valid, "product")[PRODUCT_COLUMNS]


def state_customer_counts(valid: pd.DataFrame) -> pd.DataFrame:
    """
    Count records per state, most customers first; ties by state code.
    """
    if valid.empty:
        return pd.DataFrame(
            {
                "state_code": pd.Series(dtype=object),
                "customer_count": pd.Series(dtype="int64"),
            }
        )
    counts = (
        valid.groupby("state_code")
        .size()
        .rename("customer_count")
        .reset_index()
    )
    return counts.sort_values(
        ["customer_count", "state_code"], ascending=[False, True]
    ).reset_index(drop=True)[STATE_COLUMNS]
