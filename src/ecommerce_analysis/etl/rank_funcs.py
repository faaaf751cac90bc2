# src/ecommerce_analysis/etl/rank_funcs.py
"""
Selection of extrema from the aggregates.

Every selector returns a RankSelection. An empty aggregate yields the
explicit no-data selection (has_data is False) with the expected columns,
never a half-filled row.
"""

from dataclasses import dataclass
from typing import Callable, List

import pandas as pd

from ecommerce_analysis.etl.aggregate_funcs import (
    MONTHLY_COLUMNS,
    PRODUCT_COLUMNS,
    STATE_COLUMNS,
)

NO_DATA_MESSAGE = "No data available."


@dataclass(frozen=True, eq=False)
class RankSelection:
    """Named result of a rank selection"""

    name: str
    rows: pd.DataFrame

    @property
    def has_data(self) -> bool:
        return not self.rows.empty

    @property
    def columns(self) -> List[str]:
        return list(self.rows.columns)


def no_data(name: str, columns: List[str]) -> RankSelection:
    """Explicit empty selection."""
    return RankSelection(name=name, rows=pd.DataFrame(columns=columns))


def _select(name: str, rows: pd.DataFrame, columns: List[str]) -> RankSelection:
    return RankSelection(name=name, rows=rows[columns].reset_index(drop=True).copy())


def _extreme_months(
    monthly: pd.DataFrame, name: str, pick: Callable
) -> RankSelection:
    if monthly.empty:
        return no_data(name, MONTHLY_COLUMNS)
    target = pick(monthly["summed_sales"])
    # all tied months, still in chronological order
    return _select(name, monthly[monthly["summed_sales"] == target], MONTHLY_COLUMNS)


def peak_month(monthly: pd.DataFrame) -> RankSelection:
    """Month(s) with the highest summed sales."""
    return _extreme_months(monthly, "Peak Selling Month", max)


def lowest_month(monthly: pd.DataFrame) -> RankSelection:
    """Month(s) with the lowest summed sales."""
    return _extreme_months(monthly, "Lowest Selling Month", min)


def rank_products(products: pd.DataFrame) -> pd.DataFrame:
    """
    Order products by descending sales, then by name.
    """
    return products.sort_values(
        ["summed_sales", "product"], ascending=[False, True]
    ).reset_index(drop=True)


def top_products(products: pd.DataFrame, n: int = 5) -> RankSelection:
    name = f"Top {n} Selling Products"
    if products.empty:
        return no_data(name, PRODUCT_COLUMNS)
    return _select(name, rank_products(products).head(n), PRODUCT_COLUMNS)


def top_product(products: pd.DataFrame) -> RankSelection:
    selection = top_products(products, n=1)
    return RankSelection(name="Highest Selling Product", rows=selection.rows)


def rank_states(state_counts: pd.DataFrame) -> pd.DataFrame:
    """
    Order states by descending customer count, then by state code.
    """
    return state_counts.sort_values(
        ["customer_count", "state_code"], ascending=[False, True]
    ).reset_index(drop=True)


def state_most_customers(state_counts: pd.DataFrame) -> RankSelection:
    name = "State with Most Customers"
    if state_counts.empty:
        return no_data(name, STATE_COLUMNS)
    return _select(name, rank_states(state_counts).head(1), STATE_COLUMNS)


def state_fewest_customers(state_counts: pd.DataFrame) -> RankSelection:
    """Last row of the ranked state table."""
    name = "State with Fewest Customers"
    if state_counts.empty:
        return no_data(name, STATE_COLUMNS)
    return _select(name, rank_states(state_counts).tail(1), STATE_COLUMNS)
