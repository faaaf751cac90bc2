# src/ecommerce_analysis/pipeline.py
"""
Compute every aggregate and selection of an analysis run.

run_analysis is pure: it takes the raw frame and returns an AnalysisResult.
Writing files is left to ecommerce_analysis.reporting.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from ecommerce_analysis.config import TOP_N_PRODUCTS
from ecommerce_analysis.etl.aggregate_funcs import (
    monthly_sales,
    product_sales,
    state_customer_counts,
)
from ecommerce_analysis.etl.rank_funcs import (
    RankSelection,
    lowest_month,
    peak_month,
    state_fewest_customers,
    state_most_customers,
    top_product,
    top_products,
)
from ecommerce_analysis.etl.transform_funcs import (
    MissingSummary,
    filter_valid,
    normalize_records,
    summarize_missing,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Everything the report writers need, computed up front."""

    missing_summary: MissingSummary
    monthly_sales: pd.DataFrame
    product_sales: pd.DataFrame
    state_counts: pd.DataFrame
    peak_month: RankSelection
    lowest_month: RankSelection
    top_product: RankSelection
    top_products: RankSelection
    most_customers: RankSelection
    fewest_customers: RankSelection
    raw_count: int
    normalized_count: int
    valid_count: int

    @property
    def has_data(self) -> bool:
        return self.valid_count > 0

    def selections(self):
        """The five single-answer selections, in report order."""
        return [
            self.peak_month,
            self.lowest_month,
            self.top_product,
            self.most_customers,
            self.fewest_customers,
        ]


def run_analysis(raw: pd.DataFrame, top_n: int = TOP_N_PRODUCTS) -> AnalysisResult:
    """
    raw -> normalized -> valid -> aggregates -> selections
    """
    missing = summarize_missing(raw)
    normalized = normalize_records(raw)
    valid = filter_valid(normalized)

    monthly = monthly_sales(valid)
    products = product_sales(valid)
    states = state_customer_counts(valid)

    if valid.empty:
        logger.warning("No valid records after cleaning; reports will be empty")
    else:
        logger.info(
            f"Aggregated {len(valid)} valid records: {len(monthly)} months, "
            f"{len(products)} products, {len(states)} states"
        )

    return AnalysisResult(
        missing_summary=missing,
        monthly_sales=monthly,
        product_sales=products,
        state_counts=states,
        peak_month=peak_month(monthly),
        lowest_month=lowest_month(monthly),
        top_product=top_product(products),
        top_products=top_products(products, n=top_n),
        most_customers=state_most_customers(states),
        fewest_customers=state_fewest_customers(states),
        raw_count=len(raw),
        normalized_count=len(normalized),
        valid_count=len(valid),
    )
