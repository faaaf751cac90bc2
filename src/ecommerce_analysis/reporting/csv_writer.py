# src/ecommerce_analysis/reporting/csv_writer.py
import logging
from pathlib import Path
from typing import List

import pandas as pd

from ecommerce_analysis.config import (
    FEWEST_CUSTOMERS_FILE,
    LOWEST_MONTH_FILE,
    MISSING_SUMMARY_FILE,
    MOST_CUSTOMERS_FILE,
    PEAK_MONTH_FILE,
    STATE_COUNTS_FILE,
    TOP_PRODUCT_FILE,
    AnalysisConfig,
)

logger = logging.getLogger(__name__)


def write_csv(frame: pd.DataFrame, path: Path) -> Path:
    """Write a frame without its index; Decimal amounts keep their exact text."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        frame.to_csv(f, index=False, lineterminator="\n")
    logger.info(f"Wrote {path} with {len(frame)} rows")
    return path


def write_summary_csvs(result, config: AnalysisConfig) -> List[Path]:
    """
    One CSV per aggregate/selection of an AnalysisResult.
    """
    outputs = [
        (result.missing_summary.to_frame(), MISSING_SUMMARY_FILE),
        (result.peak_month.rows, PEAK_MONTH_FILE),
        (result.lowest_month.rows, LOWEST_MONTH_FILE),
        (result.top_product.rows, TOP_PRODUCT_FILE),
        (result.state_counts, STATE_COUNTS_FILE),
        (result.most_customers.rows, MOST_CUSTOMERS_FILE),
        (result.fewest_customers.rows, FEWEST_CUSTOMERS_FILE),
    ]
    return [write_csv(frame, config.output_path(name)) for frame, name in outputs]
