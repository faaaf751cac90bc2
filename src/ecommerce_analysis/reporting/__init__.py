"""
Report writers

Each writer takes a finished AnalysisResult and serializes one view of it
into the configured output directory.
"""

import logging
from pathlib import Path
from typing import List

from ecommerce_analysis.config import (
    MONTHLY_TREND_CHART_FILE,
    TEXT_REPORT_FILE,
    TOP_PRODUCTS_CHART_FILE,
    WORKBOOK_FILE,
    AnalysisConfig,
)
from .charts import plot_monthly_trend, plot_top_products
from .csv_writer import write_summary_csvs
from .excel_report import write_workbook
from .text_report import render_report, write_text_report

logger = logging.getLogger(__name__)


def write_reports(result, config: AnalysisConfig) -> List[Path]:
    """
    Write every output file, overwriting results of previous runs.
    """
    config.output_dir.mkdir(parents=True, exist_ok=True)

    written = write_summary_csvs(result, config)
    written.append(write_text_report(result, config.output_path(TEXT_REPORT_FILE)))
    written.append(write_workbook(result, config.output_path(WORKBOOK_FILE)))
    written.append(
        plot_monthly_trend(
            result.monthly_sales, config.output_path(MONTHLY_TREND_CHART_FILE)
        )
    )
    written.append(
        plot_top_products(
            result.top_products, config.output_path(TOP_PRODUCTS_CHART_FILE)
        )
    )
    logger.info(f"Wrote {len(written)} files to {config.output_dir}")
    return written


__all__ = [
    "write_reports",
    "write_summary_csvs",
    "write_text_report",
    "render_report",
    "write_workbook",
    "plot_monthly_trend",
    "plot_top_products",
]
