# src/ecommerce_analysis/reporting/excel_report.py
import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def to_sheet_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Decimal sales become floats so they land in the workbook as numbers.
    """
    frame = frame.copy()
    if "summed_sales" in frame.columns:
        frame["summed_sales"] = frame["summed_sales"].map(float).astype(float)
    return frame


def write_workbook(result, path: Path) -> Path:
    """
    Multi-sheet workbook: Peak Month, Lowest Month, Top Product, Customer by State.
    """
    sheets = {
        "Peak Month": result.peak_month.rows,
        "Lowest Month": result.lowest_month.rows,
        "Top Product": result.top_product.rows,
        "Customer by State": result.state_counts,
    }
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, frame in sheets.items():
            to_sheet_frame(frame).to_excel(writer, sheet_name=name, index=False)
    logger.info(f"Wrote workbook {path} with sheets {list(sheets)}")
    return path
