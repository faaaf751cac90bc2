# src/ecommerce_analysis/etl/extract_funcs.py
import logging
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from ecommerce_analysis.config import REQUIRED_COLUMNS
from ecommerce_analysis.exceptions import InputReadError, MissingColumnsError

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
LEGACY_EXCEL_SUFFIXES = {".xls"}

# Only empty cells and "NA" count as missing; "None" or "null" are real values
RAW_NA_VALUES = ["", "NA"]


def _cell_to_text(value):
    """Stringify a spreadsheet cell, leaving nulls and real dates alone."""
    if isinstance(value, (datetime, date)) or pd.isna(value):
        return value
    return str(value)


def load_sales_file(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read the sales extract with every column as text.

    CSV is the default; .xlsx files go through read_excel, where cells
    holding real dates are kept as dates for the normalizer.
    Raises FileNotFoundError if the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in LEGACY_EXCEL_SUFFIXES:
        raise InputReadError(
            f"Legacy {suffix} workbooks are not supported, save {path} as .xlsx"
        )

    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(
                path,
                dtype=object,
                keep_default_na=False,
                na_values=RAW_NA_VALUES,
                engine="openpyxl",
            )
            for col in df.columns:
                df[col] = df[col].map(_cell_to_text)
        else:
            df = pd.read_csv(
                path, dtype=str, keep_default_na=False, na_values=RAW_NA_VALUES
            )
    except (
        pd.errors.ParserError,
        pd.errors.EmptyDataError,
        UnicodeDecodeError,
        zipfile.BadZipFile,
        OSError,
        ValueError,
    ) as e:
        raise InputReadError(f"Could not read {path}: {e}") from e

    logger.info(f"Read {len(df)} rows from {path}")
    return df


def check_required_columns(
    df: pd.DataFrame, required: Iterable[str] = REQUIRED_COLUMNS
) -> pd.DataFrame:
    """
    Ensure the required columns are present; extra columns are ignored.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing)
    return df


def preview(df: pd.DataFrame, n: int = 5) -> None:
    """Log the column names and first rows of the raw extract."""
    logger.info(f"Column names: {list(df.columns)}")
    logger.info("Data preview:\n%s", df.head(n).to_string())


def extract_sales(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load the input file and validate its schema.
    """
    df = check_required_columns(load_sales_file(path))
    preview(df)
    return df
