# src/ecommerce_analysis/config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Default locations, relative to the working directory of the run
DEFAULT_INPUT_PATH = Path("eCommerce.csv")
DEFAULT_OUTPUT_DIR = Path("analysis_output")

# Number of products shown in the top products chart
TOP_N_PRODUCTS = 5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Raw input columns
ORDER_DATE_COL = "Order_Date"
PRODUCT_COL = "Product"
TOTAL_SALES_COL = "Total_Sales"
STATE_CODE_COL = "State_Code"
REQUIRED_COLUMNS = [ORDER_DATE_COL, PRODUCT_COL, TOTAL_SALES_COL, STATE_CODE_COL]

# Output file names
MISSING_SUMMARY_FILE = "missing_summary.csv"
PEAK_MONTH_FILE = "peak_month.csv"
LOWEST_MONTH_FILE = "lowest_month.csv"
TOP_PRODUCT_FILE = "top_product.csv"
STATE_COUNTS_FILE = "customer_count_by_state.csv"
MOST_CUSTOMERS_FILE = "state_most_customers.csv"
FEWEST_CUSTOMERS_FILE = "state_fewest_customers.csv"
TEXT_REPORT_FILE = "ecommerce_summary.txt"
WORKBOOK_FILE = "ecommerce_report.xlsx"
MONTHLY_TREND_CHART_FILE = "monthly_sales_trend.png"
TOP_PRODUCTS_CHART_FILE = "top5_products.png"


def _log_level_from_env() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown LOG_LEVEL {level!r}, using INFO")
        return "INFO"
    return level


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one analysis run"""

    input_path: Path = DEFAULT_INPUT_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    top_n: int = TOP_N_PRODUCTS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """Create configuration from .env / environment variables"""
        load_dotenv()
        return cls(
            input_path=Path(os.getenv("ECOMMERCE_INPUT_PATH", str(DEFAULT_INPUT_PATH))),
            output_dir=Path(os.getenv("ECOMMERCE_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))),
            log_level=_log_level_from_env(),
        )

    def output_path(self, file_name: str) -> Path:
        return self.output_dir / file_name
