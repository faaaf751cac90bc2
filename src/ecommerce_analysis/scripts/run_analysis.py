#!/usr/bin/env python3
import logging
import sys

from ecommerce_analysis.config import AnalysisConfig
from ecommerce_analysis.etl.extract_funcs import extract_sales
from ecommerce_analysis.exceptions import AnalysisError
from ecommerce_analysis.pipeline import run_analysis
from ecommerce_analysis.reporting import write_reports

logger = logging.getLogger(__name__)


def main() -> int:
    config = AnalysisConfig.from_env()
    logging.basicConfig(
        level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    # Fatal input problems stop the run before the output folder is touched
    try:
        raw = extract_sales(config.input_path)
    except (FileNotFoundError, AnalysisError) as e:
        logger.error(f"Analysis aborted: {e}")
        return 1

    result = run_analysis(raw, top_n=config.top_n)
    write_reports(result, config)

    logger.info(f"Analysis complete! Files saved to '{config.output_dir}/' folder.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
