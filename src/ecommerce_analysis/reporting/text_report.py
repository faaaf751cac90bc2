# src/ecommerce_analysis/reporting/text_report.py
import logging
from pathlib import Path

from ecommerce_analysis.etl.rank_funcs import NO_DATA_MESSAGE, RankSelection

logger = logging.getLogger(__name__)

SECTION_ICONS = {
    "Peak Selling Month": "📈",
    "Lowest Selling Month": "📉",
    "Highest Selling Product": "🏆",
    "State with Most Customers": "📍",
    "State with Fewest Customers": "📍",
}


def render_section(selection: RankSelection) -> str:
    icon = SECTION_ICONS.get(selection.name, "-")
    header = f"{icon} {selection.name}:"
    if not selection.has_data:
        return f"{header}\n{NO_DATA_MESSAGE}\n"
    return f"{header}\n{selection.rows.to_string(index=False)}\n"


def render_report(result) -> str:
    """Plain-text summary of the five selections."""
    return "\n".join(render_section(s) for s in result.selections())


def write_text_report(result, path: Path) -> Path:
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(render_report(result))
    logger.info(f"Wrote text report to {path}")
    return path
