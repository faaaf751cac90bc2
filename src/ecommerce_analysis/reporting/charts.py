# src/ecommerce_analysis/reporting/charts.py
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # render to files only
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from ecommerce_analysis.etl.rank_funcs import RankSelection  # noqa: E402

logger = logging.getLogger(__name__)


def _show_no_data(ax) -> None:
    ax.text(
        0.5,
        0.5,
        "No data",
        ha="center",
        va="center",
        fontsize=14,
        transform=ax.transAxes,
    )
    ax.set_xticks([])
    ax.set_yticks([])


def save_figure(fig, path: Path) -> Path:
    fig.tight_layout()
    fig.savefig(path, dpi=100)
    plt.close(fig)
    logger.info(f"Saved chart to {path}")
    return path


def plot_monthly_trend(monthly: pd.DataFrame, path: Path) -> Path:
    """
    Line chart of summed sales per month, months in chronological order.
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.set_title("Monthly Sales Trend\nTotal sales grouped by order month")
    ax.set_xlabel("Month")
    ax.set_ylabel("Total Sales")

    if monthly.empty:
        _show_no_data(ax)
        return save_figure(fig, path)

    labels = monthly["month_label"].tolist()
    values = [float(v) for v in monthly["summed_sales"]]
    positions = range(len(labels))
    ax.plot(positions, values, color="steelblue", linewidth=1.2)
    ax.scatter(positions, values, color="darkred", s=30, zorder=3)
    ax.set_xticks(list(positions))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.grid(axis="y", linestyle=":")
    return save_figure(fig, path)


def plot_top_products(selection: RankSelection, path: Path) -> Path:
    """
    Horizontal bars of the top products, best seller on top.
    """
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.set_title(selection.name)
    ax.set_xlabel("Total Sales")
    ax.set_ylabel("Product")

    if not selection.has_data:
        _show_no_data(ax)
        return save_figure(fig, path)

    # barh draws the first bar at the bottom
    rows = selection.rows.iloc[::-1]
    ax.barh(
        rows["product"].astype(str).tolist(),
        [float(v) for v in rows["summed_sales"]],
        color="darkgreen",
    )
    return save_figure(fig, path)
