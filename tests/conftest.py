# tests/conftest.py
import sys
import os
import pytest
import logging
from pathlib import Path

import pandas as pd

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

# Add the 'src' directory to sys.path so tests run without an install
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_PATH = os.path.join(PROJECT_ROOT, "src")
sys.path.insert(0, SRC_PATH)

from ecommerce_analysis.config import AnalysisConfig  # noqa: E402


def make_raw(rows):
    """Build a raw extract (all text columns) from (date, product, sales, state) tuples."""
    return pd.DataFrame(
        rows,
        columns=["Order_Date", "Product", "Total_Sales", "State_Code"],
        dtype=object,
    )


@pytest.fixture
def raw_factory():
    return make_raw


@pytest.fixture
def scenario_a_raw():
    """Three clean orders over two months"""
    return make_raw(
        [
            ("01-03-2021", "Widget", "$10", "AA"),
            ("15-03-2021", "Widget", "$20", "AA"),
            ("01-04-2021", "Gadget", "$5", "BB"),
        ]
    )


@pytest.fixture
def messy_raw():
    """Orders with blanks, bad dates and bad amounts mixed in"""
    return make_raw(
        [
            ("05-02-2021", "Widget", "$12.50", "AA"),
            ("31-02-2021", "Widget", "$3", "AA"),  # impossible date
            (None, "Gadget", "$7", "BB"),
            ("10-01-2021", "", "$8", "CC"),
            ("11-01-2021", "Gizmo", "abc", "CC"),
            ("12-01-2021", "Gizmo", None, "CC"),
            ("20-01-2021", "Gadget", "$1,000.25", None),
            ("21-01-2021", "Gadget", "$4.75", "BB"),
        ]
    )


@pytest.fixture
def empty_raw():
    return make_raw([])


@pytest.fixture
def output_config(tmp_path):
    """Config writing into a per-test output folder"""
    return AnalysisConfig(
        input_path=tmp_path / "eCommerce.csv",
        output_dir=tmp_path / "analysis_output",
    )


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "integration: marks tests that write report files")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file names"""
    for item in items:
        if "report" in item.nodeid or "run_analysis" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
