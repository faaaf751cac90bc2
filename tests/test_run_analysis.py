import pytest
from ecommerce_analysis.scripts.run_analysis import main

CSV_TEXT = (
    "Order_Date,Product,Total_Sales,State_Code\n"
    "01-03-2021,Widget,$10,AA\n"
    "15-03-2021,Widget,$20,AA\n"
    "01-04-2021,Gadget,$5,BB\n"
    "02-04-2021,,$5,BB\n"
)


@pytest.fixture
def run_dir(tmp_path, monkeypatch):
    """Run from an empty folder with no .env overrides"""
    monkeypatch.chdir(tmp_path)
    for var in ("ECOMMERCE_INPUT_PATH", "ECOMMERCE_OUTPUT_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


def test_main_writes_reports(run_dir):
    (run_dir / "eCommerce.csv").write_text(CSV_TEXT)

    assert main() == 0

    out = run_dir / "analysis_output"
    assert (out / "ecommerce_report.xlsx").is_file()
    assert (out / "monthly_sales_trend.png").is_file()
    assert (out / "missing_summary.csv").read_text() == (
        "missing_dates,missing_products,missing_sales,missing_states\n0,1,0,0\n"
    )


def test_main_missing_input_is_fatal(run_dir, caplog):
    assert main() == 1
    assert not (run_dir / "analysis_output").exists()
    assert "Analysis aborted" in caplog.text


def test_main_missing_columns_is_fatal(run_dir):
    (run_dir / "eCommerce.csv").write_text("Order_Date,Product\n01-03-2021,Widget\n")
    assert main() == 1
    assert not (run_dir / "analysis_output").exists()


def test_main_uses_env_output_dir(run_dir, monkeypatch):
    (run_dir / "sales.csv").write_text(CSV_TEXT)
    monkeypatch.setenv("ECOMMERCE_INPUT_PATH", str(run_dir / "sales.csv"))
    monkeypatch.setenv("ECOMMERCE_OUTPUT_DIR", str(run_dir / "reports"))

    assert main() == 0
    assert (run_dir / "reports" / "top_product.csv").read_text() == (
        "product,summed_sales\nWidget,30\n"
    )
