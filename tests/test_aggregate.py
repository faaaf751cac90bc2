from decimal import Decimal

import pandas as pd
from ecommerce_analysis.etl.aggregate_funcs import (
    decimal_sum,
    monthly_sales,
    product_sales,
    state_customer_counts,
)
from ecommerce_analysis.etl.transform_funcs import filter_valid, normalize_records


def _valid(raw):
    return filter_valid(normalize_records(raw))


def test_decimal_sum_is_exact():
    values = [Decimal("0.1")] * 10
    assert decimal_sum(values) == Decimal("1.0")
    assert decimal_sum([]) == Decimal("0")


def test_monthly_sales_scenario_a(scenario_a_raw):
    monthly = monthly_sales(_valid(scenario_a_raw))
    assert list(monthly.columns) == ["month_label", "summed_sales"]
    assert dict(zip(monthly["month_label"], monthly["summed_sales"])) == {
        "Mar 2021": Decimal("30"),
        "Apr 2021": Decimal("5"),
    }


def test_monthly_sales_chronological_not_alphabetical(raw_factory):
    raw = raw_factory(
        [
            ("01-12-2020", "A", "$1", "AA"),
            ("01-02-2021", "A", "$2", "AA"),
            ("01-01-2021", "A", "$3", "AA"),
            ("05-12-2020", "A", "$4", "AA"),
        ]
    )
    monthly = monthly_sales(_valid(raw))
    assert monthly["month_label"].tolist() == ["Dec 2020", "Jan 2021", "Feb 2021"]
    assert monthly["summed_sales"].tolist() == [Decimal("5"), Decimal("3"), Decimal("2")]


def test_product_sales(scenario_a_raw):
    products = product_sales(_valid(scenario_a_raw)).set_index("product")
    assert products.loc["Widget", "summed_sales"] == Decimal("30")
    assert products.loc["Gadget", "summed_sales"] == Decimal("5")


def test_state_customer_counts_sorted(raw_factory):
    raw = raw_factory(
        [
            ("01-01-2021", "A", "$1", "CC"),
            ("02-01-2021", "A", "$1", "BB"),
            ("03-01-2021", "A", "$1", "AA"),
            ("04-01-2021", "A", "$1", "CC"),
            ("05-01-2021", "A", "$1", "BB"),
            ("06-01-2021", "A", "$1", "DD"),
        ]
    )
    counts = state_customer_counts(_valid(raw))
    assert list(counts.columns) == ["state_code", "customer_count"]
    assert counts["state_code"].tolist() == ["BB", "CC", "AA", "DD"]
    assert counts["customer_count"].tolist() == [2, 2, 1, 1]


def test_groupings_agree_on_total(messy_raw, scenario_a_raw):
    for raw in (messy_raw, scenario_a_raw):
        valid = _valid(raw)
        total = decimal_sum(valid["total_sales"])
        assert decimal_sum(monthly_sales(valid)["summed_sales"]) == total
        assert decimal_sum(product_sales(valid)["summed_sales"]) == total
        assert state_customer_counts(valid)["customer_count"].sum() == len(valid)


def test_aggregates_of_empty_set(empty_raw):
    valid = _valid(empty_raw)
    assert monthly_sales(valid).empty
    assert list(monthly_sales(valid).columns) == ["month_label", "summed_sales"]
    assert product_sales(valid).empty
    counts = state_customer_counts(valid)
    assert counts.empty
    assert list(counts.columns) == ["state_code", "customer_count"]


def test_aggregation_does_not_mutate_input(scenario_a_raw):
    valid = _valid(scenario_a_raw)
    before = valid.copy()
    monthly_sales(valid)
    product_sales(valid)
    state_customer_counts(valid)
    pd.testing.assert_frame_equal(valid, before)
