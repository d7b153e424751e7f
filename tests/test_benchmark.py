import pytest

from fakes import FakeDoc, View, ViewSheetSet

import sheet_viewports.benchmark as benchmark
from sheet_viewports.benchmark import (
    BenchmarkResult,
    compare_view_listing_methods,
    format_benchmark_report,
    format_comparison_report,
    get_view_sheet_set_views_benchmark,
)
from sheet_viewports.core.diagnostics import Diagnostics


def _doc():
    views = [View(100 + i, "v{}".format(i)) for i in range(5)]
    return FakeDoc([
        ViewSheetSet(1, "Issue 01", views[:3]),
        ViewSheetSet(2, "Tender", views),
        ViewSheetSet(3, "Empty", []),
    ])


def test_views_property_counts_every_set(fake_db):
    result = get_view_sheet_set_views_benchmark(_doc())
    assert result.method == "views_property"
    assert result.set_counts == [("Issue 01", 3), ("Tender", 5), ("Empty", 0)]
    assert result.elapsed_s >= 0.0


def test_named_set_only(fake_db):
    result = get_view_sheet_set_views_benchmark(_doc(), method="ordered_view_list", set_name="Tender")
    assert result.set_counts == [("Tender", 5)]


def test_unknown_method_raises(fake_db):
    with pytest.raises(ValueError):
        get_view_sheet_set_views_benchmark(_doc(), method="guess")


def test_failing_set_is_recorded_and_counted_as_unknown(fake_db):
    class BrokenSet(ViewSheetSet):
        @property
        def OrderedViewList(self):
            raise AttributeError("OrderedViewList needs Revit 2023")

    doc = FakeDoc([BrokenSet(1, "Old", [])])
    diag = Diagnostics()

    result = get_view_sheet_set_views_benchmark(doc, method="ordered_view_list", diag=diag)

    assert result.set_counts == [("Old", None)]
    assert diag.to_dict()["events"][0]["exc_type"] == "AttributeError"
    assert "Old has ? views." in format_benchmark_report(result)


def test_report_text():
    result = BenchmarkResult("views_property", [("Issue 01", 3), ("Tender", 5)], 1.5)
    assert format_benchmark_report(result) == (
        "Total of 2 sheet sets in this project.\n"
        "\n"
        "Issue 01 has 3 views.\n"
        "Tender has 5 views.\n"
        "\n"
        "Operation completed in 1.5 seconds.\n"
        "Average of 750.0 ms per loop iteration."
    )


def test_report_with_no_sets_does_not_divide_by_zero():
    result = BenchmarkResult("views_property", [], 0.0)
    assert result.average_ms is None
    assert format_benchmark_report(result).endswith("Average of n/a ms per loop iteration.")


def test_compare_methods(fake_db, monkeypatch):
    ticks = iter([0.0, 2.0, 10.0, 11.0])
    monkeypatch.setattr(benchmark, "_clock", lambda: next(ticks))

    comparison = compare_view_listing_methods(_doc())

    assert comparison["counts_agree"] is True
    assert comparison["views_property"]["elapsed_s"] == 2.0
    assert comparison["ordered_view_list"]["elapsed_s"] == 1.0
    assert comparison["faster"] == "ordered_view_list"
    assert "View counts agree: yes" in format_comparison_report(comparison)
