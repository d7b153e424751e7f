"""
In-Revit smoke test for sheet / viewport listing.

Run from a Dynamo CPython3 node with SHEETVP_RUN_DYNAMO_TESTS=1 and the
repo on sys.path. Uses the document that is open in Revit.
"""

from sheet_viewports.config import Config
from sheet_viewports.entry_dynamo import get_current_document, run_list_views, run_sheet_set_benchmark


def test_every_placed_view_resolves_a_viewport():
    doc = get_current_document()
    result = run_list_views(doc, Config(viewport_strategy="name_filter"))

    assert result["success"], result["errors"]
    assert result["summary"]["num_viewports_unresolved"] == 0, result["diagnostics"]["events"]


def test_name_filter_and_sheet_viewports_agree():
    doc = get_current_document()
    a = run_list_views(doc, Config(viewport_strategy="name_filter"))
    b = run_list_views(doc, Config(viewport_strategy="sheet_viewports"))

    assert a["map"]["view_to_viewport"] == b["map"]["view_to_viewport"]


def test_sheet_set_benchmark_runs():
    doc = get_current_document()
    result = run_sheet_set_benchmark(doc, Config(run_benchmark=True))
    assert result["success"], result["errors"]
    assert result["report"].startswith("Total of ")
