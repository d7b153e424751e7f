from fakes import FakeDoc, FakeId, View, ViewSheet, ViewSheetSet, make_project

from sheet_viewports.core.diagnostics import Diagnostics
from sheet_viewports.revit.collection import collect_sheet_sets, collect_sheets, get_placed_view_ids


def test_collect_sheets_returns_only_sheets(fake_db):
    doc, p = make_project()
    ids = [s.Id.IntegerValue for s in collect_sheets(doc)]
    assert ids == [10, 11, 12]


def test_collect_sheets_can_skip_placeholders(fake_db):
    doc, p = make_project()
    ids = [s.Id.IntegerValue for s in collect_sheets(doc, include_placeholders=False)]
    assert ids == [10, 11]


def test_collect_sheets_collector_failure_is_recorded(fake_db, monkeypatch):
    def broken(doc):
        raise RuntimeError("no document")

    monkeypatch.setattr(fake_db, "FilteredElementCollector", broken)
    diag = Diagnostics()

    assert collect_sheets(object(), diag=diag) == []
    assert diag.to_dict()["events"][0]["callsite"] == "collect_sheets.collector"


def test_placed_view_ids_from_get_all_placed_views():
    sheet = ViewSheet(10, "Plans", "A101", placed_view_ids=[100, 101])
    assert get_placed_view_ids(sheet) == [FakeId(100), FakeId(101)]


def test_placed_view_ids_legacy_views_collection():
    class LegacySheet:
        Id = FakeId(10)
        Views = [View(100, "a"), View(101, "b")]

    assert get_placed_view_ids(LegacySheet()) == [FakeId(100), FakeId(101)]


def test_placed_view_ids_falls_back_when_new_api_throws():
    class FlakySheet:
        Id = FakeId(10)
        Views = [View(100, "a")]

        def GetAllPlacedViews(self):
            raise RuntimeError("boom")

    diag = Diagnostics()
    assert get_placed_view_ids(FlakySheet(), diag=diag) == [FakeId(100)]
    assert diag.to_dict()["events"][0]["sheet_id"] == 10


def test_collect_sheet_sets(fake_db):
    doc = FakeDoc([ViewSheetSet(1, "Issue", []), ViewSheet(10, "Plans", "A101")])
    assert [s.Name for s in collect_sheet_sets(doc)] == ["Issue"]
