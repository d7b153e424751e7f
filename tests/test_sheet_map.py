import json

from sheet_viewports.core.sheet_map import SheetViewMap


def test_add_records_both_directions():
    m = SheetViewMap()
    assert m.add(10, 100, 500) is True
    assert m.add(10, 101, 501) is True
    assert m.add(11, 102) is True

    assert m.views_on_sheet(10) == [100, 101]
    assert m.sheet_of_view(101) == 10
    assert m.viewport_of_view(100) == 500
    assert m.view_of_viewport(501) == 101
    assert m.viewport_of_view(102) is None
    assert m.num_sheets == 2
    assert m.num_views == 3
    assert m.num_viewports == 2


def test_view_on_second_sheet_is_a_duplicate_and_keeps_first_sheet():
    m = SheetViewMap()
    m.add(10, 200, 600)
    assert m.add(11, 200, 601) is False

    assert m.sheet_of_view(200) == 10
    assert m.viewport_of_view(200) == 600
    assert m.views_on_sheet(11) == [200]
    assert m.duplicates == [(200, 10, 11)]
    # The repeat's own viewport still maps back to the view
    assert m.view_of_viewport(600) == 200
    assert m.view_of_viewport(601) == 200
    assert m.num_viewports == 2


def test_empty_sheet_is_listed():
    m = SheetViewMap()
    m.add_sheet(12)
    assert m.sheet_ids() == [12]
    assert m.views_on_sheet(12) == []


def test_to_dict_uses_string_keys_and_serializes():
    m = SheetViewMap()
    m.add(10, 100, 500)
    d = m.to_dict()
    assert d["sheet_to_views"] == {"10": [100]}
    assert d["viewport_to_view"] == {"500": 100}
    json.dumps(d)
