import os

from tools.check_sources import check_source, scan

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def test_package_has_no_disallowed_patterns():
    hits = scan(["sheet_viewports", "dynamo_thinloader.py"], set(), root=ROOT)
    assert not hits, "\n".join("{}:{} [{}] {}".format(h.path, h.lineno, h.rule, h.detail) for h in hits)


def test_bare_except_is_flagged():
    src = "try:\n    pass\nexcept:\n    pass\n"
    hits = check_source(src, "sheet_viewports/x.py")
    assert [(h.rule, h.lineno) for h in hits] == [("bare-except", 3)]


def test_host_import_only_allowed_in_api_module():
    src = "def f():\n    from Autodesk.Revit import DB\n    import RevitServices\n"
    assert [h.rule for h in check_source(src, "sheet_viewports/pipeline.py")] == ["host-import", "host-import"]
    assert check_source(src, "sheet_viewports/revit/api.py") == []
