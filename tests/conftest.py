# tests/conftest.py

import os
from pathlib import Path

import pytest

from fakes import make_fake_db


def pytest_ignore_collect(collection_path: Path, config):
    """
    Prevent collection of Dynamo/Revit integration tests unless explicitly enabled.

    Enable by setting:
        SHEETVP_RUN_DYNAMO_TESTS=1
    """
    run_dynamo = os.environ.get("SHEETVP_RUN_DYNAMO_TESTS", "").strip() == "1"
    if run_dynamo:
        return False

    p = str(collection_path).replace("\\", "/")
    return "/tests/dynamo/" in p


@pytest.fixture
def fake_db(monkeypatch):
    """Patch the Revit API seam with an in-memory fake DB namespace."""
    import sheet_viewports.revit.api as api

    db = make_fake_db()
    monkeypatch.setattr(api, "get_db", lambda: db)
    return db


@pytest.fixture
def legacy_fake_db(monkeypatch):
    """Fake DB whose FilterStringRule only accepts the pre-2022 signature."""
    import sheet_viewports.revit.api as api

    db = make_fake_db(legacy_string_rule=True)
    monkeypatch.setattr(api, "get_db", lambda: db)
    return db
