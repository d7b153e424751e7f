"""
Sheet, placed view and sheet set collection.

Thin wrappers over FilteredElementCollector that report host failures to
diagnostics instead of raising.
"""

from . import api
from .safe_api import safe_call


def collect_sheets(doc, diag=None, include_placeholders=True):
    """Collect all ViewSheet elements in the document.

    Args:
        doc: Revit Document
        diag: Diagnostics (optional)
        include_placeholders: Keep placeholder sheets (no title block, no views)

    Returns:
        List[ViewSheet]
    """
    DB = api.get_db()

    try:
        collector = DB.FilteredElementCollector(doc).OfClass(DB.ViewSheet)
        sheets = list(collector)
    except Exception as e:
        if diag is not None:
            diag.error(
                phase="collection",
                callsite="collect_sheets.collector",
                message="Sheet collector failed; returning empty list",
                exc=e,
            )
        return []

    if include_placeholders:
        return sheets

    kept = []
    for sheet in sheets:
        is_placeholder = safe_call(
            diag,
            phase="collection",
            callsite="sheet.IsPlaceholder",
            fn=lambda: bool(getattr(sheet, "IsPlaceholder", False)),
            default=False,
            context={"sheet_id": api.element_id_of(sheet)},
        )
        if not is_placeholder:
            kept.append(sheet)
    return kept


def get_placed_view_ids(sheet, diag=None):
    """Return the ElementIds of all views placed on a sheet.

    Semantics:
        - Prefer sheet.GetAllPlacedViews() (Revit 2015+)
        - Fall back to the legacy sheet.Views ViewSet
        - If neither is available, return []
    """
    sheet_id = api.element_id_of(sheet)

    if hasattr(sheet, "GetAllPlacedViews"):
        ids = safe_call(
            diag,
            phase="collection",
            callsite="sheet.GetAllPlacedViews",
            fn=lambda: list(sheet.GetAllPlacedViews()),
            default=None,
            context={"sheet_id": sheet_id},
        )
        if ids is not None:
            return ids

    views = safe_call(
        diag,
        phase="collection",
        callsite="sheet.Views",
        fn=lambda: list(getattr(sheet, "Views", None) or []),
        default=[],
        context={"sheet_id": sheet_id},
    )
    return [v.Id for v in views if getattr(v, "Id", None) is not None]


def collect_sheet_sets(doc, diag=None):
    """Collect all ViewSheetSet elements (saved print sets)."""
    DB = api.get_db()

    try:
        return list(DB.FilteredElementCollector(doc).OfClass(DB.ViewSheetSet))
    except Exception as e:
        if diag is not None:
            diag.error(
                phase="collection",
                callsite="collect_sheet_sets.collector",
                message="Sheet set collector failed; returning empty list",
                exc=e,
            )
        return []
