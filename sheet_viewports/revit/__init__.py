"""
Revit-specific queries for sheet / viewport listing.

Modules:
- api: Host API access seam and ElementId helpers
- safe_api: Observable wrapper for host calls
- collection: Sheet, placed view and sheet set collection
- viewports: Viewport resolution for placed views
"""

from .collection import collect_sheets, get_placed_view_ids, collect_sheet_sets
from .viewports import resolve_viewport, select_viewport, ViewportResolution

__all__ = [
    "collect_sheets",
    "get_placed_view_ids",
    "collect_sheet_sets",
    "resolve_viewport",
    "select_viewport",
    "ViewportResolution",
]
