"""
Bidirectional sheet / view / viewport lookup tables.

Only integer element ids are stored; the elements themselves stay owned by
the Revit document.
"""


class SheetViewMap(object):
    """Sheet <-> view and view <-> viewport associations.

    Attributes:
        sheet_to_views: sheet id -> list of view ids, in placement order
        view_to_sheet: view id -> sheet id (first sheet wins)
        view_to_viewport: view id -> viewport id on its first sheet, only for resolved viewports
        viewport_to_view: viewport id -> view id, for every resolved viewport
        duplicates: list of (view_id, first_sheet_id, other_sheet_id)

    Commentary:
        ✔ A regular view sits on at most one sheet
        ⚠ Legends can be placed on several sheets; those repeats go to
          duplicates and keep their first sheet in view_to_sheet
    """

    def __init__(self):
        self.sheet_to_views = {}
        self.view_to_sheet = {}
        self.view_to_viewport = {}
        self.viewport_to_view = {}
        self.duplicates = []

    def add_sheet(self, sheet_id):
        """Register a sheet even when nothing is placed on it."""
        self.sheet_to_views.setdefault(sheet_id, [])

    def add(self, sheet_id, view_id, viewport_id=None):
        """Record that view_id is placed on sheet_id through viewport_id.

        Returns:
            bool: False if the view was already mapped to a different sheet
        """
        views = self.sheet_to_views.setdefault(sheet_id, [])
        if view_id not in views:
            views.append(view_id)

        # Every viewport shows exactly one view, repeats included
        if viewport_id is not None:
            self.viewport_to_view[viewport_id] = view_id

        first_sheet = self.view_to_sheet.get(view_id)
        if first_sheet is not None and first_sheet != sheet_id:
            self.duplicates.append((view_id, first_sheet, sheet_id))
            return False

        self.view_to_sheet[view_id] = sheet_id
        if viewport_id is not None:
            self.view_to_viewport[view_id] = viewport_id
        return True

    def views_on_sheet(self, sheet_id):
        return list(self.sheet_to_views.get(sheet_id, []))

    def sheet_of_view(self, view_id):
        return self.view_to_sheet.get(view_id)

    def viewport_of_view(self, view_id):
        return self.view_to_viewport.get(view_id)

    def view_of_viewport(self, viewport_id):
        return self.viewport_to_view.get(viewport_id)

    def sheet_ids(self):
        return list(self.sheet_to_views.keys())

    @property
    def num_sheets(self):
        return len(self.sheet_to_views)

    @property
    def num_views(self):
        return len(self.view_to_sheet)

    @property
    def num_viewports(self):
        return len(self.viewport_to_view)

    def to_dict(self):
        """JSON-safe copy (string keys)."""
        return {
            "sheet_to_views": {str(k): list(v) for k, v in self.sheet_to_views.items()},
            "view_to_sheet": {str(k): v for k, v in self.view_to_sheet.items()},
            "view_to_viewport": {str(k): v for k, v in self.view_to_viewport.items()},
            "viewport_to_view": {str(k): v for k, v in self.viewport_to_view.items()},
            "duplicates": [list(d) for d in self.duplicates],
        }
