"""
Viewport resolution for views placed on sheets.

Querying OST_Viewports by VIEW_NAME does not return one element per placed
view: Revit hands back two candidates sharing the view's name. Only one of
them is owned by a view (its OwnerViewId is the sheet); the other carries
ElementId.InvalidElementId. The functions here pick the owned one by that
predicate, never by position in the collector output.
"""

from . import api
from .safe_api import safe_call

STRATEGY_NAME_FILTER = "name_filter"
STRATEGY_SHEET_VIEWPORTS = "sheet_viewports"
STRATEGY_AUTO = "auto"

REASON_SELECTED = "selected"
REASON_NO_CANDIDATES = "no_candidates"
REASON_NO_VALID_OWNER = "no_valid_owner"
REASON_AMBIGUOUS = "ambiguous"
REASON_NOT_ON_SHEET = "not_on_sheet"


class ViewportResolution:
    """Outcome of resolving one (sheet, view) pair.

    Attributes:
        viewport: Viewport element, or None when unresolved
        strategy: Strategy that produced the outcome
        num_candidates: Elements returned by the name query (0 for sheet_viewports)
        reason: One of the REASON_* constants
    """

    def __init__(self, viewport, strategy, num_candidates=0, reason=REASON_SELECTED):
        self.viewport = viewport
        self.strategy = strategy
        self.num_candidates = int(num_candidates)
        self.reason = reason

    @property
    def resolved(self):
        return self.viewport is not None

    @property
    def viewport_id(self):
        return api.element_id_of(self.viewport)

    def to_dict(self):
        return {
            "viewport_id": self.viewport_id,
            "strategy": self.strategy,
            "num_candidates": self.num_candidates,
            "reason": self.reason,
            "resolved": self.resolved,
        }

    def __repr__(self):
        return "ViewportResolution(viewport_id={}, strategy='{}', num_candidates={}, reason='{}')".format(
            self.viewport_id, self.strategy, self.num_candidates, self.reason
        )


def build_view_name_filter(view_name):
    """ElementParameterFilter matching elements whose VIEW_NAME equals view_name."""
    DB = api.get_db()

    provider = DB.ParameterValueProvider(DB.ElementId(DB.BuiltInParameter.VIEW_NAME))
    evaluator = DB.FilterStringEquals()

    try:
        # Revit 2022+
        rule = DB.FilterStringRule(provider, evaluator, view_name)
    except TypeError:
        # Revit 2021 and older: explicit case-sensitivity argument
        rule = DB.FilterStringRule(provider, evaluator, view_name, True)

    return DB.ElementParameterFilter(rule)


def query_viewport_candidates(doc, view_name, diag=None):
    """All OST_Viewports elements whose VIEW_NAME equals view_name."""
    DB = api.get_db()

    def _query():
        name_filter = build_view_name_filter(view_name)
        collector = (
            DB.FilteredElementCollector(doc)
            .OfCategory(DB.BuiltInCategory.OST_Viewports)
            .WherePasses(name_filter)
        )
        return list(collector.ToElements())

    return safe_call(
        diag,
        phase="viewports",
        callsite="query_viewport_candidates",
        fn=_query,
        default=[],
        context={"view_name": view_name},
    )


def _owner_view_id(elem):
    try:
        return getattr(elem, "OwnerViewId", None)
    except Exception:
        return None


def select_viewport(candidates, sheet_id=None):
    """Pick the viewport among name-query candidates.

    Candidates with an invalid OwnerViewId are dropped. If sheet_id is given,
    only a single remaining candidate owned by that sheet wins; none on the
    sheet is not_on_sheet. Without sheet_id a single remaining candidate
    wins. Anything else is unresolved.

    Args:
        candidates: Elements returned by query_viewport_candidates
        sheet_id: Sheet ElementId or int (optional)

    Returns:
        (viewport or None, reason)
    """
    candidates = [c for c in (candidates or []) if c is not None]
    if not candidates:
        return None, REASON_NO_CANDIDATES

    owned = [c for c in candidates if api.is_valid_id(_owner_view_id(c))]
    if not owned:
        return None, REASON_NO_VALID_OWNER

    sheet_value = api.element_id_int(sheet_id)
    if sheet_value is not None:
        on_sheet = [c for c in owned if api.element_id_int(_owner_view_id(c)) == sheet_value]
        if len(on_sheet) == 1:
            return on_sheet[0], REASON_SELECTED
        if len(on_sheet) > 1:
            return None, REASON_AMBIGUOUS
        # Owned candidates on other sheets belong to another view with this name
        return None, REASON_NOT_ON_SHEET

    if len(owned) == 1:
        return owned[0], REASON_SELECTED

    return None, REASON_AMBIGUOUS


def find_viewport_on_sheet(sheet, view, diag=None):
    """Viewport on sheet whose ViewId is the view's id, or None."""
    view_value = api.element_id_of(view)
    sheet_id = api.element_id_of(sheet)
    if view_value is None:
        return None

    doc = getattr(sheet, "Document", None)
    vp_ids = safe_call(
        diag,
        phase="viewports",
        callsite="sheet.GetAllViewports",
        fn=lambda: list(sheet.GetAllViewports()),
        default=[],
        context={"sheet_id": sheet_id, "view_id": view_value},
    )

    for vp_id in vp_ids:
        vp = safe_call(
            diag,
            phase="viewports",
            callsite="doc.GetElement(viewport_id)",
            fn=lambda: doc.GetElement(vp_id),
            default=None,
            context={"sheet_id": sheet_id, "viewport_id": api.element_id_int(vp_id)},
        )
        if vp is None:
            continue
        if api.element_id_int(getattr(vp, "ViewId", None)) == view_value:
            return vp
    return None


def _resolve_by_name(sheet, view, diag):
    doc = getattr(sheet, "Document", None)
    view_name = getattr(view, "Name", None)
    if doc is None or not view_name:
        return ViewportResolution(None, STRATEGY_NAME_FILTER, 0, REASON_NO_CANDIDATES)

    candidates = query_viewport_candidates(doc, view_name, diag=diag)
    viewport, reason = select_viewport(candidates, sheet_id=getattr(sheet, "Id", None))
    return ViewportResolution(viewport, STRATEGY_NAME_FILTER, len(candidates), reason)


def _resolve_on_sheet(sheet, view, diag):
    viewport = find_viewport_on_sheet(sheet, view, diag=diag)
    reason = REASON_SELECTED if viewport is not None else REASON_NOT_ON_SHEET
    return ViewportResolution(viewport, STRATEGY_SHEET_VIEWPORTS, 0, reason)


def resolve_viewport(sheet, view, diag=None, strategy=STRATEGY_NAME_FILTER):
    """Return the viewport on the given sheet displaying the given view.

    Args:
        sheet: ViewSheet
        view: View placed on the sheet
        diag: Diagnostics (optional)
        strategy: "name_filter" | "sheet_viewports" | "auto"

    Returns:
        ViewportResolution (never None; check .resolved)
    """
    if strategy == STRATEGY_NAME_FILTER:
        resolution = _resolve_by_name(sheet, view, diag)
    elif strategy == STRATEGY_SHEET_VIEWPORTS:
        resolution = _resolve_on_sheet(sheet, view, diag)
    elif strategy == STRATEGY_AUTO:
        resolution = _resolve_by_name(sheet, view, diag)
        if not resolution.resolved:
            resolution = _resolve_on_sheet(sheet, view, diag)
    else:
        raise ValueError("Unknown viewport strategy: {}".format(strategy))

    if not resolution.resolved and diag is not None:
        diag.warn(
            phase="viewports",
            callsite="resolve_viewport",
            message="Viewport not resolved",
            sheet_id=api.element_id_of(sheet),
            view_id=api.element_id_of(view),
            extra=resolution.to_dict(),
        )

    return resolution
