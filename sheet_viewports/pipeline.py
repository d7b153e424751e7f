"""
Sheet / placed view / viewport listing.

Walks every sheet in a document, resolves the viewport of every placed view
and records the associations in a SheetViewMap.
"""

from .config import Config
from .core.diagnostics import Diagnostics
from .core.formatting import bounding_box_string, element_description, plural_suffix
from .core.sheet_map import SheetViewMap
from .debug import Logger
from .revit import api
from .revit.collection import collect_sheets, get_placed_view_ids
from .revit.safe_api import safe_call
from .revit.viewports import resolve_viewport


def _active_view(doc, diag):
    return safe_call(
        diag,
        phase="pipeline",
        callsite="doc.ActiveView",
        fn=lambda: getattr(doc, "ActiveView", None),
        default=None,
    )


def process_view(doc, sheet, view, index, active_view, cfg, diag):
    """Resolve one placed view. Returns (view_record, resolution)."""
    sheet_id = api.element_id_of(sheet)
    view_id = api.element_id_of(view)
    ctx = {"sheet_id": sheet_id, "view_id": view_id}

    resolution = resolve_viewport(sheet, view, diag=diag, strategy=cfg.viewport_strategy)

    # Null if the viewport is not visible in the active view
    bb = None
    if cfg.compute_viewport_bbox and resolution.resolved and active_view is not None:
        bb = safe_call(
            diag,
            phase="pipeline",
            callsite="viewport.get_BoundingBox(active_view)",
            fn=lambda: resolution.viewport.get_BoundingBox(active_view),
            default=None,
            context=dict(ctx, viewport_id=resolution.viewport_id),
        )

    outline = safe_call(
        diag,
        phase="pipeline",
        callsite="view.Outline",
        fn=lambda: getattr(view, "Outline", None),
        default=None,
        context=ctx,
    )

    record = {
        "index": index,
        "view_id": view_id,
        "view_name": getattr(view, "Name", None),
        "view_description": element_description(view),
        "viewport_id": resolution.viewport_id,
        "viewport": resolution.to_dict(),
        "bbox": bounding_box_string(bb),
        "outline": bounding_box_string(outline),
    }
    return record, resolution


def process_sheet(doc, sheet, sheet_map, active_view, cfg, diag, logger):
    """Resolve every view placed on one sheet and add it to sheet_map."""
    sheet_id = api.element_id_of(sheet)
    sheet_map.add_sheet(sheet_id)

    view_ids = get_placed_view_ids(sheet, diag=diag)
    n = len(view_ids)
    desc = element_description(sheet)
    logger.info("Sheet {0} contains {1} view{2}: ".format(desc, n, plural_suffix(n)))

    sheet_record = {
        "sheet_id": sheet_id,
        "sheet_number": getattr(sheet, "SheetNumber", None),
        "sheet_name": getattr(sheet, "Name", None),
        "sheet_description": desc,
        "num_views": n,
        "views": [],
    }

    i = 0
    for vid in view_ids:
        view = safe_call(
            diag,
            phase="pipeline",
            callsite="doc.GetElement(view_id)",
            fn=lambda: doc.GetElement(vid),
            default=None,
            context={"sheet_id": sheet_id, "view_id": api.element_id_int(vid)},
        )
        if view is None:
            if diag is not None:
                diag.warn(
                    phase="pipeline",
                    callsite="process_sheet",
                    message="Placed view id did not resolve to an element; skipped",
                    sheet_id=sheet_id,
                    view_id=api.element_id_int(vid),
                )
            continue

        i += 1
        record, resolution = process_view(doc, sheet, view, i, active_view, cfg, diag)

        logger.info("  {0} {1} bb {2} outline {3}".format(
            i, record["view_description"], record["bbox"], record["outline"]
        ))

        if not sheet_map.add(sheet_id, record["view_id"], resolution.viewport_id):
            if diag is not None:
                diag.warn(
                    phase="pipeline",
                    callsite="sheet_map.add",
                    message="View already placed on another sheet",
                    sheet_id=sheet_id,
                    view_id=record["view_id"],
                    extra={"first_sheet_id": sheet_map.sheet_of_view(record["view_id"])},
                )
        sheet_record["views"].append(record)

    return sheet_record


def process_sheets(doc, cfg=None, diag=None, logger=None):
    """List every sheet, its placed views and their viewports.

    Args:
        doc: Revit Document
        cfg: Config (optional, defaults used if None)
        diag: Diagnostics (optional, created if None)
        logger: Logger (optional, created if None)

    Returns:
        Dictionary with results:
        {
            'success': bool,
            'sheets': list of per-sheet records,
            'map': SheetViewMap.to_dict(),
            'summary': dict,
            'errors': list of error messages,
            'diagnostics': Diagnostics.to_dict(),
        }
    """
    if cfg is None:
        cfg = Config()
    if diag is None:
        diag = Diagnostics(max_events=cfg.max_diag_events)
    if logger is None:
        logger = Logger(enabled=cfg.logger_echo)

    sheet_map = SheetViewMap()
    errors = []
    sheet_records = []

    active_view = _active_view(doc, diag)
    sheets = collect_sheets(doc, diag=diag, include_placeholders=cfg.include_placeholder_sheets)

    for sheet in sheets:
        try:
            sheet_records.append(process_sheet(doc, sheet, sheet_map, active_view, cfg, diag, logger))
        except Exception as e:
            sheet_id = api.element_id_of(sheet)
            errors.append("Sheet {0}: {1}".format(sheet_id, e))
            diag.error(
                phase="pipeline",
                callsite="process_sheets.sheet",
                message="Sheet processing failed; continuing",
                exc=e,
                sheet_id=sheet_id,
            )
            logger.error("Sheet {0} failed: {1}".format(sheet_id, e))

    num_views = sum(len(s["views"]) for s in sheet_records)
    num_resolved = sum(1 for s in sheet_records for v in s["views"] if v["viewport_id"] is not None)

    return {
        "success": len(errors) == 0,
        "sheets": sheet_records,
        "map": sheet_map.to_dict(),
        "summary": {
            "num_sheets": len(sheet_records),
            "num_views": num_views,
            "num_viewports_resolved": num_resolved,
            "num_viewports_unresolved": num_views - num_resolved,
            "num_duplicates": len(sheet_map.duplicates),
        },
        "errors": errors,
        "diagnostics": diag.to_dict(),
    }
