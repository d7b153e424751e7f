"""CSV export of sheet / view / viewport listing results.

One row per placed view, appended to a dated CSV so repeated runs build a
history of the document's sheet layout.
"""

import csv
import os
from datetime import datetime


def get_mapping_csv_header():
    """Get header for the sheet/viewport mapping CSV file."""
    return [
        "Date", "SheetId", "SheetNumber", "SheetName", "Index", "ViewId",
        "ViewName", "ViewportId", "Strategy", "NumCandidates", "Resolved",
        "Reason", "BBox", "Outline",
    ]


def mapping_result_to_rows(result, date_override=None):
    """Flatten a process_sheets() result into CSV rows (lists)."""
    date_str = date_override or datetime.now().strftime("%Y-%m-%d")
    rows = []
    for sheet in result.get("sheets") or []:
        for view in sheet.get("views") or []:
            vp = view.get("viewport") or {}
            rows.append([
                date_str,
                sheet.get("sheet_id"),
                sheet.get("sheet_number"),
                sheet.get("sheet_name"),
                view.get("index"),
                view.get("view_id"),
                view.get("view_name"),
                view.get("viewport_id"),
                vp.get("strategy"),
                vp.get("num_candidates"),
                bool(vp.get("resolved")),
                vp.get("reason"),
                view.get("bbox"),
                view.get("outline"),
            ])
    return rows


def _ensure_dir(path, logger):
    if not path:
        return False
    try:
        if not os.path.isdir(path):
            os.makedirs(path)
        return True
    except OSError as ex:
        if logger is not None:
            logger.warn("Export: could not create directory '{0}': {1}".format(path, ex))
        return False


def _append_csv_rows(path, headers, rows, logger):
    if not rows:
        return 0

    write_header = not os.path.exists(path) or os.path.getsize(path) == 0

    with open(path, "a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        if write_header:
            writer.writerow(headers)
        for r in rows:
            writer.writerow(r)

    if logger is not None:
        logger.info("Export: appended {0} row(s) to '{1}'".format(len(rows), path))
    return len(rows)


def export_mapping_to_csv(result, output_dir, logger=None, diag=None, date_override=None):
    """Append the listing result to sheet_viewports_<date>.csv in output_dir.

    Returns:
        Dictionary with:
        {
            'csv_path': path or None if the directory could not be created,
            'rows_exported': int,
        }
    """
    if not _ensure_dir(output_dir, logger):
        return {"csv_path": None, "rows_exported": 0}

    date_str = date_override or datetime.now().strftime("%Y-%m-%d")
    csv_path = os.path.join(output_dir, "sheet_viewports_{0}.csv".format(date_str))
    rows = mapping_result_to_rows(result, date_override=date_str)

    try:
        n = _append_csv_rows(csv_path, get_mapping_csv_header(), rows, logger)
    except Exception as e:
        if diag is not None:
            diag.error(
                phase="export_csv",
                callsite="export_mapping_to_csv.write",
                message="Failed to write CSV file",
                exc=e,
                extra={"output_dir": output_dir},
            )
        raise

    return {"csv_path": csv_path, "rows_exported": n}
