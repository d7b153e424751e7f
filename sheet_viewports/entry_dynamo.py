"""
Dynamo entry point for sheet / viewport listing.

Compatible with both IronPython (Dynamo 2.x) and CPython3 (Dynamo 3.3+).

Usage in Dynamo CPython3 (3.3+):
    import sys
    sys.path.append(r'C:\\path\\to\\sheet_viewports_repo')

    from sheet_viewports.entry_dynamo import run_list_views, get_current_document
    from sheet_viewports.config import Config

    doc = get_current_document()
    cfg = Config(viewport_strategy="auto")

    OUT = run_list_views(doc, cfg)

Benchmark of sheet set view listing:
    cfg = Config(run_benchmark=True, benchmark_compare_methods=True)
    OUT = run_sheet_set_benchmark(doc, cfg)["report"]
"""

try:
    from .benchmark import (
        compare_view_listing_methods,
        format_benchmark_report,
        format_comparison_report,
        get_view_sheet_set_views_benchmark,
    )
    from .config import Config
    from .core.diagnostics import Diagnostics
    from .csv_export import export_mapping_to_csv
    from .debug import Logger
    from .pipeline import process_sheets
except ImportError:
    # Dynamo sometimes imports modules without package context; fall back to absolute.
    from sheet_viewports.benchmark import (
        compare_view_listing_methods,
        format_benchmark_report,
        format_comparison_report,
        get_view_sheet_set_views_benchmark,
    )
    from sheet_viewports.config import Config
    from sheet_viewports.core.diagnostics import Diagnostics
    from sheet_viewports.csv_export import export_mapping_to_csv
    from sheet_viewports.debug import Logger
    from sheet_viewports.pipeline import process_sheets


# ============================================================
# REVIT CONTEXT HELPERS (CPython3-compatible)
# ============================================================


def get_current_document():
    """Get current Revit document (works in both IronPython and CPython3).

    Raises:
        RuntimeError: If not running in Revit/Dynamo context
    """
    try:
        from RevitServices.Persistence import DocumentManager

        doc = DocumentManager.Instance.CurrentDBDocument
        if doc is not None:
            return doc
    except ImportError:
        pass

    try:
        return __revit__.ActiveUIDocument.Document
    except NameError:
        pass

    raise RuntimeError(
        "Not running in Revit/Dynamo context. "
        "Use get_current_document() in Dynamo Python node, "
        "or pass Document directly to run_list_views()."
    )


def get_current_view():
    """Get current active view (works in both IronPython and CPython3).

    Raises:
        RuntimeError: If not running in Revit/Dynamo context
    """
    try:
        from RevitServices.Persistence import DocumentManager

        doc = DocumentManager.Instance.CurrentDBDocument
        if doc is not None and doc.ActiveView is not None:
            return doc.ActiveView
    except (ImportError, AttributeError):
        pass

    try:
        return __revit__.ActiveUIDocument.ActiveView
    except NameError:
        pass

    raise RuntimeError(
        "Not running in Revit/Dynamo context. "
        "Pass the document explicitly."
    )


def _failure(cfg, message):
    return {
        "success": False,
        "sheets": [],
        "map": {},
        "config": cfg.to_dict() if cfg is not None else {},
        "errors": [message],
        "summary": {},
        "log": [],
    }


def run_list_views(doc, cfg=None):
    """List sheets, placed views and their viewports.

    Args:
        doc: Revit Document
        cfg: Config object (optional, uses defaults if None)

    Returns:
        process_sheets() result plus 'config', 'log' (timestamped lines)
        and 'report' (the listing as plain text)
    """
    if cfg is None:
        cfg = Config()
    if doc is None:
        return _failure(cfg, "doc is None")

    diag = Diagnostics(max_events=cfg.max_diag_events)
    logger = Logger(enabled=cfg.logger_echo)

    try:
        result = process_sheets(doc, cfg, diag=diag, logger=logger)
    except Exception as e:
        result = _failure(cfg, "Pipeline error: {}".format(e))
        result["diagnostics"] = diag.to_dict()

    result["config"] = cfg.to_dict()
    result["log"] = logger.dump()
    result["report"] = logger.report()
    return result


def run_sheet_set_benchmark(doc, cfg=None):
    """Time listing the views of every sheet set.

    Returns:
        Dictionary with:
        {
            'success': bool,
            'report': str (text shown to the user),
            'benchmark': raw numbers,
            'errors': list,
        }
    """
    if cfg is None:
        cfg = Config(run_benchmark=True)
    if doc is None:
        return {"success": False, "report": "", "benchmark": {}, "errors": ["doc is None"]}

    diag = Diagnostics(max_events=cfg.max_diag_events)

    try:
        if cfg.benchmark_compare_methods:
            comparison = compare_view_listing_methods(doc, set_name=cfg.benchmark_set_name, diag=diag)
            report = format_comparison_report(comparison)
            raw = comparison
        else:
            result = get_view_sheet_set_views_benchmark(
                doc, method=cfg.benchmark_method, set_name=cfg.benchmark_set_name, diag=diag
            )
            report = format_benchmark_report(result)
            raw = result.to_dict()
    except Exception as e:
        return {
            "success": False,
            "report": "",
            "benchmark": {},
            "errors": ["Benchmark error: {}".format(e)],
            "diagnostics": diag.to_dict(),
        }

    return {
        "success": True,
        "report": report,
        "benchmark": raw,
        "errors": [],
        "diagnostics": diag.to_dict(),
    }


def run(doc, cfg=None):
    """Single Dynamo entry: benchmark when cfg.run_benchmark, listing otherwise."""
    if cfg is None:
        cfg = Config()
    if cfg.run_benchmark:
        return run_sheet_set_benchmark(doc, cfg)
    return run_list_views(doc, cfg)


def run_list_views_with_csv(doc, cfg=None, output_dir=None):
    """List views and append the result to the dated mapping CSV.

    Args:
        doc: Revit Document
        cfg: Config object (optional)
        output_dir: Directory for the CSV (default: cfg.csv_output_dir or C:\\temp\\sheet_viewports)

    Returns:
        run_list_views() result plus 'csv_path', 'rows_exported' and
        'export_diagnostics'. A failed export sets success False.
    """
    if cfg is None:
        cfg = Config()

    if output_dir is None:
        output_dir = cfg.csv_output_dir or r"C:\temp\sheet_viewports"

    result = run_list_views(doc, cfg)

    logger = Logger(enabled=cfg.logger_echo)
    diag = Diagnostics(max_events=cfg.max_diag_events)
    try:
        export_info = export_mapping_to_csv(result, output_dir, logger=logger, diag=diag)
        if export_info["csv_path"] is None:
            result["errors"].append(
                "CSV export error: could not create directory '{}'".format(output_dir)
            )
            result["success"] = False
    except Exception as e:
        result["errors"].append("CSV export error: {}".format(e))
        result["success"] = False
        export_info = {"csv_path": None, "rows_exported": 0}

    result.update(export_info)
    result["export_diagnostics"] = diag.to_dict()
    result["log"] = list(result.get("log", [])) + logger.dump()
    return result
