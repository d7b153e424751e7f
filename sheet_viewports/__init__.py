"""
Sheet / viewport listing for Revit documents.

Enumerates drawing sheets, the views placed on each sheet and the viewport
that shows each placed view, and records the id-to-id associations for
reporting. Also times how long listing the views of each view sheet set
takes.

Modules:
- config: Configuration for viewport strategy, report output and benchmark
- core.sheet_map: SheetViewMap lookup tables
- core.formatting: Element / bounding box report strings
- core.diagnostics: Structured diagnostics recorder
- revit: Host API access, sheet collection and viewport resolution
- pipeline: Sheet walk (process_sheets)
- benchmark: Sheet set view listing timings
- csv_export: Dated CSV export of listing results
- entry_dynamo: Dynamo entry points
"""

__version__ = "1.0.0"

from .config import Config

__all__ = ["Config"]
