"""
Host-independent data structures for sheet / viewport listing.

Modules:
- sheet_map: SheetViewMap bidirectional lookup tables
- formatting: Report strings for elements and bounding boxes
- diagnostics: Bounded structured event recorder
"""

from .sheet_map import SheetViewMap
from .diagnostics import Diagnostics

__all__ = ["SheetViewMap", "Diagnostics"]
