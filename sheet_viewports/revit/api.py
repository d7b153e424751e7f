"""
Access point for the Revit host API.

All modules fetch ``Autodesk.Revit.DB`` through :func:`get_db` instead of
importing it at module scope, so the package imports cleanly outside Revit
and tests can substitute a fake namespace.
"""

INVALID_ID_VALUE = -1


def get_db():
    """Return the ``Autodesk.Revit.DB`` namespace.

    Raises:
        ImportError: If not running inside a Revit Python host
    """
    from Autodesk.Revit import DB

    return DB


def element_id_int(eid):
    """Integer value of an ElementId (or int), None if unavailable.

    Revit 2024+ exposes ``ElementId.Value``; older versions only
    ``IntegerValue``.
    """
    if eid is None:
        return None
    if isinstance(eid, int):
        return eid

    for attr in ("Value", "IntegerValue"):
        try:
            val = getattr(eid, attr, None)
        except Exception:
            val = None
        if val is not None:
            try:
                return int(val)
            except (TypeError, ValueError):
                continue
    return None


def element_id_of(elem):
    """Integer id of an element, None if it has no readable Id."""
    if elem is None:
        return None
    try:
        return element_id_int(getattr(elem, "Id", None))
    except Exception:
        return None


def is_valid_id(eid):
    """False for None and for ElementId.InvalidElementId."""
    value = element_id_int(eid)
    if value is None:
        return False
    return value != INVALID_ID_VALUE
