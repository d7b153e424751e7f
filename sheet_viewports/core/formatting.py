"""Report formatting for sheets, views, viewports and their bounding boxes."""

from ..revit.api import element_id_of

NULL_STRING = "<null>"


def plural_suffix(n):
    """'' for exactly one item, 's' otherwise."""
    return "" if n == 1 else "s"


def real_string(x):
    """Format a length with at most two decimals and no trailing zeros.

    >>> real_string(1.5)
    '1.5'
    >>> real_string(2.0)
    '2'
    """
    s = "{0:.2f}".format(float(x)).rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s


def point_string(p):
    """'(x,y,z)' for XYZ points, '(u,v)' for UV points."""
    if p is None:
        return NULL_STRING

    z = getattr(p, "Z", None)
    if z is not None:
        return "({0},{1},{2})".format(real_string(p.X), real_string(p.Y), real_string(z))

    # UV points expose U/V; fall back to X/Y for 2D XYZ-like objects
    u = getattr(p, "U", None)
    v = getattr(p, "V", None)
    if u is None or v is None:
        u = getattr(p, "X")
        v = getattr(p, "Y")
    return "({0},{1})".format(real_string(u), real_string(v))


def bounding_box_string(bb):
    """'(min,max)' for BoundingBoxXYZ or BoundingBoxUV, '<null>' for None."""
    if bb is None:
        return NULL_STRING
    return "({0},{1})".format(point_string(bb.Min), point_string(bb.Max))


def _category_name(e):
    try:
        cat = getattr(e, "Category", None)
        return getattr(cat, "Name", None) if cat is not None else None
    except Exception:
        return None


def element_description(e):
    """Short human-readable element label: 'ViewSheet Sheets <123 A101 - Plan>'."""
    if e is None:
        return NULL_STRING

    type_name = type(e).__name__
    category = _category_name(e)
    category = "{} ".format(category) if category else ""

    try:
        name = getattr(e, "Name", None)
    except Exception:
        name = None

    eid = element_id_of(e)
    return "{0} {1}<{2} {3}>".format(
        type_name,
        category,
        eid if eid is not None else "?",
        name if name is not None else "",
    ).rstrip()
