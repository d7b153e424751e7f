"""
Sheet set view listing benchmark.

Times how long it takes to list the views of every ViewSheetSet. Reading
ViewSheetSet.Views is slow on large projects (around 1.5 s on the Revit
structural sample), so two listing methods can be compared.
"""

import time

from .revit import api
from .revit.collection import collect_sheet_sets
from .revit.safe_api import safe_call

# Wall clock used for the timed loop
_clock = time.perf_counter

METHOD_VIEWS_PROPERTY = "views_property"
METHOD_ORDERED_VIEW_LIST = "ordered_view_list"


class BenchmarkResult:
    """Timing of one listing method over a group of sheet sets.

    Attributes:
        method: Listing method name
        set_counts: list of (sheet set name, number of views)
        elapsed_s: Wall time of the listing loop in seconds
    """

    def __init__(self, method, set_counts, elapsed_s):
        self.method = method
        self.set_counts = list(set_counts)
        self.elapsed_s = float(elapsed_s)

    @property
    def num_sets(self):
        return len(self.set_counts)

    @property
    def average_ms(self):
        """Milliseconds per loop iteration, None when there were no sets."""
        if not self.set_counts:
            return None
        return self.elapsed_s * 1000.0 / len(self.set_counts)

    def to_dict(self):
        return {
            "method": self.method,
            "num_sets": self.num_sets,
            "set_counts": [[name, n] for name, n in self.set_counts],
            "elapsed_s": self.elapsed_s,
            "average_ms": self.average_ms,
        }


def _count_views(sheet_set, method):
    if method == METHOD_VIEWS_PROPERTY:
        views = sheet_set.Views
        size = getattr(views, "Size", None)
        return int(size) if size is not None else len(list(views))
    if method == METHOD_ORDERED_VIEW_LIST:
        # Revit 2023+
        return len(list(sheet_set.OrderedViewList))
    raise ValueError("Unknown benchmark method: {}".format(method))


def get_view_sheet_set_views_benchmark(doc, method=METHOD_VIEWS_PROPERTY, set_name=None, diag=None):
    """Count the views of every sheet set (or only set_name) and time it.

    Returns:
        BenchmarkResult
    """
    if method not in (METHOD_VIEWS_PROPERTY, METHOD_ORDERED_VIEW_LIST):
        raise ValueError("Unknown benchmark method: {}".format(method))

    sheet_sets = collect_sheet_sets(doc, diag=diag)
    if set_name is not None:
        sheet_sets = [s for s in sheet_sets if getattr(s, "Name", None) == set_name]

    set_counts = []
    t0 = _clock()
    for sheet_set in sheet_sets:
        name = getattr(sheet_set, "Name", None)
        n = safe_call(
            diag,
            phase="benchmark",
            callsite="sheet_set.{}".format(method),
            fn=lambda: _count_views(sheet_set, method),
            default=None,
            context={"sheet_set": name, "sheet_set_id": api.element_id_of(sheet_set)},
        )
        set_counts.append((name, n))
    t1 = _clock()

    return BenchmarkResult(method, set_counts, t1 - t0)


def format_benchmark_report(result):
    """Text report in the form shown to the user after a benchmark run."""
    lines = ["Total of {0} sheet sets in this project.".format(result.num_sets), ""]
    for name, n in result.set_counts:
        views = "?" if n is None else str(n)
        lines.append("{0} has {1} views.".format(name, views))

    avg = result.average_ms
    lines.append("")
    lines.append("Operation completed in {0} seconds.".format(round(result.elapsed_s, 3)))
    lines.append("Average of {0} ms per loop iteration.".format("n/a" if avg is None else round(avg, 3)))
    return "\n".join(lines)


def compare_view_listing_methods(doc, set_name=None, diag=None):
    """Run both listing methods and report timings and count agreement.

    Returns:
        Dictionary with:
        {
            'views_property': BenchmarkResult.to_dict(),
            'ordered_view_list': BenchmarkResult.to_dict(),
            'counts_agree': bool,
            'faster': method name or None,
        }
    """
    a = get_view_sheet_set_views_benchmark(doc, METHOD_VIEWS_PROPERTY, set_name=set_name, diag=diag)
    b = get_view_sheet_set_views_benchmark(doc, METHOD_ORDERED_VIEW_LIST, set_name=set_name, diag=diag)

    faster = None
    if a.num_sets:
        faster = METHOD_VIEWS_PROPERTY if a.elapsed_s <= b.elapsed_s else METHOD_ORDERED_VIEW_LIST

    return {
        METHOD_VIEWS_PROPERTY: a.to_dict(),
        METHOD_ORDERED_VIEW_LIST: b.to_dict(),
        "counts_agree": a.set_counts == b.set_counts,
        "faster": faster,
    }


def format_comparison_report(comparison):
    lines = []
    for method in (METHOD_VIEWS_PROPERTY, METHOD_ORDERED_VIEW_LIST):
        r = comparison[method]
        lines.append("{0}: {1} sheet sets in {2} seconds.".format(
            method, r["num_sets"], round(r["elapsed_s"], 3)
        ))
    lines.append("View counts agree: {0}".format("yes" if comparison["counts_agree"] else "no"))
    if comparison["faster"]:
        lines.append("Faster: {0}".format(comparison["faster"]))
    return "\n".join(lines)
