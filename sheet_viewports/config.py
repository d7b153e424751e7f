"""
Configuration for sheet/viewport listing.

Defines the Config class with the knobs for viewport resolution, report
output and the sheet set benchmark.
"""

VIEWPORT_STRATEGIES = ("name_filter", "sheet_viewports", "auto")
BENCHMARK_METHODS = ("views_property", "ordered_view_list")


class Config:
    """Configuration for sheet/viewport listing.

    Attributes:
        viewport_strategy (str): How a (sheet, view) pair is mapped to its viewport
            "name_filter" => query OST_Viewports by VIEW_NAME, disambiguate by OwnerViewId
            "sheet_viewports" => scan sheet.GetAllViewports() for a matching ViewId
            "auto" => name_filter, falling back to sheet_viewports
            Default: "name_filter"
        include_placeholder_sheets (bool): Include placeholder sheets (default: True)
        compute_viewport_bbox (bool): Read viewport bounding box in the active view (default: True)
        run_benchmark (bool): Entry point runs the sheet set benchmark instead of the listing (default: False)
        benchmark_method (str): "views_property" or "ordered_view_list" (default: "views_property")
        benchmark_set_name (str): Only time the sheet set with this name (default: None = all)
        benchmark_compare_methods (bool): Time both listing methods side by side (default: False)
        logger_echo (bool): Print report lines as well as keeping them (default: False)
        max_diag_events (int): Cap on stored diagnostic events (default: 200)
        csv_output_dir (str): Default directory for CSV export (default: None)

    Commentary:
        ⚠ "sheet_viewports" needs Viewport.ViewId, which is not exposed by very old hosts
        ⚠ "ordered_view_list" needs Revit 2023+

    Example:
        >>> cfg = Config()
        >>> cfg.viewport_strategy
        'name_filter'
        >>> cfg.include_placeholder_sheets
        True
    """

    def __init__(
        self,
        viewport_strategy="name_filter",
        include_placeholder_sheets=True,
        compute_viewport_bbox=True,
        # Sheet set benchmark
        run_benchmark=False,
        benchmark_method="views_property",
        benchmark_set_name=None,
        benchmark_compare_methods=False,
        # Logging and diagnostics
        logger_echo=False,
        max_diag_events=200,
        # Export
        csv_output_dir=None,
    ):
        self.viewport_strategy = str(viewport_strategy)
        self.include_placeholder_sheets = bool(include_placeholder_sheets)
        self.compute_viewport_bbox = bool(compute_viewport_bbox)

        self.run_benchmark = bool(run_benchmark)
        self.benchmark_method = str(benchmark_method)
        self.benchmark_set_name = benchmark_set_name
        self.benchmark_compare_methods = bool(benchmark_compare_methods)

        self.logger_echo = bool(logger_echo)
        self.max_diag_events = int(max_diag_events)

        self.csv_output_dir = csv_output_dir

        # Validate
        if self.viewport_strategy not in VIEWPORT_STRATEGIES:
            raise ValueError(
                "viewport_strategy must be one of {}".format(", ".join(VIEWPORT_STRATEGIES))
            )
        if self.benchmark_method not in BENCHMARK_METHODS:
            raise ValueError(
                "benchmark_method must be one of {}".format(", ".join(BENCHMARK_METHODS))
            )
        if self.benchmark_set_name is not None and not str(self.benchmark_set_name).strip():
            raise ValueError("benchmark_set_name must be non-empty or None")
        if self.max_diag_events <= 0:
            raise ValueError("max_diag_events must be positive")

    def __repr__(self):
        return (
            f"Config(viewport_strategy='{self.viewport_strategy}', "
            f"include_placeholder_sheets={self.include_placeholder_sheets}, "
            f"compute_viewport_bbox={self.compute_viewport_bbox}, "
            f"run_benchmark={self.run_benchmark}, "
            f"benchmark_method='{self.benchmark_method}', "
            f"benchmark_set_name={self.benchmark_set_name!r}, "
            f"benchmark_compare_methods={self.benchmark_compare_methods}, "
            f"logger_echo={self.logger_echo}, "
            f"max_diag_events={self.max_diag_events}, "
            f"csv_output_dir={self.csv_output_dir!r})"
        )

    def to_dict(self):
        """Export configuration as dictionary for JSON serialization."""
        return {
            "viewport_strategy": self.viewport_strategy,
            "include_placeholder_sheets": self.include_placeholder_sheets,
            "compute_viewport_bbox": self.compute_viewport_bbox,
            "run_benchmark": self.run_benchmark,
            "benchmark_method": self.benchmark_method,
            "benchmark_set_name": self.benchmark_set_name,
            "benchmark_compare_methods": self.benchmark_compare_methods,
            "logger_echo": self.logger_echo,
            "max_diag_events": self.max_diag_events,
            "csv_output_dir": self.csv_output_dir,
        }

    @classmethod
    def from_dict(cls, d):
        """Create Config from dictionary (e.g., from JSON)."""
        return cls(
            viewport_strategy=d.get("viewport_strategy", "name_filter"),
            include_placeholder_sheets=d.get("include_placeholder_sheets", True),
            compute_viewport_bbox=d.get("compute_viewport_bbox", True),
            run_benchmark=d.get("run_benchmark", False),
            benchmark_method=d.get("benchmark_method", "views_property"),
            benchmark_set_name=d.get("benchmark_set_name"),
            benchmark_compare_methods=d.get("benchmark_compare_methods", False),
            logger_echo=d.get("logger_echo", False),
            max_diag_events=d.get("max_diag_events", 200),
            csv_output_dir=d.get("csv_output_dir"),
        )
