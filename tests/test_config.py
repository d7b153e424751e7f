import pytest

from sheet_viewports.config import Config


def test_defaults():
    cfg = Config()
    assert cfg.viewport_strategy == "name_filter"
    assert cfg.include_placeholder_sheets is True
    assert cfg.compute_viewport_bbox is True
    assert cfg.run_benchmark is False
    assert cfg.benchmark_method == "views_property"
    assert cfg.benchmark_set_name is None
    assert cfg.max_diag_events == 200


def test_round_trip_through_dict_keeps_non_defaults():
    cfg = Config(viewport_strategy="auto", benchmark_set_name="Issue Set", max_diag_events=5)
    again = Config.from_dict(cfg.to_dict())
    assert again.to_dict() == cfg.to_dict()


def test_from_empty_dict_gives_defaults():
    assert Config.from_dict({}).to_dict() == Config().to_dict()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"viewport_strategy": "by_index"},
        {"benchmark_method": "stopwatch"},
        {"benchmark_set_name": "   "},
        {"max_diag_events": 0},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_repr_names_strategy():
    assert "viewport_strategy='sheet_viewports'" in repr(Config(viewport_strategy="sheet_viewports"))


def test_repr_covers_every_exported_field():
    text = repr(Config(logger_echo=True, csv_output_dir="C:/out"))
    for key in Config().to_dict():
        assert key + "=" in text
    assert "logger_echo=True" in text
    assert "csv_output_dir='C:/out'" in text
