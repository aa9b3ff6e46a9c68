import pytest

from heritage_browser.config.model import ColumnDisclosure, TableLayoutConfig
from heritage_browser.core.exceptions import ConfigError


def test_default_layout_matches_dashboard_constants():
    config = TableLayoutConfig()

    assert (config.min_width, config.max_width) == (480, 1100)
    assert (config.left_offset, config.viewport_padding, config.viewport_ratio) == (24, 48, 0.6)
    assert [d.min_width for d in config.disclosures] == [650, 800, 950, 1100]
    assert config.baseline_columns == ("name", "status", "destroyed_on")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_width": 0},
        {"min_width": 1200, "max_width": 1100},
        {"viewport_ratio": 0},
        {"viewport_ratio": 1.5},
        {"disclosures": (ColumnDisclosure(800, "category"), ColumnDisclosure(800, "year_built"))},
        {"disclosures": (ColumnDisclosure(650, "name"),)},
        {"baseline_columns": ("name", "not_a_column")},
    ],
)
def test_invalid_layouts_raise_config_error(kwargs):
    with pytest.raises(ConfigError):
        TableLayoutConfig(**kwargs)


def test_from_dict_overrides_and_parses_disclosures():
    config = TableLayoutConfig.from_dict(
        {
            "min_width": "400",
            "disclosures": [
                {"min_width": 600, "column": "category"},
                {"min_width": 900, "column": "year_built"},
            ],
        }
    )

    assert config.min_width == 400.0
    assert config.disclosures == (
        ColumnDisclosure(600.0, "category"),
        ColumnDisclosure(900.0, "year_built"),
    )
    assert config.max_width == 1100


@pytest.mark.parametrize(
    "raw",
    [
        {"disclosures": [{"column": "category"}]},
        {"min_width": "wide"},
    ],
)
def test_from_dict_rejects_malformed_values(raw):
    with pytest.raises(ConfigError):
        TableLayoutConfig.from_dict(raw)
