from __future__ import annotations

import pytest

from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.pipeline import filter_sites
from heritage_browser.core.site import Site, SiteCategory, SiteStatus
from heritage_browser.core.year_parsing import (
    century_midpoint,
    format_year,
    hijri_to_gregorian,
    parse_year_built,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7th century", 650),
        ("1st century BCE", -50),
        ("5th century (425 CE)", 450),
        ("13th-century", 1250),
        ("BCE 800", -800),
        ("BC 3300", -3300),
        ("-800", -800),
        ("800 BCE", -800),
        ("800 bc", -800),
        ("800 BCE - 1100 CE", -800),
        ("1250", 1250),
        ("1250 CE", 1250),
        ("AD 1250", 1250),
        ("  1250  ", 1250),
    ],
)
def test_parse_year_built_table(text, expected):
    assert parse_year_built(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1250-1300", 1275),
        ("1400-1500", 1450),
        ("1400 - 1500 CE", 1450),
        ("1200-1300 CE", 1250),
        ("800-900 BCE", -850),
        ("1200-1100 BC", -1150),
    ],
)
def test_ranges_resolve_to_midpoint_with_trailing_era(text, expected):
    assert parse_year_built(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("circa 1200", 1200),
        ("Circa 1500 CE", 1500),
        ("ca. 800 BCE", -800),
        ("c. 1250", 1250),
        ("~ 1500 CE", 1500),
        ("~800 BCE", -800),
        ("circa 7th century", 650),
        ("~16th century", 1550),
    ],
)
def test_approximation_prefixes_are_ignored(text, expected):
    assert parse_year_built(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 AH", 623),
        ("100 AH", 719),
        ("750 AH", 1350),
        ("750 ah", 1350),
        ("1400 AH", 1980),
        ("circa 750 AH", 1350),
        ("~1000 AH", 1592),
    ],
)
def test_hijri_years_convert_to_gregorian(text, expected):
    assert parse_year_built(text) == expected


def test_hijri_to_gregorian_rounds_half_up():
    assert hijri_to_gregorian(750) == 1350


@pytest.mark.parametrize(
    "text",
    [None, "", "   ", "unknown", "Ottoman era", "???", "16th c.", "2nd millennium BCE"],
)
def test_parse_year_built_unparsable_returns_none(text):
    assert parse_year_built(text) is None


def test_bce_range_is_excluded_from_a_medieval_year_filter():
    site = Site(
        id="anthedon",
        name="Anthedon Harbour",
        category=SiteCategory.ARCHAEOLOGICAL,
        status=SiteStatus.DESTROYED,
        year_built="800-900 BCE",
    )

    assert filter_sites([site], FilterCriteria(built_from=500, built_to=1000)).count == 0
    assert filter_sites([site], FilterCriteria(built_from=-900, built_to=-800)).count == 1


def test_century_midpoint():
    assert century_midpoint(1) == 50
    assert century_midpoint(7) == 650
    assert century_midpoint(20) == 1950


def test_format_year_uses_era_labels():
    assert format_year(-800) == "800 BCE"
    assert format_year(1250) == "1250 CE"
    assert format_year(0) == "0 CE"
