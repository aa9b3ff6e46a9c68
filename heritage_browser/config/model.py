from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from heritage_browser.core.exceptions import ConfigError

# Table column ids. They double as Site attribute names and sort field values.
COLUMN_LABELS: Dict[str, str] = {
    "category": "Type",
    "name": "Name",
    "status": "Status",
    "destroyed_on": "Date Destroyed",
    "destroyed_on_islamic": "Date Destroyed (Islamic)",
    "year_built": "Year Built",
    "year_built_islamic": "Year Built (Islamic)",
}


@dataclass(frozen=True)
class ColumnDisclosure:
    """A column that becomes visible once the table is at least `min_width` wide."""
    min_width: float
    column: str


@dataclass(frozen=True)
class TableLayoutConfig:
    """
    Fixed parameters of the resizable sites table.

    :param initial_width: width at mount, before any clamping
    :param min_width / max_width: absolute bounds for the table width
    :param left_offset: distance from the viewport's left edge to the table (pointer x - offset = width)
    :param viewport_padding: horizontal padding subtracted from the viewport width
    :param viewport_ratio: share of the remaining viewport the table may take
    :param baseline_columns: always visible
    :param disclosures: strictly increasing width thresholds revealing extra columns
    :param column_order: display order of all columns
    """

    initial_width: float = 480
    min_width: float = 480
    max_width: float = 1100
    left_offset: float = 24
    viewport_padding: float = 48
    viewport_ratio: float = 0.6
    baseline_columns: Tuple[str, ...] = ("name", "status", "destroyed_on")
    disclosures: Tuple[ColumnDisclosure, ...] = (
        ColumnDisclosure(650, "category"),
        ColumnDisclosure(800, "destroyed_on_islamic"),
        ColumnDisclosure(950, "year_built"),
        ColumnDisclosure(1100, "year_built_islamic"),
    )
    column_order: Tuple[str, ...] = tuple(COLUMN_LABELS)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Raises:
            ConfigError: on inconsistent bounds, ratio, thresholds or column names
        """
        if self.min_width <= 0:
            raise ConfigError(f"min_width must be > 0, got {self.min_width}")
        if self.min_width > self.max_width:
            raise ConfigError(
                f"min_width ({self.min_width}) must not exceed max_width ({self.max_width})"
            )
        if not 0 < self.viewport_ratio <= 1:
            raise ConfigError(f"viewport_ratio must be in (0, 1], got {self.viewport_ratio}")

        thresholds = [d.min_width for d in self.disclosures]
        for prev, nxt in zip(thresholds, thresholds[1:]):
            if nxt <= prev:
                raise ConfigError(f"Column thresholds must be strictly increasing: {thresholds}")

        columns = list(self.baseline_columns) + [d.column for d in self.disclosures]
        if len(set(columns)) != len(columns):
            raise ConfigError(f"Duplicate column in table layout: {columns}")
        unknown = [c for c in columns if c not in self.column_order]
        if unknown:
            raise ConfigError(f"Columns missing from column_order: {unknown}")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> TableLayoutConfig:
        defaults = cls()
        disclosures_raw = raw.get("disclosures")
        if disclosures_raw is None:
            disclosures = defaults.disclosures
        else:
            try:
                disclosures = tuple(
                    ColumnDisclosure(float(d["min_width"]), str(d["column"]))
                    for d in disclosures_raw
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"Invalid table_layout.disclosures: {e}") from e

        try:
            return cls(
                initial_width=float(raw.get("initial_width", defaults.initial_width)),
                min_width=float(raw.get("min_width", defaults.min_width)),
                max_width=float(raw.get("max_width", defaults.max_width)),
                left_offset=float(raw.get("left_offset", defaults.left_offset)),
                viewport_padding=float(raw.get("viewport_padding", defaults.viewport_padding)),
                viewport_ratio=float(raw.get("viewport_ratio", defaults.viewport_ratio)),
                baseline_columns=tuple(raw.get("baseline_columns", defaults.baseline_columns)),
                disclosures=disclosures,
                column_order=tuple(raw.get("column_order", defaults.column_order)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid table_layout value: {e}") from e


@dataclass(frozen=True)
class TableVariantConfig:
    """
    A named table presentation (sidebar, modal, mobile).

    visible_columns is the column set used when the variant is not resizable;
    resizable variants derive their columns from the TableLayoutConfig instead.
    """
    id: str
    label: str
    visible_columns: Tuple[str, ...]
    default_sort_column: str = "destroyed_on"
    default_sort_direction: str = "desc"
    enable_sort: bool = True
    enable_export: bool = False
    resizable: bool = False
    is_default: bool = False
    description: str = ""


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str
    data_file: Optional[Path]
    default_variant: str = "compact"
    table_layout: TableLayoutConfig = field(default_factory=TableLayoutConfig)
