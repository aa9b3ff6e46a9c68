from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from heritage_browser.config.model import COLUMN_LABELS, TableVariantConfig

logger = logging.getLogger(__name__)


class TableVariantRegistry:
    """
    Registry of table presentations (compact sidebar, expanded modal, mobile).

    Design Notes:
    - One explicit registry object per app; nothing is stored at module level
    - Stored configs are frozen; {@link update} replaces an entry instead of mutating it
    - Lookups of unknown ids return None rather than raising
    """

    def __init__(self):
        self._variants: Dict[str, TableVariantConfig] = {}

    def register(self, variant: TableVariantConfig) -> None:
        """
        Raises:
            TypeError: if variant is not a TableVariantConfig
            ValueError: if the id is already registered or a column is unknown
        """
        if not isinstance(variant, TableVariantConfig):
            raise TypeError(f"Variant {variant!r} must be a TableVariantConfig")
        if variant.id in self._variants:
            raise ValueError(f"Table variant '{variant.id}' already registered")

        unknown = [c for c in variant.visible_columns if c not in COLUMN_LABELS]
        if unknown:
            raise ValueError(f"Table variant '{variant.id}' has unknown columns: {unknown}")

        self._variants[variant.id] = variant

    def get(self, variant_id: str) -> Optional[TableVariantConfig]:
        return self._variants.get(variant_id)

    def update(self, variant_id: str, **changes: Any) -> Optional[TableVariantConfig]:
        """
        Replace fields of a registered variant.
        :return: the new config, or None if no variant has this id
        """
        current = self._variants.get(variant_id)
        if current is None:
            logger.warning("Unknown table variant", extra={"variant_id": variant_id})
            return None
        if "id" in changes and changes["id"] != variant_id:
            raise ValueError("A table variant's id cannot be changed")

        updated = replace(current, **changes)
        self._variants[variant_id] = updated
        return updated

    def remove(self, variant_id: str) -> bool:
        return self._variants.pop(variant_id, None) is not None

    def default(self) -> Optional[TableVariantConfig]:
        """The first variant flagged is_default, else the first registered one."""
        for variant in self._variants.values():
            if variant.is_default:
                return variant
        return next(iter(self._variants.values()), None)

    def ids(self) -> List[str]:
        return list(self._variants)

    def all(self) -> List[TableVariantConfig]:
        return list(self._variants.values())

    def __contains__(self, variant_id: object) -> bool:
        return variant_id in self._variants

    def __len__(self) -> int:
        return len(self._variants)


def create_default_variant_registry() -> TableVariantRegistry:
    registry = TableVariantRegistry()

    registry.register(
        TableVariantConfig(
            id="compact",
            label="Compact Sidebar",
            visible_columns=("category", "name", "status", "destroyed_on"),
            is_default=True,
            resizable=True,
            description="Resizable sidebar table; columns appear as it widens",
        )
    )
    registry.register(
        TableVariantConfig(
            id="expanded",
            label="Expanded",
            visible_columns=tuple(COLUMN_LABELS),
            enable_export=True,
            description="All columns, including Islamic calendar dates, with CSV export",
        )
    )
    registry.register(
        TableVariantConfig(
            id="mobile",
            label="Mobile",
            visible_columns=("name", "status", "destroyed_on"),
            description="Narrow screens",
        )
    )
    return registry
