from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from heritage_browser.config.model import GlobalConfig
from heritage_browser.config.table_variants import TableVariantRegistry
from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    catalog: SiteCatalog

    registry: Optional[ViewRegistry] = None
    variants: Optional[TableVariantRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.variants is None:
            raise RuntimeError("AppConfig.variants must be initialized.")
