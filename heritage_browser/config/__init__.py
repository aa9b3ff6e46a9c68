"""
Config package for heritage_browser.

Responsible for:
- config models (GlobalConfig, TableLayoutConfig, TableVariantConfig)
- config I/O helpers (load_global_config)
- the table variant registry
"""

from .model import GlobalConfig, TableLayoutConfig, TableVariantConfig
from .loader import load_global_config
from .table_variants import TableVariantRegistry, create_default_variant_registry

__all__ = [
    "GlobalConfig",
    "TableLayoutConfig",
    "TableVariantConfig",
    "load_global_config",
    "TableVariantRegistry",
    "create_default_variant_registry",
]
