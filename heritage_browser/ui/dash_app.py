from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from heritage_browser.config.loader import load_global_config
from heritage_browser.config.table_variants import create_default_variant_registry
from heritage_browser.core.exceptions import ConfigError
from heritage_browser.core.view_registry import ViewRegistry
from heritage_browser.services.site_repository import SiteRepository
from heritage_browser.validation.site_validation import warn_on_invalid_sites
from heritage_browser.ui.layout.build_layout import build_layout
from heritage_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from heritage_browser.ui.callbacks.callbacks_table import register_table_callbacks
from heritage_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from heritage_browser.views import StatusSummaryView, TimelineView

    registry = ViewRegistry()
    registry.register(TimelineView)
    registry.register(StatusSummaryView)
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)
    if global_config.data_file is None:
        raise ConfigError(f"No data_file configured in {config_root / 'global.json'}")

    # 2) Load Sites
    repository = SiteRepository(global_config.data_file)
    catalog = repository.get_catalog()
    warn_on_invalid_sites(catalog.sites, logger)

    # 3) Registries
    variants = create_default_variant_registry()
    if global_config.default_variant not in variants:
        logger.warning(
            "Unknown default table variant, falling back",
            extra={"default_variant": global_config.default_variant, "variants": variants.ids()},
        )
        global_config.default_variant = variants.default().id

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
        registry=_build_view_registry(),
        variants=variants,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_sites": len(catalog)},
    )
    return app
