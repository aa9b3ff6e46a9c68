from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from heritage_browser.config.model import GlobalConfig, TableLayoutConfig
from heritage_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Heritage Sites Browser"


def _resolve_path(root: Path, raw: Optional[str]) -> Optional[Path]:
    # Absolute paths are used as-is, relative ones are resolved against the config root.
    if raw is None:
        return None
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            data/
                sites.json

    global.json keys:

    - ui_title: title for the navbar, defaults to 'Heritage Sites Browser'
    - subtitle: optional secondary line
    - data_file: site catalog JSON, relative to 'root' unless absolute
    - default_variant: table variant id used at startup, defaults to 'compact'
    - table_layout: overrides for {@link TableLayoutConfig}

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or holds malformed values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    layout_raw = raw_global.get("table_layout") or {}
    if not isinstance(layout_raw, dict):
        raise ConfigError("table_layout must be a JSON object")
    table_layout = TableLayoutConfig.from_dict(layout_raw)

    data_file = _resolve_path(root, raw_global.get("data_file"))
    if data_file is not None and not data_file.is_file():
        logger.warning(
            "Configured data file does not exist",
            extra={"config_root": str(root), "data_file": str(data_file)},
        )

    config = GlobalConfig(
        ui_title=raw_global.get("ui_title", DEFAULT_UI_TITLE),
        subtitle=raw_global.get("subtitle", ""),
        data_file=data_file,
        default_variant=raw_global.get("default_variant", "compact"),
        table_layout=table_layout,
    )

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "data_file": str(data_file) if data_file else None,
            "default_variant": config.default_variant,
        },
    )
    return config
