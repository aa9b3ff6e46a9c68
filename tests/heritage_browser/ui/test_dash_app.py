import json

import pytest

from heritage_browser.core.exceptions import ConfigError
from heritage_browser.ui.dash_app import create_dash_app


def _write_config(config_root, global_json, sites=None):
    (config_root / "data").mkdir(parents=True)
    (config_root / "global.json").write_text(json.dumps(global_json))
    if sites is not None:
        (config_root / "data" / "sites.json").write_text(json.dumps({"sites": sites}))


def test_create_dash_app_from_config_dir(tmp_path):
    config_root = tmp_path / "config"
    _write_config(
        config_root,
        {"ui_title": "Test Heritage", "data_file": "data/sites.json", "default_variant": "tablet"},
        sites=[
            {"id": "a", "name": "Site A", "category": "mosque", "status": "destroyed"},
            {"id": "b", "name": "Site B", "category": "church", "status": "damaged"},
        ],
    )

    app = create_dash_app(config_root)

    assert app.title == "Test Heritage"
    assert app.layout is not None
    # unknown default variant falls back to the registry default
    assert "compact" in str(app.layout)


def test_create_dash_app_requires_data_file(tmp_path):
    config_root = tmp_path / "config"
    _write_config(config_root, {"ui_title": "No data"})

    with pytest.raises(ConfigError):
        create_dash_app(config_root)
