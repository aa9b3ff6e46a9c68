from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from heritage_browser.core.catalog import SiteCatalog
from heritage_browser.core.exceptions import DatasetSchemaError
from heritage_browser.core.site import Site, SiteCategory, SiteStatus

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "category", "status")


def _optional_str(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _parse_destroyed_on(site_id: str, value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise DatasetSchemaError(f"Site '{site_id}': invalid destroyed_on {value!r}") from e


def _parse_coordinates(site_id: str, value: Any) -> Optional[Tuple[float, float]]:
    if value is None:
        return None
    try:
        lat, lon = value
        return float(lat), float(lon)
    except (TypeError, ValueError) as e:
        raise DatasetSchemaError(f"Site '{site_id}': coordinates must be [lat, lon], got {value!r}") from e


def site_from_dict(raw: Dict[str, Any]) -> Site:
    """
    Build a {@link Site} from one JSON record.

    Raises:
        DatasetSchemaError: on missing required fields, unknown category/status values,
            or malformed dates and coordinates. The message names the offending id.
    """
    if not isinstance(raw, dict):
        raise DatasetSchemaError(f"Site record must be an object, got {type(raw).__name__}")

    site_id = str(raw.get("id", "<missing id>"))
    missing = [k for k in REQUIRED_FIELDS if raw.get(k) in (None, "")]
    if missing:
        raise DatasetSchemaError(f"Site '{site_id}': missing required fields {missing}")

    try:
        category = SiteCategory(raw["category"])
    except ValueError as e:
        raise DatasetSchemaError(f"Site '{site_id}': unknown category {raw['category']!r}") from e

    try:
        status = SiteStatus(raw["status"])
    except ValueError as e:
        raise DatasetSchemaError(f"Site '{site_id}': unknown status {raw['status']!r}") from e

    return Site(
        id=site_id,
        name=str(raw["name"]),
        category=category,
        status=status,
        year_built=str(raw.get("year_built") or ""),
        destroyed_on=_parse_destroyed_on(site_id, raw.get("destroyed_on")),
        name_arabic=_optional_str(raw, "name_arabic"),
        year_built_islamic=_optional_str(raw, "year_built_islamic"),
        destroyed_on_islamic=_optional_str(raw, "destroyed_on_islamic"),
        description=str(raw.get("description") or ""),
        historical_significance=str(raw.get("historical_significance") or ""),
        coordinates=_parse_coordinates(site_id, raw.get("coordinates")),
    )


def site_to_dict(site: Site) -> Dict[str, Any]:
    return {
        "id": site.id,
        "name": site.name,
        "category": site.category.value,
        "status": site.status.value,
        "year_built": site.year_built,
        "destroyed_on": site.destroyed_on.isoformat() if site.destroyed_on else None,
        "name_arabic": site.name_arabic,
        "year_built_islamic": site.year_built_islamic,
        "destroyed_on_islamic": site.destroyed_on_islamic,
        "description": site.description,
        "historical_significance": site.historical_significance,
        "coordinates": list(site.coordinates) if site.coordinates else None,
    }


def load_sites(path: Path) -> List[Site]:
    """
    Read a site catalog JSON file: either a list of records or {"sites": [...]}.

    :raises FileNotFoundError: if the file does not exist
    :raises DatasetSchemaError: if the file or any record is malformed
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Site data file not found at {path}")

    with path.open(encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetSchemaError(f"Invalid JSON in {path}: {e}") from e

    records = raw.get("sites") if isinstance(raw, dict) else raw
    if not isinstance(records, list):
        raise DatasetSchemaError(f"{path} must hold a list of sites or an object with a 'sites' list")

    sites = [site_from_dict(r) for r in records]
    logger.info(
        "Sites loaded",
        extra={"path": str(path), "n_sites": len(sites)},
    )
    return sites


def save_sites(sites: List[Site], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"sites": [site_to_dict(s) for s in sites]}
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


class SiteRepository:
    """
    Loads the site catalog from disk once and hands out the cached {@link SiteCatalog}.
    """

    def __init__(self, path: Path, name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or self.path.stem
        self._catalog: Optional[SiteCatalog] = None

    def get_catalog(self) -> SiteCatalog:
        if self._catalog is None:
            self._catalog = SiteCatalog(self.name, load_sites(self.path))
        return self._catalog

    def get_sites(self) -> Tuple[Site, ...]:
        return self.get_catalog().sites

    def reload(self) -> SiteCatalog:
        self._catalog = None
        return self.get_catalog()
