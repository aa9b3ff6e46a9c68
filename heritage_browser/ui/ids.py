from __future__ import annotations

__all__ = ["IDs", "filter_chip_id"]


class IDs:
    class Store:
        FILTER_SESSION = "filter-session"
        SORT_STATE = "sort-state"
        TABLE_LAYOUT = "table-layout"
        VIEWPORT_WIDTH = "viewport-width"

    class Control:
        # Filter panel
        CATEGORY_SELECT = "category-select"
        STATUS_SELECT = "status-select"
        DESTROYED_RANGE = "destroyed-range"
        BUILT_FROM = "built-from-input"
        BUILT_FROM_ERA = "built-from-era"
        BUILT_TO = "built-to-input"
        BUILT_TO_ERA = "built-to-era"
        SEARCH_INPUT = "search-input"

        APPLY_BTN = "apply-filters-btn"
        CANCEL_BTN = "cancel-filters-btn"
        CLEAR_BTN = "clear-filters-btn"
        UNAPPLIED_BADGE = "unapplied-badge"

        # Applied filter summary
        ACTIVE_FILTERS = "active-filters"
        RESULT_COUNT = "result-count"

        # Table panel
        VARIANT_SELECT = "variant-select"
        SITES_TABLE = "sites-table"
        TABLE_CONTAINER = "sites-table-container"
        TABLE_WIDTH_HANDLE = "table-width-handle"
        TABLE_WIDTH_LABEL = "table-width-label"
        VIEWPORT_POLL = "viewport-poll"

        # Graph + downloads
        VIEW_SELECT = "view-select"
        MAIN_GRAPH = "main-graph"
        DOWNLOAD_CSV = "download-csv"
        DOWNLOAD_CSV_BTN = "download-csv-btn"
        DOWNLOAD_JSON = "download-json"
        DOWNLOAD_JSON_BTN = "download-json-btn"

    class Pattern:
        # pattern-matching "type" strings
        FILTER_CHIP = "filter-chip"


def filter_chip_id(key: str) -> dict:
    return {"type": IDs.Pattern.FILTER_CHIP, "index": key}
