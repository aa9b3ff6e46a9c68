

class HeritageBrowserError(Exception):
    """Base exception for all heritage_browser errors"""
    pass

class ConfigError(HeritageBrowserError):
    """Invalid or inconsistent global.json, table layout or variant config"""
    pass

class DatasetSchemaError(HeritageBrowserError):
    """
    A site record doesn't match what the Site model expects:
    missing fields, unknown category/status, malformed dates, etc
    """
    pass
