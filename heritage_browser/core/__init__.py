"""
Core domain layer: site catalog, filter criteria and session, view base class,
and the view registry
"""

from .catalog import SiteCatalog
from .filter_state import FilterCriteria
from .filter_session import FilterSession
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["SiteCatalog", "FilterCriteria", "FilterSession", "BaseView", "ViewRegistry"]
