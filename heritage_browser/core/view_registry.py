from __future__ import annotations
from typing import Dict, List, Type

from .catalog import SiteCatalog
from .base_view import BaseView


class ViewRegistry:
    """
    Figure views shown next to the sites table, keyed by view id.

    Classes are stored, not instances: a view is built per render against the
    current {@link SiteCatalog}. Registration order is the order of the view selector.
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Raises:
            TypeError: if view_cls is not a {@link BaseView} subclass
            ValueError: if the view has no id or the id is taken
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View {view_cls!r} must be a subclass of BaseView")
        if not view_cls.id:
            raise ValueError(f"View {view_cls.__name__} has no id")
        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str, catalog: SiteCatalog) -> BaseView:
        """
        Raises:
            KeyError: for an unregistered view id
        """
        if view_id not in self._views:
            raise KeyError(f"View '{view_id}' not found")
        return self._views[view_id](catalog)

    def all_classes(self) -> List[Type[BaseView]]:
        return list(self._views.values())

    def options(self) -> List[Dict[str, str]]:
        """Select options, one per view, in registration order."""
        return [{"label": cls.label or cls.id, "value": cls.id} for cls in self._views.values()]

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views
