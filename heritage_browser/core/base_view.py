from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Sequence

import plotly.graph_objs as go

from .catalog import SiteCatalog
from .filter_state import FilterCriteria
from .site import Site

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all figure views next to the sites table.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - used to compute the data given the applied FilterCriteria
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None

    def __init__(self, catalog: SiteCatalog):
        self.catalog = catalog

    @abstractmethod
    def compute_data(self, criteria: FilterCriteria) -> Any:
        """
        Compute the data given the applied criteria
        :param criteria: the applied {@link FilterCriteria}
        :return: data: usually a dataframe
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, criteria: FilterCriteria) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param criteria: the applied {@link FilterCriteria}
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_sites(self, criteria: FilterCriteria) -> Sequence[Site]:
        """
        All views should call this instead of filtering by hand, so the
        filtering behaviour lives in one place (and hits the catalog cache).
        """
        return self.catalog.filter(criteria).sites

    def timed_compute(self, criteria: FilterCriteria) -> Any:
        start = time.perf_counter()
        data = self.compute_data(criteria)
        logger.info(
            "view_compute",
            extra={
                "view_id": self.id,
                "catalog": self.catalog.name,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )
        return data

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
