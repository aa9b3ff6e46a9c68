from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from heritage_browser.core.base_view import BaseView
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.site import SiteStatus
from heritage_browser.core.summary import status_counts

STATUS_COLORS = {
    SiteStatus.DESTROYED.label: "#b91c1c",
    SiteStatus.HEAVILY_DAMAGED.label: "#ea580c",
    SiteStatus.DAMAGED.label: "#ca8a04",
}


class StatusSummaryView(BaseView):
    """
    Sites per damage status, most severe first.
    """

    id = "status_summary"
    label = "Status Summary"

    def compute_data(self, criteria: FilterCriteria) -> pd.DataFrame:
        return status_counts(self.filtered_sites(criteria))

    def render_figure(self, data: pd.DataFrame, criteria: FilterCriteria) -> go.Figure:
        if data is None or data.empty or int(data["count"].sum()) == 0:
            return self.empty_figure("No sites after filtering - adjust filters")

        fig = px.bar(
            data,
            x="label",
            y="count",
            color="label",
            color_discrete_map=STATUS_COLORS,
        )
        fig.update_layout(
            height=400,
            margin=dict(l=40, r=40, t=40, b=40),
            xaxis_title="Status",
            yaxis_title="Sites",
            showlegend=False,
        )
        return fig
