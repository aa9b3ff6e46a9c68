from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from heritage_browser.core.base_view import BaseView
from heritage_browser.core.filter_state import FilterCriteria
from heritage_browser.core.summary import monthly_destruction_counts


class TimelineView(BaseView):
    """
    Number of sites destroyed per month, over the applied filters.
    """

    id = "timeline"
    label = "Destruction Timeline"

    def compute_data(self, criteria: FilterCriteria) -> pd.DataFrame:
        return monthly_destruction_counts(self.filtered_sites(criteria))

    def render_figure(self, data: pd.DataFrame, criteria: FilterCriteria) -> go.Figure:
        if data is None or data.empty:
            return self.empty_figure("No dated sites after filtering - adjust filters")

        fig = px.bar(data, x="month", y="count")
        fig.update_layout(
            height=400,
            margin=dict(l=40, r=40, t=40, b=40),
            xaxis_title="Month",
            yaxis_title="Sites destroyed",
            bargap=0.1,
        )
        return fig
