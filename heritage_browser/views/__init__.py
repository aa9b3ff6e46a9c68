from .timeline_view import TimelineView
from .status_summary_view import StatusSummaryView

__all__ = ["TimelineView", "StatusSummaryView"]
