"""
Module: connectors.dashboard_feed

Read-only source for dashboard alerts and the recent-analysis feed.
"""

from models.alert import Alert
from models.analysis import RecentAnalysis

from .mock_data import ALERTS, RECENT_ANALYSES


class DashboardFeed:
    def __init__(self):
        self._alerts = [Alert.model_validate(a) for a in ALERTS]
        self._recent_analyses = [RecentAnalysis.model_validate(a) for a in RECENT_ANALYSES]

    async def alerts(self) -> list[Alert]:
        return list(self._alerts)

    async def recent_analyses(self) -> list[RecentAnalysis]:
        return list(self._recent_analyses)
