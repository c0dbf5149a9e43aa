from roadrisk.services.analytics.summary import (
    build_dashboard_summary,
    monthly_trend,
    zones_by_level,
)

__all__ = ["build_dashboard_summary", "monthly_trend", "zones_by_level"]
