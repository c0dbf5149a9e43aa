"""
Dashboard Summary - Aggregate figures over incidents and classified zones.

Every category of each distribution is present, zero-filled, in enum
order, so consumers can render fixed legends.
"""
import calendar
from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TypeVar

from roadrisk.core.types import (
    DashboardSummary,
    IncidentRecord,
    MonthlyCount,
    RiskLevel,
    RoadType,
    Severity,
    Weather,
    ZoneResult,
)

E = TypeVar("E", bound=Enum)

# Most severe first, matching how zones are listed in reports
_LEVEL_ORDER = (RiskLevel.RED, RiskLevel.ORANGE, RiskLevel.YELLOW, RiskLevel.GREEN)

_HIGH_SEVERITY = (Severity.SEVERE, Severity.FATAL)


def _distribution(enum_cls: type[E], values: Iterable[E]) -> dict[E, int]:
    counts = Counter(values)
    return {member: counts.get(member, 0) for member in enum_cls}


def monthly_trend(incidents: Iterable[IncidentRecord]) -> list[MonthlyCount]:
    """Accident counts per calendar month, January first, years pooled."""
    counts = Counter(incident.date.month for incident in incidents)
    return [
        MonthlyCount(month=calendar.month_abbr[month], accidents=counts.get(month, 0))
        for month in range(1, 13)
    ]


def zones_by_level(zones: Iterable[ZoneResult]) -> dict[RiskLevel, int]:
    counts = Counter(zone.risk_level for zone in zones)
    return {level: counts.get(level, 0) for level in _LEVEL_ORDER}


def build_dashboard_summary(
    incidents: Sequence[IncidentRecord],
    zones: Sequence[ZoneResult],
) -> DashboardSummary:
    """
    Summarise an incident set and the zones classified from it.

    Args:
        incidents: All incidents passed to the engine
        zones: The engine's output for those incidents

    Returns:
        DashboardSummary
    """
    return DashboardSummary(
        total_accidents=len(incidents),
        total_casualties=sum(incident.casualties for incident in incidents),
        high_severity_accidents=sum(
            1 for incident in incidents if incident.severity in _HIGH_SEVERITY
        ),
        unique_locations=len({incident.location for incident in incidents}),
        zones_by_level=zones_by_level(zones),
        severity_distribution=_distribution(Severity, (i.severity for i in incidents)),
        weather_distribution=_distribution(Weather, (i.weather for i in incidents)),
        road_type_distribution=_distribution(RoadType, (i.road_type for i in incidents)),
        monthly_trend=monthly_trend(incidents),
    )
