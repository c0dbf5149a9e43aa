"""
Static per-tier lookups: safety recommendations, descriptions, action plans.

Each table is keyed by RiskLevel and is read-only. Recommendation lists are
returned in the same order on every call.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from roadrisk.core.types import RiskLevel

RECOMMENDATIONS: Mapping[RiskLevel, tuple[str, ...]] = MappingProxyType({
    RiskLevel.RED: (
        "Install additional traffic lights",
        "Increase police patrol frequency",
        "Add speed cameras",
        "Improve road lighting",
        "Install pedestrian barriers",
    ),
    RiskLevel.ORANGE: (
        "Add warning signs",
        "Improve road markings",
        "Install speed bumps",
        "Regular safety inspections",
    ),
    RiskLevel.YELLOW: (
        "Monitor traffic patterns",
        "Quarterly safety reviews",
        "Community awareness programs",
    ),
    RiskLevel.GREEN: (
        "Maintain current safety measures",
        "Annual safety assessments",
    ),
})

RISK_DESCRIPTIONS: Mapping[RiskLevel, str] = MappingProxyType({
    RiskLevel.RED: (
        "High accident frequency with severe incidents. "
        "Immediate safety interventions required."
    ),
    RiskLevel.ORANGE: (
        "Moderate accident frequency. "
        "Regular monitoring and preventive measures needed."
    ),
    RiskLevel.YELLOW: (
        "Low accident frequency with some historical incidents. "
        "Periodic safety reviews recommended."
    ),
    RiskLevel.GREEN: (
        "Minimal to no accidents recorded. Maintain current safety standards."
    ),
})


@dataclass(frozen=True)
class ActionPlan:
    """Priority headline and deadline for a tier."""
    priority: str
    timeframe: str


ACTION_PLANS: Mapping[RiskLevel, ActionPlan] = MappingProxyType({
    RiskLevel.RED: ActionPlan(
        "Immediate Action Required", "Deploy safety measures within 30 days"
    ),
    RiskLevel.ORANGE: ActionPlan(
        "Monitor and Improve", "Implement improvements within 90 days"
    ),
    RiskLevel.YELLOW: ActionPlan(
        "Regular Assessment", "Review safety measures quarterly"
    ),
    RiskLevel.GREEN: ActionPlan(
        "Maintain Standards", "Annual safety assessment recommended"
    ),
})


def recommendations_for(level: RiskLevel) -> list[str]:
    """Fresh list of the tier's recommendations, in display order."""
    return list(RECOMMENDATIONS[RiskLevel(level)])


def description_for(level: RiskLevel) -> str:
    return RISK_DESCRIPTIONS[RiskLevel(level)]


def action_plan_for(level: RiskLevel) -> ActionPlan:
    return ACTION_PLANS[RiskLevel(level)]
