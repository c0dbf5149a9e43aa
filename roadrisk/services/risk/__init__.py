from roadrisk.services.risk.colors import DEFAULT_RISK_COLOR, RISK_COLORS, get_risk_color
from roadrisk.services.risk.distance import (
    BaseDistanceFunction,
    HaversineDistance,
    PlanarDistance,
    get_distance_function,
)
from roadrisk.services.risk.engine import ZoneRiskEngine, analyze_accident_zones
from roadrisk.services.risk.membership import ZoneMembership
from roadrisk.services.risk.recommendations import (
    ACTION_PLANS,
    RECOMMENDATIONS,
    RISK_DESCRIPTIONS,
    ActionPlan,
    action_plan_for,
    description_for,
    recommendations_for,
)
from roadrisk.services.risk.scoring import SEVERITY_WEIGHTS, RiskScorer, RiskWeights, severity_weight
from roadrisk.services.risk.spatial_index import GridIndex
from roadrisk.services.risk.zone_classifier import ZoneClassifier

__all__ = [
    "ACTION_PLANS",
    "ActionPlan",
    "BaseDistanceFunction",
    "DEFAULT_RISK_COLOR",
    "GridIndex",
    "HaversineDistance",
    "PlanarDistance",
    "RECOMMENDATIONS",
    "RISK_COLORS",
    "RISK_DESCRIPTIONS",
    "RiskScorer",
    "RiskWeights",
    "SEVERITY_WEIGHTS",
    "ZoneClassifier",
    "ZoneMembership",
    "ZoneRiskEngine",
    "action_plan_for",
    "analyze_accident_zones",
    "description_for",
    "get_distance_function",
    "get_risk_color",
    "recommendations_for",
    "severity_weight",
]
