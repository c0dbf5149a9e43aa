"""
Risk tier display colours.
"""
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from roadrisk.core.types import RiskLevel

RISK_COLORS: Mapping[RiskLevel, str] = MappingProxyType({
    RiskLevel.RED: "#dc2626",
    RiskLevel.ORANGE: "#ea580c",
    RiskLevel.YELLOW: "#ca8a04",
    RiskLevel.GREEN: "#16a34a",
})

DEFAULT_RISK_COLOR = "#6b7280"


def get_risk_color(risk_level: RiskLevel | str | None) -> str:
    """
    Hex colour for a risk level.

    Accepts any value; anything that is not a known tier gets the neutral
    default instead of raising.
    """
    value = risk_level.value if isinstance(risk_level, Enum) else risk_level
    try:
        return RISK_COLORS[RiskLevel(value)]
    except (ValueError, TypeError):
        return DEFAULT_RISK_COLOR
