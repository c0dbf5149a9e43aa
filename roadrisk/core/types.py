"""
Shared Pydantic models for RoadRisk.

These types are used across the application for consistent data structures.
External JSON uses camelCase field names; Python code uses snake_case.
"""
import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ─────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────

class Severity(str, Enum):
    """Incident severity, ordered by increasing harm."""
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    FATAL = "fatal"


class Weather(str, Enum):
    """Weather at the time of the incident."""
    CLEAR = "clear"
    RAIN = "rain"
    FOG = "fog"
    SNOW = "snow"


class RoadType(str, Enum):
    """Road category where the incident happened."""
    HIGHWAY = "highway"
    URBAN = "urban"
    RURAL = "rural"
    INTERSECTION = "intersection"


class RiskLevel(str, Enum):
    """Zone risk tiers (green < yellow < orange < red)."""
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"

    @property
    def rank(self) -> int:
        """Severity rank, 1 for green up to 4 for red."""
        return _RISK_RANK[self]


_RISK_RANK = {
    RiskLevel.GREEN: 1,
    RiskLevel.YELLOW: 2,
    RiskLevel.ORANGE: 3,
    RiskLevel.RED: 4,
}


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ─────────────────────────────────────────────────────────────
# Core Models
# ─────────────────────────────────────────────────────────────

class IncidentRecord(_Model):
    """A single recorded road accident."""
    id: str = Field(..., min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    date: dt.date
    time: str = Field(..., pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    severity: Severity
    location: str = ""
    weather: Weather
    road_type: RoadType
    casualties: int = Field(default=0, ge=0)


class ZoneDefinition(_Model):
    """A fixed geographic zone of interest.

    Population is validated by the zone catalog, not here, so that a bad
    value surfaces as a configuration error.
    """
    id: str = Field(..., min_length=1)
    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    population: int


class ZoneResult(ZoneDefinition):
    """Classified zone produced by the engine."""
    accident_count: int = Field(ge=0)
    risk_score: int = Field(ge=0)
    risk_level: RiskLevel
    recommendations: list[str] = Field(default_factory=list)


# ─────────────────────────────────────────────────────────────
# Analytics Models
# ─────────────────────────────────────────────────────────────

class MonthlyCount(_Model):
    """Accidents recorded in one calendar month (all years pooled)."""
    month: str  # e.g., "Jan"
    accidents: int


class DashboardSummary(_Model):
    """Aggregate figures over an incident set and its classified zones."""
    total_accidents: int
    total_casualties: int
    high_severity_accidents: int  # severe + fatal
    unique_locations: int
    zones_by_level: dict[RiskLevel, int]
    severity_distribution: dict[Severity, int]
    weather_distribution: dict[Weather, int]
    road_type_distribution: dict[RoadType, int]
    monthly_trend: list[MonthlyCount]


# ─────────────────────────────────────────────────────────────
# API Models
# ─────────────────────────────────────────────────────────────

class ClassifyRequest(_Model):
    """Request to classify zones from a batch of incidents."""
    incidents: list[IncidentRecord] = Field(default_factory=list)
    zones: list[ZoneDefinition] | None = None  # None = configured catalog
    include_report: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "incidents": [
                    {
                        "id": "acc_0_0",
                        "latitude": 40.7130,
                        "longitude": -74.0055,
                        "date": "2024-03-14",
                        "time": "08:45",
                        "severity": "moderate",
                        "location": "Downtown Main St",
                        "weather": "rain",
                        "roadType": "urban",
                        "casualties": 1,
                    }
                ],
                "includeReport": False,
            }
        }
    )


class ClassifyResponse(_Model):
    """Classified zones plus aggregate summary."""
    zones: list[ZoneResult]
    summary: DashboardSummary
    report: str | None = None


class RiskLevelInfo(_Model):
    """Display metadata for one risk tier."""
    level: RiskLevel
    rank: int
    color: str
    description: str
    priority: str
    timeframe: str
    recommendations: list[str]


class ErrorResponse(_Model):
    """Standard error response."""
    error: str
    code: str
    detail: str | None = None
