"""
RoadRisk Core Module.

Provides configuration, types, errors, and logging.
"""
from roadrisk.core.config import Settings, settings
from roadrisk.core.errors import (
    CatalogLoadError,
    ConfigurationError,
    DataError,
    DuplicateZoneError,
    IncidentValidationError,
    InvalidParameterError,
    InvalidPopulationError,
    InvalidSeverityError,
    RoadRiskError,
    UnknownDistanceFunctionError,
)
from roadrisk.core.types import (
    ClassifyRequest,
    ClassifyResponse,
    DashboardSummary,
    ErrorResponse,
    IncidentRecord,
    MonthlyCount,
    RiskLevel,
    RiskLevelInfo,
    RoadType,
    Severity,
    Weather,
    ZoneDefinition,
    ZoneResult,
)

__all__ = [
    # Config
    "Settings",
    "settings",
    # Enums
    "RiskLevel",
    "RoadType",
    "Severity",
    "Weather",
    # Models
    "IncidentRecord",
    "ZoneDefinition",
    "ZoneResult",
    "MonthlyCount",
    "DashboardSummary",
    "ClassifyRequest",
    "ClassifyResponse",
    "RiskLevelInfo",
    "ErrorResponse",
    # Errors
    "RoadRiskError",
    "ConfigurationError",
    "InvalidPopulationError",
    "DuplicateZoneError",
    "CatalogLoadError",
    "InvalidParameterError",
    "UnknownDistanceFunctionError",
    "DataError",
    "InvalidSeverityError",
    "IncidentValidationError",
]
