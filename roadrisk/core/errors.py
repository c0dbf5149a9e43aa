"""
Custom exceptions for RoadRisk.

All exceptions inherit from RoadRiskError for consistent error handling.
"""


class RoadRiskError(Exception):
    """Base exception for all RoadRisk errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# ─────────────────────────────────────────────────────────────
# Configuration Errors
# ─────────────────────────────────────────────────────────────

class ConfigurationError(RoadRiskError):
    """Zone catalog or engine configuration is invalid."""
    pass


class InvalidPopulationError(ConfigurationError):
    """Zone population is zero or negative."""

    def __init__(self, zone_id: str, population: int):
        self.zone_id = zone_id
        self.population = population
        super().__init__(
            f"Zone '{zone_id}' has non-positive population {population}"
        )


class DuplicateZoneError(ConfigurationError):
    """Two catalog entries share the same zone id."""

    def __init__(self, zone_id: str):
        self.zone_id = zone_id
        super().__init__(f"Zone '{zone_id}' is defined more than once")


class CatalogLoadError(ConfigurationError):
    """Zone catalog file could not be read or parsed."""
    pass


class InvalidParameterError(ConfigurationError):
    """Engine parameter (radius, scale factor, cell size) is not positive."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be greater than zero, got {value}")


class UnknownDistanceFunctionError(ConfigurationError):
    """Requested distance function is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Distance function '{name}' not found")


# ─────────────────────────────────────────────────────────────
# Data Errors
# ─────────────────────────────────────────────────────────────

class DataError(RoadRiskError):
    """Incident data is malformed."""
    pass


class InvalidSeverityError(DataError):
    """Incident severity is outside the closed enumeration."""

    def __init__(self, value: object, incident_id: str | None = None):
        self.value = value
        self.incident_id = incident_id
        where = f" on incident '{incident_id}'" if incident_id else ""
        super().__init__(f"Invalid severity '{value}'{where}")


class IncidentValidationError(DataError):
    """Incident row failed validation."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"Incident #{index}: {message}")
