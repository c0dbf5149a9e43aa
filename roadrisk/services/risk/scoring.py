"""
Risk Score Calculator - Reduces a zone's incidents to one integer score.

Formula:
  severity_sum = sum of SEVERITY_WEIGHTS[incident.severity]
  risk_score   = round((count * 10 + severity_sum * 5) / (population / 1000))
Where:
  - count: incidents attributed to the zone
  - population / 1000: exposure normaliser, population in thousands
Rounding is half away from zero.
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from roadrisk.core.errors import InvalidPopulationError, InvalidSeverityError
from roadrisk.core.types import IncidentRecord, Severity

SEVERITY_WEIGHTS: Mapping[Severity, int] = MappingProxyType({
    Severity.MINOR: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
    Severity.FATAL: 4,
})


def severity_weight(severity: Severity | str) -> int:
    """
    Weight for a severity value.

    Raises:
        InvalidSeverityError: If the value is not a known severity
    """
    try:
        return SEVERITY_WEIGHTS[Severity(severity)]
    except (ValueError, KeyError):
        raise InvalidSeverityError(severity) from None


@dataclass(frozen=True)
class RiskWeights:
    """Weights for risk score calculation."""
    count_weight: int = 10
    severity_weight: int = 5
    population_unit: int = 1000


class RiskScorer:
    """Calculates population-normalised risk scores for zones."""

    def __init__(self, weights: RiskWeights | None = None):
        self.weights = weights or RiskWeights()

    def severity_sum(self, incidents: Iterable[IncidentRecord]) -> int:
        """Sum of severity weights over the incidents."""
        total = 0
        for incident in incidents:
            try:
                total += severity_weight(incident.severity)
            except InvalidSeverityError:
                raise InvalidSeverityError(incident.severity, incident.id) from None
        return total

    def compute(
        self,
        accident_count: int,
        severity_sum: int,
        population: int,
        zone_id: str | None = None,
    ) -> int:
        """
        Compute the risk score for a zone.

        Args:
            accident_count: Incidents attributed to the zone
            severity_sum: Sum of their severity weights
            population: Zone population, must be positive
            zone_id: Used in the error message only

        Returns:
            Non-negative integer risk score
        """
        if population <= 0:
            raise InvalidPopulationError(zone_id or "unknown", population)

        raw = (
            Decimal(accident_count * self.weights.count_weight
                    + severity_sum * self.weights.severity_weight)
            * self.weights.population_unit
            / Decimal(population)
        )
        return int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def score(
        self,
        incidents: Iterable[IncidentRecord],
        population: int,
        zone_id: str | None = None,
    ) -> int:
        """Score straight from a zone's attributed incidents."""
        incidents = list(incidents)
        return self.compute(
            len(incidents), self.severity_sum(incidents), population, zone_id
        )
