"""
Zone Risk Engine - Classifies every catalog zone from a batch of incidents.

Algorithm, per zone:
1. Select incidents within the membership radius (non-exclusive)
2. Compute the severity-weighted, population-normalised risk score
3. Assign a risk tier from (accident count, risk score)
4. Attach the tier's recommendations

The engine holds no per-call state: each call rebuilds every result from
the inputs, so one instance can serve concurrent callers.
"""
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from roadrisk.core.config import settings
from roadrisk.core.logging import get_logger
from roadrisk.core.types import IncidentRecord, RiskLevel, ZoneDefinition, ZoneResult
from roadrisk.services.risk.distance import BaseDistanceFunction, get_distance_function
from roadrisk.services.risk.membership import ZoneMembership
from roadrisk.services.risk.recommendations import recommendations_for
from roadrisk.services.risk.scoring import RiskScorer
from roadrisk.services.risk.spatial_index import GridIndex
from roadrisk.services.risk.zone_classifier import ZoneClassifier
from roadrisk.services.zones.catalog import ZoneCatalog, catalog_from_settings

logger = get_logger(__name__)

ZoneSource = ZoneCatalog | Iterable[ZoneDefinition | Mapping[str, Any]]


class ZoneRiskEngine:
    """
    Turns incident records into classified zones.

    Args:
        catalog: Zones to classify; defaults to the configured catalog
        distance: Distance function for membership; defaults to settings
        radius_km: Membership radius; defaults to settings.ZONE_RADIUS_KM
        scorer: Risk score calculator
        classifier: Risk tier classifier
        use_spatial_index: Force the grid index on or off; None decides by
            input size (settings.SPATIAL_INDEX_MIN_INCIDENTS)
    """

    def __init__(
        self,
        catalog: ZoneSource | None = None,
        distance: BaseDistanceFunction | None = None,
        radius_km: float | None = None,
        scorer: RiskScorer | None = None,
        classifier: ZoneClassifier | None = None,
        use_spatial_index: bool | None = None,
    ):
        if catalog is None:
            catalog = catalog_from_settings()
        elif not isinstance(catalog, ZoneCatalog):
            catalog = ZoneCatalog(catalog)
        self.catalog = catalog
        self.membership = ZoneMembership(distance or get_distance_function(), radius_km)
        self.scorer = scorer or RiskScorer()
        self.classifier = classifier or ZoneClassifier()
        self.use_spatial_index = use_spatial_index

    def _build_index(self, incidents: Sequence[IncidentRecord]) -> GridIndex | None:
        enabled = self.use_spatial_index
        if enabled is None:
            enabled = len(incidents) >= settings.SPATIAL_INDEX_MIN_INCIDENTS
        if not enabled:
            return None
        return self.membership.build_index(incidents)

    def attributed_incidents(
        self, incidents: Iterable[IncidentRecord]
    ) -> dict[str, list[IncidentRecord]]:
        """Incidents attributed to each zone, keyed by zone id in catalog order."""
        incidents = list(incidents)
        index = self._build_index(incidents)
        return {
            zone.id: self.membership.incidents_for(zone, incidents, index)
            for zone in self.catalog
        }

    def assess_zone(
        self, zone: ZoneDefinition, attributed: Sequence[IncidentRecord]
    ) -> ZoneResult:
        """Score, classify and annotate one zone from its incidents."""
        accident_count = len(attributed)
        severity_sum = self.scorer.severity_sum(attributed)
        risk_score = self.scorer.compute(
            accident_count, severity_sum, zone.population, zone.id
        )
        risk_level = self.classifier.classify(accident_count, risk_score)

        logger.debug(
            f"Zone {zone.id}: {accident_count} accidents, "
            f"severity {severity_sum}, score {risk_score} -> {risk_level.value}"
        )

        return ZoneResult(
            **zone.model_dump(),
            accident_count=accident_count,
            risk_score=risk_score,
            risk_level=risk_level,
            recommendations=recommendations_for(risk_level),
        )

    def classify(self, incidents: Iterable[IncidentRecord]) -> list[ZoneResult]:
        """
        Classify every catalog zone.

        Args:
            incidents: Full incident collection

        Returns:
            One ZoneResult per catalog zone, in catalog order
        """
        incidents = list(incidents)
        attributed = self.attributed_incidents(incidents)
        results = [self.assess_zone(zone, attributed[zone.id]) for zone in self.catalog]

        levels = Counter(result.risk_level for result in results)
        logger.info(
            f"Classified {len(results)} zones",
            extra={
                "zones": len(results),
                "incidents": len(incidents),
                "attributions": sum(len(found) for found in attributed.values()),
                **{f"zones_{level.value}": levels.get(level, 0) for level in RiskLevel},
            },
        )
        return results


def analyze_accident_zones(
    incidents: Iterable[IncidentRecord],
    zones: ZoneSource | None = None,
) -> list[ZoneResult]:
    """Classify `zones` (default: configured catalog) from `incidents`."""
    return ZoneRiskEngine(zones).classify(incidents)
