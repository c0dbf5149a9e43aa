"""
Zone Membership - Attributes incidents to zones by distance.

An incident belongs to a zone when its distance to the zone centroid is
strictly less than the radius (2 km by default). Attribution is
independent per zone: an incident can belong to several zones or none.
"""
from collections.abc import Sequence

from roadrisk.core.config import settings
from roadrisk.core.errors import InvalidParameterError
from roadrisk.core.types import IncidentRecord, ZoneDefinition
from roadrisk.services.risk.distance import BaseDistanceFunction, PlanarDistance
from roadrisk.services.risk.spatial_index import GridIndex


class ZoneMembership:
    """Decides which incidents fall inside a zone's service radius."""

    def __init__(
        self,
        distance: BaseDistanceFunction | None = None,
        radius_km: float | None = None,
    ):
        self.distance = distance or PlanarDistance()
        self.radius_km = radius_km if radius_km is not None else settings.ZONE_RADIUS_KM
        if self.radius_km <= 0:
            raise InvalidParameterError("radius_km", self.radius_km)

    def distance_to(self, incident: IncidentRecord, zone: ZoneDefinition) -> float:
        """Distance in km from the zone centroid to the incident."""
        return self.distance.distance_km(
            incident.latitude, incident.longitude, zone.latitude, zone.longitude
        )

    def is_attributed(self, incident: IncidentRecord, zone: ZoneDefinition) -> bool:
        """True if the incident counts toward the zone."""
        return self.distance_to(incident, zone) < self.radius_km

    def incidents_for(
        self,
        zone: ZoneDefinition,
        incidents: Sequence[IncidentRecord],
        index: GridIndex | None = None,
    ) -> list[IncidentRecord]:
        """
        Incidents attributed to the zone, in input order.

        Args:
            zone: Zone to filter for
            incidents: Full incident collection
            index: Optional grid over the same incidents to narrow the scan

        Returns:
            Attributed incidents
        """
        if index is not None:
            pool = index.candidates(zone.latitude, zone.longitude, self.radius_km)
        else:
            pool = incidents
        return [incident for incident in pool if self.is_attributed(incident, zone)]

    def build_index(
        self, incidents: Sequence[IncidentRecord], cell_degrees: float | None = None
    ) -> GridIndex:
        """Grid index over `incidents` compatible with this membership rule."""
        if cell_degrees is None:
            cell_degrees = settings.SPATIAL_INDEX_CELL_DEGREES
        return GridIndex(incidents, self.distance, cell_degrees)
