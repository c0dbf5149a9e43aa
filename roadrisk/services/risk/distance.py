"""
Distance functions used for zone membership.

The classification thresholds were tuned against PlanarDistance, a flat
approximation with fixed km-per-degree scale factors. HaversineDistance is
a drop-in great-circle alternative.
"""
import math
from abc import ABC, abstractmethod

from roadrisk.core.config import settings
from roadrisk.core.errors import InvalidParameterError, UnknownDistanceFunctionError

EARTH_RADIUS_KM = 6371.0088


class BaseDistanceFunction(ABC):
    """Abstract interface for point-to-point distances in kilometres."""

    name: str = "base"

    # True when distances are measured across the antimeridian
    wraps_longitude: bool = False

    @abstractmethod
    def distance_km(self, lat1: float, lng1: float, lat2: float, lng2: float) -> float:
        """Distance between two WGS84 points."""
        pass

    @abstractmethod
    def bounding_box(self, latitude: float, radius_km: float) -> tuple[float, float]:
        """
        Half-widths in degrees of a window around `latitude`.

        Every point closer than `radius_km` to a centre at `latitude`
        lies within (dlat, dlng) degrees of it.
        """
        pass


class PlanarDistance(BaseDistanceFunction):
    """Euclidean distance after scaling degree deltas to kilometres."""

    name = "planar"

    def __init__(
        self,
        km_per_degree_lat: float | None = None,
        km_per_degree_lng: float | None = None,
    ):
        if km_per_degree_lat is None:
            km_per_degree_lat = settings.KM_PER_DEGREE_LAT
        if km_per_degree_lng is None:
            km_per_degree_lng = settings.KM_PER_DEGREE_LNG
        if km_per_degree_lat <= 0:
            raise InvalidParameterError("km_per_degree_lat", km_per_degree_lat)
        if km_per_degree_lng <= 0:
            raise InvalidParameterError("km_per_degree_lng", km_per_degree_lng)
        self.km_per_degree_lat = km_per_degree_lat
        self.km_per_degree_lng = km_per_degree_lng

    def distance_km(self, lat1: float, lng1: float, lat2: float, lng2: float) -> float:
        d_lat_km = (lat1 - lat2) * self.km_per_degree_lat
        d_lng_km = (lng1 - lng2) * self.km_per_degree_lng
        return math.sqrt(d_lat_km ** 2 + d_lng_km ** 2)

    def bounding_box(self, latitude: float, radius_km: float) -> tuple[float, float]:
        return radius_km / self.km_per_degree_lat, radius_km / self.km_per_degree_lng

    def __repr__(self) -> str:
        return (
            f"PlanarDistance(km_per_degree_lat={self.km_per_degree_lat}, "
            f"km_per_degree_lng={self.km_per_degree_lng})"
        )


class HaversineDistance(BaseDistanceFunction):
    """Great-circle distance on a spherical Earth."""

    name = "haversine"
    wraps_longitude = True

    def __init__(self, radius_km: float = EARTH_RADIUS_KM):
        self.radius_km = radius_km

    def distance_km(self, lat1: float, lng1: float, lat2: float, lng2: float) -> float:
        r_lat1 = math.radians(lat1)
        r_lat2 = math.radians(lat2)
        d_lat = math.radians(lat2 - lat1)
        d_lng = math.radians(lng2 - lng1)

        a = (
            math.sin(d_lat / 2.0) ** 2
            + math.cos(r_lat1) * math.cos(r_lat2) * math.sin(d_lng / 2.0) ** 2
        )
        # Clamp against floating-point overshoot
        a = max(0.0, min(1.0, a))
        return self.radius_km * 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))

    def bounding_box(self, latitude: float, radius_km: float) -> tuple[float, float]:
        angular = radius_km / self.radius_km
        if angular >= math.pi:
            return 180.0, 180.0

        d_lat = math.degrees(angular)
        phi = math.radians(abs(latitude))
        if phi + angular >= math.pi / 2:
            # Circle reaches a pole, every longitude is in range
            return d_lat, 180.0

        d_lng = math.degrees(math.asin(math.sin(angular) / math.cos(phi)))
        return d_lat, d_lng

    def __repr__(self) -> str:
        return f"HaversineDistance(radius_km={self.radius_km})"


_REGISTRY: dict[str, type[BaseDistanceFunction]] = {
    PlanarDistance.name: PlanarDistance,
    HaversineDistance.name: HaversineDistance,
}


def get_distance_function(name: str | None = None) -> BaseDistanceFunction:
    """
    Create a distance function by name.

    Args:
        name: 'planar' or 'haversine'; defaults to settings.DISTANCE_METHOD

    Raises:
        UnknownDistanceFunctionError: If the name is not registered
    """
    key = (name or settings.DISTANCE_METHOD).strip().lower()
    try:
        factory = _REGISTRY[key]
    except KeyError:
        raise UnknownDistanceFunctionError(key) from None
    return factory()
