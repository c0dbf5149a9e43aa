"""
Grid Index - Buckets incidents into fixed degree cells.

Used to avoid the zones x incidents scan on large inputs. A query returns
every incident in the cells overlapping the distance function's bounding
box; the caller still applies the exact distance test, so attribution is
identical to a full scan.
"""
import math
from collections import defaultdict
from collections.abc import Sequence

from roadrisk.core.errors import InvalidParameterError
from roadrisk.core.types import IncidentRecord
from roadrisk.services.risk.distance import BaseDistanceFunction

# Relative padding on bounding boxes to absorb floating-point rounding
_BOX_PADDING = 1e-9


class GridIndex:
    """Immutable grid of incident positions keyed by (row, col) cell."""

    def __init__(
        self,
        incidents: Sequence[IncidentRecord],
        distance: BaseDistanceFunction,
        cell_degrees: float,
    ):
        if cell_degrees <= 0:
            raise InvalidParameterError("cell_degrees", cell_degrees)
        self._incidents = list(incidents)
        self._distance = distance
        self._cell = cell_degrees
        buckets: dict[tuple[int, int], list[int]] = defaultdict(list)
        for position, incident in enumerate(self._incidents):
            buckets[self._cell_of(incident.latitude, incident.longitude)].append(position)
        self._buckets = dict(buckets)

    def __len__(self) -> int:
        return len(self._incidents)

    @property
    def cell_count(self) -> int:
        return len(self._buckets)

    def _cell_of(self, latitude: float, longitude: float) -> tuple[int, int]:
        return math.floor(latitude / self._cell), math.floor(longitude / self._cell)

    def candidates(
        self, latitude: float, longitude: float, radius_km: float
    ) -> list[IncidentRecord]:
        """
        Incidents that may lie within `radius_km` of the point.

        Returned in the original input order.
        """
        d_lat, d_lng = self._distance.bounding_box(latitude, radius_km)
        d_lat += abs(d_lat) * _BOX_PADDING + _BOX_PADDING
        d_lng += abs(d_lng) * _BOX_PADDING + _BOX_PADDING

        if d_lng >= 180.0:
            return list(self._incidents)
        if self._distance.wraps_longitude and (
            longitude - d_lng < -180.0 or longitude + d_lng > 180.0
        ):
            return list(self._incidents)

        row_lo, col_lo = self._cell_of(latitude - d_lat, longitude - d_lng)
        row_hi, col_hi = self._cell_of(latitude + d_lat, longitude + d_lng)

        positions: list[int] = []
        window = (row_hi - row_lo + 1) * (col_hi - col_lo + 1)
        if window > len(self._buckets):
            for (row, col), bucket in self._buckets.items():
                if row_lo <= row <= row_hi and col_lo <= col <= col_hi:
                    positions.extend(bucket)
        else:
            for row in range(row_lo, row_hi + 1):
                for col in range(col_lo, col_hi + 1):
                    positions.extend(self._buckets.get((row, col), ()))

        positions.sort()
        return [self._incidents[p] for p in positions]
