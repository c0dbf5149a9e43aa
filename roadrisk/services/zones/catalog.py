"""
Zone Catalog - Validated, ordered, immutable set of zone definitions.

Catalogs are configuration: they are checked once when built and never
change afterwards. Problems surface as ConfigurationError before any
classification runs.
"""
import json
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any, overload

import yaml
from pydantic import ValidationError

from roadrisk.core.config import settings
from roadrisk.core.errors import (
    CatalogLoadError,
    ConfigurationError,
    DuplicateZoneError,
    InvalidPopulationError,
)
from roadrisk.core.types import ZoneDefinition

logger = logging.getLogger(__name__)


DEFAULT_ZONES: tuple[dict[str, Any], ...] = (
    {"id": "zone_1", "name": "Downtown Commercial District",
     "latitude": 40.7128, "longitude": -74.0060, "population": 25000},
    {"id": "zone_2", "name": "Highway 101 Corridor",
     "latitude": 40.7589, "longitude": -73.9851, "population": 15000},
    {"id": "zone_3", "name": "Central Park Vicinity",
     "latitude": 40.7829, "longitude": -73.9654, "population": 18000},
    {"id": "zone_4", "name": "Brooklyn Bridge Area",
     "latitude": 40.7061, "longitude": -73.9969, "population": 12000},
    {"id": "zone_5", "name": "Queens Residential",
     "latitude": 40.7282, "longitude": -73.7949, "population": 22000},
    {"id": "zone_6", "name": "Suburban Oak District",
     "latitude": 40.6892, "longitude": -74.0445, "population": 8000},
    {"id": "zone_7", "name": "University Campus",
     "latitude": 40.8176, "longitude": -73.9482, "population": 30000},
    {"id": "zone_8", "name": "Industrial Sector",
     "latitude": 40.6643, "longitude": -73.9385, "population": 5000},
)


class ZoneCatalog(Sequence[ZoneDefinition]):
    """Ordered zone definitions with unique ids and positive populations."""

    def __init__(self, zones: Iterable[ZoneDefinition | Mapping[str, Any]]):
        validated: list[ZoneDefinition] = []
        seen: set[str] = set()
        for position, raw in enumerate(zones):
            zone = self._coerce(position, raw)
            if zone.population <= 0:
                raise InvalidPopulationError(zone.id, zone.population)
            if zone.id in seen:
                raise DuplicateZoneError(zone.id)
            seen.add(zone.id)
            validated.append(zone)
        self._zones = tuple(validated)
        self._by_id = {zone.id: zone for zone in self._zones}

    @staticmethod
    def _coerce(position: int, raw: ZoneDefinition | Mapping[str, Any]) -> ZoneDefinition:
        if isinstance(raw, ZoneDefinition):
            return raw
        try:
            return ZoneDefinition.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Zone #{position} is invalid: {e}") from e

    @overload
    def __getitem__(self, index: int) -> ZoneDefinition: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ZoneDefinition, ...]: ...

    def __getitem__(self, index):
        return self._zones[index]

    def __len__(self) -> int:
        return len(self._zones)

    def __iter__(self) -> Iterator[ZoneDefinition]:
        return iter(self._zones)

    def __repr__(self) -> str:
        return f"ZoneCatalog({[zone.id for zone in self._zones]})"

    @property
    def ids(self) -> list[str]:
        return [zone.id for zone in self._zones]

    def get(self, zone_id: str) -> ZoneDefinition | None:
        return self._by_id.get(zone_id)


def default_catalog() -> ZoneCatalog:
    """The built-in eight-zone reference catalog."""
    return ZoneCatalog(DEFAULT_ZONES)


def load_zone_catalog(path: str | Path) -> ZoneCatalog:
    """
    Load a catalog from a YAML or JSON file.

    The file holds either a list of zones or a mapping with a `zones` list.

    Raises:
        CatalogLoadError: File missing, unreadable or not a zone list
        ConfigurationError: A zone entry is invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(f"Cannot read zone catalog {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Cannot parse zone catalog {path}: {e}") from e

    if isinstance(data, Mapping):
        data = data.get("zones")
    if not isinstance(data, list):
        raise CatalogLoadError(f"Zone catalog {path} must contain a list of zones")

    catalog = ZoneCatalog(data)
    logger.info(f"Loaded zone catalog {path} ({len(catalog)} zones)")
    return catalog


def catalog_from_settings() -> ZoneCatalog:
    """Catalog at settings.ZONE_CATALOG_PATH, or the built-in one."""
    if settings.ZONE_CATALOG_PATH:
        return load_zone_catalog(settings.ZONE_CATALOG_PATH)
    return default_catalog()
