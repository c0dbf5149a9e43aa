"""
Unit tests for zone catalogs.
"""
import json

import pytest

from roadrisk.core.errors import (
    CatalogLoadError,
    ConfigurationError,
    DuplicateZoneError,
    InvalidPopulationError,
)
from roadrisk.services.zones.catalog import (
    DEFAULT_ZONES,
    ZoneCatalog,
    default_catalog,
    load_zone_catalog,
)


def _zone(zone_id="z1", population=1000, **overrides):
    data = {"id": zone_id, "name": zone_id.upper(), "latitude": 40.0,
            "longitude": -74.0, "population": population}
    data.update(overrides)
    return data


class TestZoneCatalog:
    def test_default_catalog(self):
        catalog = default_catalog()

        assert len(catalog) == 8
        assert catalog.ids == [f"zone_{i}" for i in range(1, 9)]
        assert catalog[0].name == "Downtown Commercial District"
        assert catalog.get("zone_8").population == 5000
        assert catalog.get("zone_99") is None

    def test_keeps_input_order(self):
        catalog = ZoneCatalog([_zone("b"), _zone("a"), _zone("c")])
        assert catalog.ids == ["b", "a", "c"]
        assert [z.id for z in catalog] == ["b", "a", "c"]

    @pytest.mark.parametrize("population", [0, -5])
    def test_rejects_non_positive_population(self, population):
        with pytest.raises(InvalidPopulationError) as exc:
            ZoneCatalog([_zone("ok"), _zone("bad", population)])
        assert exc.value.zone_id == "bad"

    def test_rejects_duplicate_ids(self):
        with pytest.raises(DuplicateZoneError) as exc:
            ZoneCatalog([_zone("a"), _zone("b"), _zone("a")])
        assert exc.value.zone_id == "a"

    def test_rejects_malformed_entry(self):
        with pytest.raises(ConfigurationError, match="Zone #0"):
            ZoneCatalog([{"id": "a", "name": "A"}])

    def test_empty_catalog_is_allowed(self):
        assert len(ZoneCatalog([])) == 0

    def test_default_zones_constant_is_untouched(self):
        default_catalog()
        assert DEFAULT_ZONES[0]["id"] == "zone_1"


class TestLoadZoneCatalog:
    def test_yaml_list(self, tmp_path):
        path = tmp_path / "zones.yaml"
        path.write_text(
            "- id: harbour\n"
            "  name: Harbour\n"
            "  latitude: 51.5\n"
            "  longitude: -0.1\n"
            "  population: 4200\n"
        )

        catalog = load_zone_catalog(path)

        assert catalog.ids == ["harbour"]
        assert catalog[0].population == 4200

    def test_json_mapping(self, tmp_path):
        path = tmp_path / "zones.json"
        path.write_text(json.dumps({"zones": [_zone("a"), _zone("b")]}))

        assert load_zone_catalog(str(path)).ids == ["a", "b"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_zone_catalog(tmp_path / "absent.yaml")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "zones.yaml"
        path.write_text("zones: 3\n")
        with pytest.raises(CatalogLoadError):
            load_zone_catalog(path)

    def test_unparseable_json(self, tmp_path):
        path = tmp_path / "zones.json"
        path.write_text("[{")
        with pytest.raises(CatalogLoadError):
            load_zone_catalog(path)

    def test_invalid_population_in_file(self, tmp_path):
        path = tmp_path / "zones.json"
        path.write_text(json.dumps([_zone("a", population=0)]))
        with pytest.raises(InvalidPopulationError):
            load_zone_catalog(path)
