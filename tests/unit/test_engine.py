"""
Unit tests for the zone risk engine.
"""
import logging
import random

import pytest

from roadrisk.core.errors import ConfigurationError, DuplicateZoneError, InvalidPopulationError
from roadrisk.core.types import RiskLevel, Severity, ZoneDefinition
from roadrisk.services.risk.distance import HaversineDistance, PlanarDistance
from roadrisk.services.risk.engine import ZoneRiskEngine, analyze_accident_zones
from roadrisk.services.risk.recommendations import recommendations_for
from roadrisk.services.zones.catalog import DEFAULT_ZONES


class TestBoundaryScenarios:
    """Population 10,000, every incident on the centroid."""

    def test_no_incidents(self, zone_10k):
        [result] = ZoneRiskEngine([zone_10k]).classify([])

        assert result.accident_count == 0
        assert result.risk_score == 0
        assert result.risk_level is RiskLevel.GREEN
        assert result.recommendations == recommendations_for(RiskLevel.GREEN)

    def test_twenty_minor_is_red_by_count(self, zone_10k, make_incidents):
        [result] = ZoneRiskEngine([zone_10k]).classify(make_incidents(20, "minor"))

        assert result.accident_count == 20
        assert result.risk_score == 30
        assert result.risk_level is RiskLevel.RED
        assert result.recommendations == recommendations_for(RiskLevel.RED)

    def test_nine_fatal_is_yellow_by_score(self, zone_10k, make_incidents):
        [result] = ZoneRiskEngine([zone_10k]).classify(make_incidents(9, "fatal"))

        assert result.accident_count == 9
        assert result.risk_score == 27
        assert result.risk_level is RiskLevel.YELLOW

    def test_two_minor_is_green(self, zone_10k, make_incidents):
        [result] = ZoneRiskEngine([zone_10k]).classify(make_incidents(2, "minor"))

        assert result.risk_score == 3
        assert result.risk_level is RiskLevel.GREEN


class TestZoneRiskEngine:
    def _zones(self):
        return [
            ZoneDefinition(id="north", name="North", latitude=40.02, longitude=-74.0, population=10000),
            ZoneDefinition(id="south", name="South", latitude=40.0, longitude=-74.0, population=10000),
            ZoneDefinition(id="far", name="Far", latitude=41.0, longitude=-74.0, population=10000),
        ]

    def test_non_exclusive_attribution(self, make_incident):
        # 0.01 deg (1.11 km) from both north and south centroids
        shared = make_incident("shared", latitude=40.01)
        results = ZoneRiskEngine(self._zones()).classify([shared])

        counts = {r.id: r.accident_count for r in results}
        assert counts == {"north": 1, "south": 1, "far": 0}

    def test_preserves_catalog_order(self, make_incident):
        zones = self._zones()
        incidents = [make_incident("a", latitude=40.01)]

        forward = ZoneRiskEngine(zones).classify(incidents)
        backward = ZoneRiskEngine(list(reversed(zones))).classify(incidents)

        assert [r.id for r in forward] == ["north", "south", "far"]
        assert [r.id for r in backward] == ["far", "south", "north"]

    def test_deterministic(self, make_incident):
        rng = random.Random(3)
        incidents = [
            make_incident(
                f"acc_{i}",
                latitude=40.0 + rng.uniform(-0.03, 0.05),
                longitude=-74.0 + rng.uniform(-0.03, 0.03),
                severity=rng.choice([s.value for s in Severity]),
            )
            for i in range(150)
        ]
        engine = ZoneRiskEngine(self._zones())

        first = [r.model_dump() for r in engine.classify(incidents)]
        second = [r.model_dump() for r in engine.classify(incidents)]
        fresh = [r.model_dump() for r in ZoneRiskEngine(self._zones()).classify(incidents)]

        assert first == second == fresh

    def test_results_carry_zone_fields(self, zone_10k):
        [result] = ZoneRiskEngine([zone_10k]).classify([])

        assert result.id == zone_10k.id
        assert result.name == zone_10k.name
        assert result.latitude == zone_10k.latitude
        assert result.longitude == zone_10k.longitude
        assert result.population == zone_10k.population

    def test_accepts_generator_input(self, zone_10k, make_incidents):
        [result] = ZoneRiskEngine([zone_10k]).classify(i for i in make_incidents(4))
        assert result.accident_count == 4

    def test_spatial_index_gives_same_results(self, make_incident):
        rng = random.Random(11)
        incidents = [
            make_incident(
                f"acc_{i}",
                latitude=40.72 + rng.uniform(-0.12, 0.12),
                longitude=-73.95 + rng.uniform(-0.12, 0.12),
                severity=rng.choice([s.value for s in Severity]),
            )
            for i in range(1200)
        ]
        naive = ZoneRiskEngine(DEFAULT_ZONES, use_spatial_index=False)
        indexed = ZoneRiskEngine(DEFAULT_ZONES, use_spatial_index=True)
        automatic = ZoneRiskEngine(DEFAULT_ZONES)

        expected = naive.classify(incidents)
        assert indexed.classify(incidents) == expected
        assert automatic.classify(incidents) == expected

    def test_attributed_incidents(self, make_incident):
        shared = make_incident("shared", latitude=40.01)
        attributed = ZoneRiskEngine(self._zones()).attributed_incidents([shared])

        assert list(attributed) == ["north", "south", "far"]
        assert [i.id for i in attributed["north"]] == ["shared"]
        assert attributed["far"] == []

    def test_swappable_distance_function(self, make_incident):
        zone = ZoneDefinition(id="z", name="Z", latitude=40.0, longitude=-74.0, population=10000)
        # 0.022 deg longitude: 1.87 km planar, 1.88 km great-circle at 40N
        incident = make_incident(longitude=-73.978)

        planar = ZoneRiskEngine([zone]).classify([incident])
        haversine = ZoneRiskEngine([zone], distance=HaversineDistance()).classify([incident])

        assert planar[0].accident_count == 1
        assert haversine[0].accident_count == 1

    def test_custom_radius(self, make_incident, zone_10k):
        incident = make_incident(latitude=40.03)  # 3.33 km
        assert ZoneRiskEngine([zone_10k]).classify([incident])[0].accident_count == 0
        assert ZoneRiskEngine([zone_10k], radius_km=5).classify([incident])[0].accident_count == 1

    def test_rejects_non_positive_population_up_front(self):
        zones = [{"id": "z", "name": "Z", "latitude": 40.0, "longitude": -74.0, "population": 0}]
        with pytest.raises(InvalidPopulationError):
            ZoneRiskEngine(zones)

    @pytest.mark.parametrize("radius", [0, -1])
    def test_rejects_non_positive_radius(self, zone_10k, radius):
        with pytest.raises(ConfigurationError):
            ZoneRiskEngine([zone_10k], radius_km=radius)

    def test_rejects_non_positive_scale_factor(self, zone_10k):
        with pytest.raises(ConfigurationError):
            ZoneRiskEngine([zone_10k], distance=PlanarDistance(-111.0, 85.0))

    def test_rejects_duplicate_zone_ids(self, zone_10k):
        with pytest.raises(DuplicateZoneError):
            ZoneRiskEngine([zone_10k, zone_10k])

    def test_logs_summary(self, zone_10k, make_incidents, caplog):
        with caplog.at_level(logging.INFO, logger="roadrisk.services.risk.engine"):
            ZoneRiskEngine([zone_10k]).classify(make_incidents(20))

        record = next(r for r in caplog.records if r.message.startswith("Classified"))
        assert record.zones == 1
        assert record.zones_red == 1
        assert record.zones_green == 0


class TestAnalyzeAccidentZones:
    def test_default_catalog(self, make_incident):
        incidents = [make_incident(f"acc_{i}", latitude=40.7128, longitude=-74.0060) for i in range(3)]

        results = analyze_accident_zones(incidents)

        assert [r.id for r in results] == [z["id"] for z in DEFAULT_ZONES]
        downtown = results[0]
        assert downtown.accident_count == 3
        # (3*10 + 3*5) / 25 = 1.8
        assert downtown.risk_score == 2
        assert downtown.risk_level is RiskLevel.YELLOW

    def test_explicit_zones(self, zone_10k, make_incidents):
        [result] = analyze_accident_zones(make_incidents(10, "moderate"), [zone_10k])
        # (100 + 100) / 10 = 20
        assert result.risk_score == 20
        assert result.risk_level is RiskLevel.ORANGE
