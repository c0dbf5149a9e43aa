"""
Integration tests for the HTTP API.
"""


def _incident(incident_id, latitude=40.7128, longitude=-74.0060, severity="moderate"):
    return {
        "id": incident_id,
        "latitude": latitude,
        "longitude": longitude,
        "date": "2024-03-14",
        "time": "08:45",
        "severity": severity,
        "location": "Downtown Main St",
        "weather": "rain",
        "roadType": "urban",
        "casualties": 1,
    }


def test_health_endpoint(test_client):
    """Test the /health endpoint."""
    response = test_client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "roadrisk"
    assert "timestamp" in data


def test_ready_endpoint(test_client):
    """Test the /ready endpoint."""
    response = test_client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "zones": 8}


def test_zone_catalog(test_client):
    response = test_client.get("/api/v1/zones/catalog")
    assert response.status_code == 200
    zones = response.json()
    assert [z["id"] for z in zones] == [f"zone_{i}" for i in range(1, 9)]
    assert zones[0]["population"] == 25000


def test_risk_levels(test_client):
    response = test_client.get("/api/v1/risk-levels")
    assert response.status_code == 200
    levels = response.json()
    assert [lvl["level"] for lvl in levels] == ["red", "orange", "yellow", "green"]
    assert levels[0]["color"] == "#dc2626"
    assert levels[0]["priority"] == "Immediate Action Required"
    assert levels[-1]["rank"] == 1


def test_classify_default_catalog(test_client):
    incidents = [_incident(f"acc_{i}") for i in range(3)]

    response = test_client.post("/api/v1/zones/classify", json={"incidents": incidents})

    assert response.status_code == 200
    data = response.json()
    assert len(data["zones"]) == 8
    downtown = data["zones"][0]
    assert downtown["id"] == "zone_1"
    assert downtown["accidentCount"] == 3
    # (30 + 30) / 25 = 2.4
    assert downtown["riskScore"] == 2
    assert downtown["riskLevel"] == "yellow"
    assert data["summary"]["totalAccidents"] == 3
    assert data["summary"]["severityDistribution"]["moderate"] == 3
    assert data["report"] is None


def test_classify_custom_zones_with_report(test_client):
    payload = {
        "incidents": [_incident(f"acc_{i}", 40.0, -74.0, "minor") for i in range(20)],
        "zones": [
            {"id": "test", "name": "Test Zone", "latitude": 40.0,
             "longitude": -74.0, "population": 10000},
        ],
        "includeReport": True,
    }

    response = test_client.post("/api/v1/zones/classify", json=payload)

    assert response.status_code == 200
    data = response.json()
    [zone] = data["zones"]
    assert zone["riskScore"] == 30
    assert zone["riskLevel"] == "red"
    assert zone["recommendations"][0] == "Install additional traffic lights"
    assert data["summary"]["zonesByLevel"]["red"] == 1
    assert "Test Zone (RED ZONE)" in data["report"]


def test_classify_rejects_zero_population(test_client):
    payload = {
        "incidents": [],
        "zones": [
            {"id": "empty", "name": "Empty", "latitude": 40.0,
             "longitude": -74.0, "population": 0},
        ],
    }

    response = test_client.post("/api/v1/zones/classify", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "InvalidPopulationError"


def test_classify_rejects_invalid_severity(test_client):
    payload = {"incidents": [_incident("acc_1", severity="catastrophic")]}

    response = test_client.post("/api/v1/zones/classify", json=payload)

    assert response.status_code == 422
