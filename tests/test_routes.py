from app.services.risk_query_service import RiskQueryService, set_risk_query_service
from conftest import FailingStore


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    body = client.get("/health").json()
    assert body["status"] == "healthy"


def test_db_health_uses_mock_database(client):
    resp = client.get("/health/db")
    assert resp.status_code == 200
    assert resp.json()["database"] == "mock"


def test_risk_endpoint_success(client):
    resp = client.get("/risk", params={"district": "Delhi East", "family": "crime", "date": "2024-03-10"})
    assert resp.status_code == 200

    body = resp.json()
    assert body["dominant"] == {"name": "Murder", "value": 10}
    assert body["unit"] == "cases"
    assert "4-10 Mar" in body["alertText"]
    assert body["series"] == {"labels": ["Week 1", "Week 2"], "values": [5, 5]}


def test_risk_endpoint_without_family_returns_no_content(client):
    resp = client.get("/risk", params={"district": "Delhi East", "date": "2024-03-10"})
    assert resp.status_code == 204
    assert resp.content == b""


def test_risk_endpoint_error_kinds(client):
    cases = [
        ({"family": "crime", "date": "2024-03-10"}, 400, "EmptyQuery"),
        ({"district": "Delhi East", "family": "aqi", "date": "2024-03-10"}, 400, "EmptyQuery"),
        ({"district": "Gotham", "family": "crime", "date": "2024-03-10"}, 404, "DistrictNotFound"),
        ({"district": "Delhi East", "family": "health", "date": "10-03-2024"}, 422, "InvalidDate"),
    ]
    for params, status_code, kind in cases:
        resp = client.get("/risk", params=params)
        assert resp.status_code == status_code, params
        body = resp.json()
        assert body["error"] == kind
        assert body["message"]
        assert "series" not in body


def test_store_unavailable_is_503(client):
    set_risk_query_service(RiskQueryService(store=FailingStore()))
    resp = client.get("/risk", params={"district": "Delhi East", "family": "crime", "date": "2024-03-10"})
    assert resp.status_code == 503
    assert resp.json()["error"] == "StoreUnavailable"


def test_districts_listing_and_search(client):
    body = client.get("/api/districts").json()
    assert body["count"] == 4

    body = client.get("/api/districts", params={"search": "east"}).json()
    assert body["count"] == 1
    assert body["districts"][0]["District"] == "Delhi East"
    assert body["districts"][0]["Murder"] == 10


def test_map_markers(client):
    markers = client.get("/map/markers").json()
    assert {m["district"] for m in markers} == {"Delhi East", "New Delhi", "North Delhi"}
    east = next(m for m in markers if m["district"] == "Delhi East")
    assert east["family"] == "crime"


def test_context_endpoints(client):
    assert client.get("/context/aqi", params={"district": "south delhi"}).json()["band"] == "poor"
    assert client.get("/context/aqi", params={"district": "Gotham"}).status_code == 404

    help_body = client.get("/context/help", params={"district": "Delhi East"}).json()
    assert help_body["hospital"]["name"] == "LBS Hospital"

    media = client.get("/context/media", params={"family": "health", "indicator": "Dengue"}).json()
    assert len(media["assets"]) == 3
    assert client.get("/context/media", params={"family": "aqi", "indicator": "Dengue"}).status_code == 400
