from fastapi.testclient import TestClient

from quantiparse.api.app import app


client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_parse_endpoint_returns_tree():
    response = client.post("/v1/quantities/parse", json={"text": "3.5 km/h^2"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["kind"] == "scalar_with_unit"
    assert data["result"]["scalar"] == {"kind": "decimal", "integer": "3", "fraction": "5", "sign": None}
    assert data["result"]["unit"]["operator"] == "divide"
    assert data["result"]["unit"]["left"]["prefix"] == "k"
    assert data["canonical"] == "3.5 km / h^2"
    assert data["measurement"] is None


def test_parse_endpoint_evaluates_irregular_forms():
    response = client.post("/v1/quantities/parse", json={"text": "6 foot 4", "evaluate": True})
    data = response.json()
    assert data["kind"] == "irregular"
    assert data["result"]["quantity"]["kind"] == "feet_inches"
    assert data["measurement"]["magnitude"] == "76"
    assert data["measurement"]["unit"] == "in"
    assert data["measurement"]["si_unit"] == "m"


def test_parse_endpoint_reports_failure_position():
    response = client.post("/v1/quantities/parse", json={"text": "5 mxyz"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["position"] == 3
    assert "unit name" in detail["expected"]


def test_parse_endpoint_rejects_empty_text():
    response = client.post("/v1/quantities/parse", json={"text": ""})
    assert response.status_code == 422


def test_parse_endpoint_reports_transform_errors():
    response = client.post("/v1/quantities/parse", json={"text": "m^kg", "evaluate": True})
    assert response.status_code == 422


def test_parse_endpoint_rejects_huge_exponents():
    for text in ("km^400", "1e99999999"):
        response = client.post("/v1/quantities/parse", json={"text": text, "evaluate": True})
        assert response.status_code == 422
