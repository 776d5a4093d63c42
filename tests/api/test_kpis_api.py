import pytest


def test_list_kpis(client):
    kpis = client.get("/api/kpis").json()["data"]
    assert len(kpis) == 6


def test_list_kpis_filtered_by_name(client):
    kpis = client.get("/api/kpis", params={"category": "impact"}).json()["data"]
    assert [k["name"] for k in kpis] == ["Tariff Impact"]


def test_summary(client):
    summary = client.get("/api/kpis/summary").json()["data"]
    assert summary["totalKPIs"] == 6
    assert summary["positiveTrends"] == 4


def test_trends_all_and_single(client):
    payload = client.get("/api/kpis/trends", params={"timeframe": "7d"}).json()["data"]
    assert payload["timeframe"] == "7d"
    assert len(payload["trends"]["Tariff Impact"]) == 4

    single = client.get("/api/kpis/trends", params={"kpi": "at-risk-skus"}).json()["data"]
    assert [p["value"] for p in single["trends"]] == [259, 255, 251, 247]


def test_calculate(client):
    body = {"products": [{"margin": 10, "name": "A"}, {"margin": -2}, {"margin": 30}]}
    result = client.post("/api/kpis/calculate", json=body).json()["data"]
    assert result["Average Gross Margin"]["value"] == pytest.approx(38 / 3)
    assert result["At-Risk SKUs"]["value"] == 1
    assert result["Total Products"]["value"] == 3


def test_calculate_requires_products(client):
    response = client.post("/api/kpis/calculate", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Products array is required"


def test_get_kpi_by_slug(client):
    kpi = client.get("/api/kpis/shrink-loss").json()["data"]
    assert kpi["name"] == "Shrink Loss"
    assert kpi["target"] == 2.0


def test_get_unknown_kpi(client):
    response = client.get("/api/kpis/unknown")
    assert response.status_code == 404
    assert response.json()["error"] == "KPI not found"


def test_update_target(client):
    response = client.put("/api/kpis/average-gross-margin", json={"target": 16})
    assert response.status_code == 200
    assert response.json()["data"]["target"] == 16
    assert client.get("/api/kpis/average-gross-margin").json()["data"]["target"] == 16


def test_update_target_validation(client):
    missing = client.put("/api/kpis/average-gross-margin", json={})
    assert missing.status_code == 400
    assert missing.json()["error"] == "Target value is required"

    unknown = client.put("/api/kpis/nope", json={"target": 1})
    assert unknown.status_code == 404


def test_update_target_rejects_nan(client):
    response = client.put(
        "/api/kpis/shrink-loss", content='{"target": NaN}', headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert client.get("/api/kpis/shrink-loss").json()["data"]["target"] == 2.0
    assert client.get("/api/kpis").status_code == 200
