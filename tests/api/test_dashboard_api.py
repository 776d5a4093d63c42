def test_dashboard_overview(client):
    response = client.get("/api/dashboard")
    assert response.status_code == 200
    payload = response.json()["data"]
    assert len(payload["kpis"]) == 6
    assert len(payload["products"]) == 4
    assert [p["id"] for p in payload["topIssues"]] == ["2", "4"]
    assert len(payload["recentAnalyses"]) == 2
    assert "lastUpdated" in payload


def test_dashboard_kpis(client):
    kpis = client.get("/api/dashboard/kpis").json()["data"]
    assert kpis[0]["name"] == "Average Gross Margin"
    assert kpis[0]["lastUpdated"].startswith("2024-01-15T10:30:00")


def test_dashboard_products_use_query_pipeline(client):
    payload = client.get(
        "/api/dashboard/products", params={"sortBy": "shrinkRate", "sortOrder": "desc", "limit": "1"}
    ).json()["data"]
    assert [p["name"] for p in payload["products"]] == ["Fresh Strawberries"]
    assert payload["total"] == 4


def test_dashboard_alerts(client):
    alerts = client.get("/api/dashboard/alerts").json()["data"]
    assert [a["type"] for a in alerts] == ["critical", "warning", "info"]
    assert alerts[0]["productId"] == "4"
