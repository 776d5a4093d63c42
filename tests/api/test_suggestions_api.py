def test_list_suggestions(client):
    payload = client.get("/api/suggestions").json()["data"]
    assert payload["total"] == 5
    assert [s["id"] for s in payload["suggestions"]] == ["1", "2", "3", "4", "5"]


def test_list_suggestions_filtered_and_paginated(client):
    payload = client.get(
        "/api/suggestions", params={"status": "pending", "productId": "1", "limit": "1"}
    ).json()["data"]
    assert payload["total"] == 2
    assert [s["id"] for s in payload["suggestions"]] == ["1"]

    by_type = client.get("/api/suggestions", params={"type": "bundle_suggestion"}).json()["data"]
    assert [s["id"] for s in by_type["suggestions"]] == ["5"]


def test_stats(client):
    stats = client.get("/api/suggestions/stats").json()["data"]
    assert (stats["pending"], stats["approved"], stats["rejected"]) == (3, 1, 1)


def test_get_suggestion(client):
    assert client.get("/api/suggestions/2").json()["data"]["type"] == "supplier_change"
    missing = client.get("/api/suggestions/404")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Suggestion not found"


def test_approve_flow(client):
    response = client.put("/api/suggestions/1/approve", json={"notes": "Ship it"})
    assert response.status_code == 200
    approved = response.json()["data"]
    assert approved["status"] == "approved"
    assert approved["approvalNotes"] == "Ship it"
    assert "approvedAt" in approved

    again = client.put("/api/suggestions/1/approve")
    assert again.status_code == 400
    assert again.json()["error"] == "Suggestion is not pending approval"


def test_approve_unknown(client):
    assert client.put("/api/suggestions/404/approve").status_code == 404


def test_reject_flow(client):
    response = client.put("/api/suggestions/3/reject", json={"reason": "Contractual promotion"})
    assert response.status_code == 200
    rejected = response.json()["data"]
    assert rejected["status"] == "rejected"
    assert rejected["rejectionReason"] == "Contractual promotion"


def test_reject_requires_reason(client):
    response = client.put("/api/suggestions/3/reject", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Rejection reason is required"
    # The reason is checked before the suggestion is looked up
    assert client.put("/api/suggestions/404/reject").status_code == 400


def test_reject_already_reviewed(client):
    response = client.put("/api/suggestions/4/reject", json={"reason": "late"})
    assert response.status_code == 400


def test_generate_suggestions(client):
    response = client.post("/api/suggestions/generate", json={"productId": "2"})
    assert response.status_code == 200
    [generated] = response.json()["data"]
    assert generated["productId"] == "2"
    assert generated["status"] == "pending"

    listing = client.get("/api/suggestions", params={"productId": "2"}).json()["data"]
    assert listing["total"] == 3


def test_generate_requires_known_product(client):
    missing_id = client.post("/api/suggestions/generate", json={})
    assert missing_id.status_code == 400
    assert missing_id.json()["error"] == "Product ID is required"

    unknown = client.post("/api/suggestions/generate", json={"productId": "404"})
    assert unknown.status_code == 404
