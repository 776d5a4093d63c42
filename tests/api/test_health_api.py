from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from openai import AsyncOpenAI

from api.app import create_app
from config.config import AppConfig


def test_health_offline(client):
    payload = client.get("/api/health").json()["data"]
    assert payload["status"] == "ok"
    assert payload["version"] == "1.0.0"
    assert payload["llmEnabled"] is False


def test_health_with_llm_client():
    app = create_app(config=AppConfig(), llm_client=MagicMock(spec=AsyncOpenAI))
    with TestClient(app) as c:
        assert c.get("/api/health").json()["data"]["llmEnabled"] is True


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_malformed_json_body_is_a_bad_request(client):
    response = client.post(
        "/api/chat/message", content="{not json", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request")
