from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from routers.scripts import get_script_generator, router as scripts_router
from services.errors import ProviderUnavailableError, UpstreamError
from services.providers.base import ProviderConfig, ProviderName
from services.script_generator import ScriptGeneratorService

PAYLOAD = {
    "productName": "Acme CRM",
    "audience": "sales managers",
    "description": "pipeline tool",
    "keyFeatures": "analytics, mobile",
    "painPoints": "slow reporting",
}


class _FailingProvider:
    name = ProviderName.openai

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def generate(self, prompt: str, system_instruction: str) -> str:
        raise self.error


def _client(service: ScriptGeneratorService) -> TestClient:
    app = FastAPI()
    app.include_router(scripts_router, prefix="/api")
    app.dependency_overrides[get_script_generator] = lambda: service
    return TestClient(app)


def _failing_service(error: Exception) -> ScriptGeneratorService:
    provider = _FailingProvider(error)
    return ScriptGeneratorService(
        ProviderConfig(provider="openai", openai_api_key="sk-test"),
        factories={ProviderName.openai: lambda _config: provider},
    )


def test_generate_script_with_mock() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig()))

    resp = client.post("/api/generate-script", json={**PAYLOAD, "tone": "enthusiastic"})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"script", "talkingPoints"}
    assert "Acme CRM" in body["script"]
    assert "  - analytics" in body["talkingPoints"]


def test_blank_required_field_is_client_error() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig()))

    resp = client.post("/api/generate-script", json={**PAYLOAD, "painPoints": ""})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing required field: painPoints"


def test_feature_list_of_only_commas_is_client_error() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig()))

    resp = client.post("/api/generate-script", json={**PAYLOAD, "keyFeatures": ","})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Missing required field: keyFeatures"


def test_absent_required_field_is_rejected_by_schema() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig()))
    payload = {key: value for key, value in PAYLOAD.items() if key != "keyFeatures"}

    resp = client.post("/api/generate-script", json=payload)

    assert resp.status_code == 422


def test_missing_credential_is_server_error() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig(provider="google")))

    resp = client.post("/api/generate-script", json=PAYLOAD)

    assert resp.status_code == 500
    assert "google" in resp.json()["detail"]


def test_upstream_authentication_failure_is_distinguished() -> None:
    client = _client(_failing_service(UpstreamError("openai", "bad key", authentication=True)))

    resp = client.post("/api/generate-script", json=PAYLOAD)

    assert resp.status_code == 401
    assert resp.json()["detail"].startswith("openai")


def test_upstream_failure_is_bad_gateway() -> None:
    client = _client(_failing_service(UpstreamError("openai", "overloaded")))

    resp = client.post("/api/generate-script", json=PAYLOAD)

    assert resp.status_code == 502


def test_provider_unavailable_from_adapter_is_server_error() -> None:
    client = _client(_failing_service(ProviderUnavailableError("openai")))

    resp = client.post("/api/generate-script", json=PAYLOAD)

    assert resp.status_code == 500


def test_provider_status() -> None:
    client = _client(ScriptGeneratorService(ProviderConfig(provider="anthropic")))

    resp = client.get("/api/provider-status")

    assert resp.status_code == 200
    assert resp.json() == {"provider": "anthropic", "configured": False}
