"""
Tests for the HTTP surface and the analysis pipeline behind it.
"""

import json

import pytest
from fastapi.testclient import TestClient

import main
from veritas_lens.api import analysis_api
from veritas_lens.services.analysis_service import AnalysisService
from veritas_lens.services.evidence_service import EvidenceService
from veritas_lens.services.verification_service import VerificationError, VerificationService


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def use_service(monkeypatch):
    def _use(service):
        monkeypatch.setattr(analysis_api, "get_analysis_service", lambda: service)
    return _use


def build_service(fake_client, mode, *replies):
    gemini = fake_client(*replies)
    service = AnalysisService(
        evidence_service=EvidenceService(mode=mode),
        verification_service=VerificationService(client=gemini),
    )
    return service, gemini


def test_root_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Veritas Lens AI Server is running!"


@pytest.mark.parametrize("body", [{}, {"claim": ""}, {"claim": "   "}, {"claim": None}, {"claim": 42}])
def test_missing_claim_is_rejected(client, body):
    response = client.post("/analyze", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Claim is required in the request body."}


def test_malformed_body_is_rejected(client):
    response = client.post("/analyze", content="not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Claim is required in the request body."}


def test_knowledge_base_analysis(client, use_service, fake_client):
    service, gemini = build_service(
        fake_client, "knowledge_base",
        '```json\n{"verdict": "False", "confidence": 98, "summary": "Siriraj Hospital is in Bangkok, Thailand."}\n```'
    )
    use_service(service)

    response = client.post("/analyze", json={"claim": "Siriraj Hospital is in Malaysia."})

    assert response.status_code == 200
    assert response.json() == {
        "verdict": "False",
        "confidence": 98.0,
        "summary": "Siriraj Hospital is in Bangkok, Thailand.",
        "supporting_evidence": [],
        "contradicting_evidence": [{
            "source": "https://en.wikipedia.org/wiki/Siriraj_Hospital",
            "text": "Faculty of Medicine Siriraj Hospital, Mahidol University is the oldest and largest hospital in Thailand, located in Bangkok.",
            "credibility": "medium",
        }],
        "evidence_mode": "knowledge_base",
    }
    assert 'Claim: "Siriraj Hospital is in Malaysia."' in gemini.models.calls[0]["contents"]


def test_claim_is_trimmed_before_analysis(client, use_service, fake_client):
    service, gemini = build_service(
        fake_client, "keyword",
        '{"verdict": "True", "confidence": 70, "summary": "Cats purr."}'
    )
    use_service(service)

    response = client.post("/analyze", json={"claim": "  Cats can purr \n"})

    assert response.status_code == 200
    assert 'Claim: "Cats can purr"' in gemini.models.calls[0]["contents"]


def test_web_search_analysis_tags_model_evidence(client, use_service, fake_client):
    reply = json.dumps({
        "verdict": "False",
        "confidence": 90,
        "summary": "The Great Wall is not visible to the naked eye from orbit.",
        "supporting_evidence": [{"source": "https://www.reddit.com/r/space/comments/1", "text": "You can totally see it."}],
        "contradicting_evidence": [{"source": "https://www.nasa.gov/image-article/great-wall-of-china/", "text": "Generally not visible."}],
    })
    service, _ = build_service(fake_client, "web_search", reply)
    use_service(service)

    response = client.post("/analyze", json={"claim": "The Great Wall is visible from space"})

    data = response.json()
    assert response.status_code == 200
    assert data["evidence_mode"] == "web_search"
    assert data["supporting_evidence"][0]["credibility"] == "low"
    assert data["contradicting_evidence"][0]["credibility"] == "high"


def test_upstream_failure_returns_500(client, use_service, fake_client):
    service, _ = build_service(fake_client, "knowledge_base", "Sorry, I can't do that.")
    use_service(service)

    response = client.post("/analyze", json={"claim": "Siriraj Hospital is in Malaysia."})

    assert response.status_code == 500
    assert response.json() == {"error": "An internal server error occurred during analysis."}


def test_service_construction_failure_returns_500(client, monkeypatch):
    def broken():
        raise ValueError("GEMINI_API_KEY environment variable is not set")
    monkeypatch.setattr(analysis_api, "get_analysis_service", broken)

    response = client.post("/analyze", json={"claim": "Cats can purr"})

    assert response.status_code == 500
    assert response.json() == {"error": "An internal server error occurred during analysis."}


def test_service_errors_propagate_from_pipeline(fake_client):
    service, _ = build_service(fake_client, "keyword", Exception("connection reset"))

    with pytest.raises(VerificationError):
        service.analyze("Cats can purr")


def test_cors_allows_any_origin(client):
    response = client.options(
        "/analyze",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")
