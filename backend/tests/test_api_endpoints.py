"""HTTP-level tests for the suggestion and room classifier endpoints."""

import httpx
import pytest
from conftest import FakeClassifier

from aesthetic.classifier.room_service import RoomClassifierService
from aesthetic.main import app
from aesthetic.models.contracts import ErrorResponse, FinalPlan
from aesthetic.synthesis.pipeline import DesignRecommendationEngine

AZURE_KITCHEN = {
    "tagsResult": {
        "values": [
            {"name": "kitchen", "confidence": 0.934},
            {"name": "window", "confidence": 0.4},
        ]
    },
    "objectsResult": {
        "values": [
            {"name": "window", "confidence": 0.71, "boundingBox": {"x": 1, "y": 2, "w": 30, "h": 40}},
        ]
    },
}


class TestSuggestions:
    """POST /api/v1/suggestions returns a camelCase FinalPlan."""

    @pytest.mark.asyncio
    async def test_prompt_only_returns_template_plan(self, client):
        resp = await client.post(
            "/api/v1/suggestions", json={"prompt": "make it cozy", "requestId": 3}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["styleName"] == "Scandinavian Cozy"
        assert body["style"] == {"name": body["styleName"], "description": body["styleSummary"]}
        assert body["templateInfo"]["reason"] == "model-unavailable"
        assert body["templateInfo"]["templateName"] == "Modern Minimalist Living Room"
        assert body["photoInsights"]["detectedRooms"] == ["Living Room", "Primary Bedroom"]
        assert body["sourceImage"] is None
        assert "generatedAt" in body
        FinalPlan.model_validate(body)

    @pytest.mark.asyncio
    async def test_classifier_verdict_in_response(
        self, client, knowledge, image_b64, bathroom_analysis
    ):
        app.state.engine = DesignRecommendationEngine(
            knowledge, classifier=FakeClassifier(bathroom_analysis)
        )
        resp = await client.post("/api/v1/suggestions", json={"imageBase64": image_b64})
        assert resp.status_code == 200
        analysis = resp.json()["analysis"]
        assert analysis["rooms"][0] == "Bathroom"
        assert analysis["roomAnalysis"]["roomType"] == "Bathroom"
        assert analysis["roomAnalysis"]["hasWindow"] is True

    @pytest.mark.asyncio
    async def test_snake_case_fields_accepted(self, client):
        resp = await client.post(
            "/api/v1/suggestions", json={"prompt": "kitchen", "request_id": 1}
        )
        assert resp.status_code == 200
        assert resp.json()["analysis"]["rooms"][0] == "Kitchen"

    @pytest.mark.asyncio
    async def test_unreadable_image_is_422(self, client):
        resp = await client.post("/api/v1/suggestions", json={"imageBase64": "%%%"})
        assert resp.status_code == 422
        er = ErrorResponse.model_validate(resp.json())
        assert er.error == "no_image_data"
        assert er.retryable is False
        assert "different image" in er.message

    @pytest.mark.asyncio
    async def test_deadline_out_of_range(self, client):
        resp = await client.post("/api/v1/suggestions", json={"deadlineSeconds": 0})
        assert resp.status_code == 422
        er = ErrorResponse.model_validate(resp.json())
        assert er.error == "validation_error"
        assert "deadlineSeconds" in er.message

    @pytest.mark.asyncio
    async def test_wrong_field_type(self, client):
        resp = await client.post("/api/v1/suggestions", json={"requestId": "tomorrow"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "validation_error"


class TestAnalyzeRoom:
    """POST /api/analyze-room answers a verdict or a bare {error} body."""

    @pytest.mark.asyncio
    async def test_missing_image(self, client):
        resp = await client.post("/api/analyze-room", json={})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Provide an image url or base64 data."}

    @pytest.mark.asyncio
    async def test_azure_not_configured(self, client):
        resp = await client.post("/api/analyze-room", json={"url": "https://cdn.test/a.jpg"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Azure Vision is not configured."}

    @pytest.mark.asyncio
    async def test_verdict(self, client):
        app.state.room_service = RoomClassifierService(
            "https://vision.test",
            "az-key",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=AZURE_KITCHEN)),
        )
        resp = await client.post("/api/analyze-room", json={"url": "https://cdn.test/a.jpg"})
        assert resp.status_code == 200
        assert resp.json() == {
            "roomType": "kitchen",
            "roomConfidence": 0.934,
            "hasWindow": True,
            "windowConfidence": 0.71,
            "windowBoxes": [{"x": 1.0, "y": 2.0, "w": 30.0, "h": 40.0}],
        }

    @pytest.mark.asyncio
    async def test_azure_rejection_status_passed_through(self, client):
        app.state.room_service = RoomClassifierService(
            "https://vision.test",
            "az-key",
            transport=httpx.MockTransport(lambda r: httpx.Response(401, text="Access denied")),
        )
        resp = await client.post("/api/analyze-room", json={"base64": "aGVsbG8="})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Access denied"}

    @pytest.mark.asyncio
    async def test_bad_base64(self, client):
        app.state.room_service = RoomClassifierService("https://vision.test", "az-key")
        resp = await client.post("/api/analyze-room", json={"base64": "abc"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid base64 image payload."}
