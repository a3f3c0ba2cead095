"""Shared fixtures: knowledge tables, in-memory providers and the ASGI client."""

import base64
import io
import json
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image

from aesthetic.classifier.room_service import RoomClassifierService
from aesthetic.knowledge.base import RoomKnowledgeBase, default_knowledge_base
from aesthetic.models.contracts import (
    ImagePayload,
    ModelTextResponse,
    RoomAnalysis,
    SceneRoom,
    VisionAnnotation,
)
from aesthetic.synthesis.pipeline import DesignRecommendationEngine


def png_bytes(color: str = "white", size: tuple[int, int] = (4, 4)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


class FakeClassifier:
    def __init__(self, analysis: RoomAnalysis | None = None, error: Exception | None = None):
        self.analysis = analysis
        self.error = error
        self.calls: list[tuple[ImagePayload | None, str | None]] = []

    async def classify(self, image, image_uri=None):
        self.calls.append((image, image_uri))
        if self.error:
            raise self.error
        return self.analysis


class FakeVision:
    def __init__(self, annotation: VisionAnnotation | None = None):
        self.annotation = annotation
        self.calls: list[ImagePayload] = []

    async def annotate(self, image):
        self.calls.append(image)
        return self.annotation


class FakeCaptioner:
    def __init__(self, caption: str | None = None, error: Exception | None = None):
        self.caption_text = caption
        self.error = error
        self.calls = 0

    async def caption(self, image):
        self.calls += 1
        if self.error:
            raise self.error
        return self.caption_text


class FakeGenerator:
    """Text generator that replays canned outputs (or raises) in order."""

    provider = "fake"

    def __init__(self, *outputs: Any):
        self.outputs = list(outputs)
        self.prompts: list[str] = []
        self.parameters: list[dict[str, Any]] = []

    async def generate(self, prompt, parameters):
        self.prompts.append(prompt)
        self.parameters.append(parameters)
        output = self.outputs.pop(0) if self.outputs else None
        if isinstance(output, Exception):
            raise output
        if isinstance(output, dict):
            output = json.dumps(output)
        return ModelTextResponse.of(self.provider, output)


@pytest.fixture
def knowledge() -> RoomKnowledgeBase:
    return default_knowledge_base()


@pytest.fixture
def image_b64() -> str:
    return base64.b64encode(png_bytes()).decode("ascii")


@pytest.fixture
def bathroom_analysis() -> RoomAnalysis:
    return RoomAnalysis(
        room_type="bathroom",
        room_confidence=0.95,
        has_window=True,
        window_confidence=0.82,
    )


@pytest.fixture
def living_room_vision() -> VisionAnnotation:
    return VisionAnnotation(
        rooms=[SceneRoom(name="Living Room", source="vision", score=1.4)],
        furniture=["Sofa", "Coffee Table", "Television"],
        lighting=["Lamp lighting"],
        is_interior=True,
        description="Living room, Couch, Furniture",
    )


@pytest.fixture
async def client(knowledge):
    """ASGI client with an engine that has no external providers wired."""
    from aesthetic.main import app

    app.state.engine = DesignRecommendationEngine(knowledge)
    app.state.room_service = RoomClassifierService("", "")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    del app.state.engine
    del app.state.room_service
