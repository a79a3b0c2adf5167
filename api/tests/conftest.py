"""Shared fixtures: a valid icon config, a FastAPI TestClient and in-memory collaborators."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from iconforge.icons.feedback import FeedbackEntry
from iconforge.icons.pipeline import RenderResult, UsageCost
from iconforge.main import app, get_feedback_sink, get_icon_renderer

COMPLIANT_SVG = '<svg viewBox="0 0 24 24"><path stroke-width="2" stroke="#000000" d="M12 4v12"/></svg>'


class RecordingSink:
    def __init__(self) -> None:
        self.entries: list[FeedbackEntry] = []

    def record(self, entry: FeedbackEntry) -> None:
        self.entries.append(entry)


class FakeRenderer:
    def __init__(self, svg: str = COMPLIANT_SVG, error: Exception | None = None) -> None:
        self.svg = svg
        self.error = error
        self.prompts: list[str] = []

    def render(self, prompt: str) -> RenderResult:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        usage = UsageCost(model="fake-model", input_tokens=10, output_tokens=20, estimated_cost_usd=0.0, raw_usage={})
        return RenderResult(svg=self.svg, raw_text=self.svg, usage=usage)


@pytest.fixture
def valid_config() -> dict[str, Any]:
    return {
        "name": "download",
        "description": "Arrow pointing down into a horizontal base or tray",
        "style": {
            "strokeWeight": "2dp",
            "fill": "outline",
            "cornerStyle": "rounded",
            "perspective": "flat",
            "gridAlignment": "pixel-perfect",
            "shading": "none",
            "decorativeElements": "none",
        },
        "dimensions": {"canvasSize": 24, "padding": 2, "liveArea": 20},
        "doNotInclude": ["text", "labels", "background"],
        "output": {"format": "SVG", "background": "transparent", "colorMode": "monochrome"},
        "targetUse": "stock icon for interface",
    }


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def client(sink: RecordingSink, renderer: FakeRenderer):
    app.dependency_overrides[get_feedback_sink] = lambda: sink
    app.dependency_overrides[get_icon_renderer] = lambda: renderer
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
