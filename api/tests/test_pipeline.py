"""Tests for the OpenAI-backed icon renderer (iconforge/icons/pipeline.py). No network."""

from __future__ import annotations

import io
import json
from urllib.error import HTTPError

import pytest

from iconforge.icons import pipeline
from iconforge.icons.errors import ModelCallFailed
from iconforge.icons.pipeline import OpenAIIconRenderer, estimate_text_cost, get_icon_model_config

SVG = '<svg viewBox="0 0 24 24"><path stroke-width="2" stroke="#000000" d="M4 4h16"/></svg>'


class _FakeResponse:
    def __init__(self, body: dict | bytes) -> None:
        self._raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")

    def read(self) -> bytes:
        return self._raw

    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        return None


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


def _install_urlopen(monkeypatch, body: dict | bytes, captured: dict) -> None:
    def fake_urlopen(req, timeout=None):
        captured["url"] = req.full_url
        captured["payload"] = json.loads(req.data.decode("utf-8"))
        captured["timeout"] = timeout
        return _FakeResponse(body)

    monkeypatch.setattr(pipeline, "urlopen", fake_urlopen)


class TestModelConfig:
    def test_defaults(self, monkeypatch):
        for name in ("ICON_MODEL", "ICON_MODEL_TEMPERATURE", "ICON_MODEL_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)
        cfg = get_icon_model_config()
        assert cfg.model == "gpt-4.1-mini"
        assert cfg.temperature == 0.0
        assert cfg.timeout_seconds == 60.0

    def test_env_overrides_and_bad_numbers(self, monkeypatch):
        monkeypatch.setenv("ICON_MODEL", "gpt-4o")
        monkeypatch.setenv("ICON_MODEL_TIMEOUT_SECONDS", "not-a-number")
        cfg = get_icon_model_config()
        assert cfg.model == "gpt-4o"
        assert cfg.timeout_seconds == 60.0


class TestRender:
    def test_extracts_svg_and_usage(self, monkeypatch, api_key):
        captured: dict = {}
        body = {
            "choices": [{"message": {"content": f"```svg\n{SVG}\n```"}}],
            "usage": {"prompt_tokens": 1000, "completion_tokens": 500},
        }
        _install_urlopen(monkeypatch, body, captured)

        result = OpenAIIconRenderer().render("Draw a download arrow")

        assert result.svg == SVG
        assert result.usage.input_tokens == 1000
        assert result.usage.output_tokens == 500
        assert result.usage.estimated_cost_usd == pytest.approx(0.0012)
        assert captured["url"].endswith("/chat/completions")
        assert captured["payload"]["messages"][1] == {"role": "user", "content": "Draw a download arrow"}
        assert 'viewBox="0 0 24 24"' in captured["payload"]["messages"][0]["content"]

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ModelCallFailed, match="OPENAI_API_KEY"):
            OpenAIIconRenderer().render("x")

    def test_reply_without_svg(self, monkeypatch, api_key):
        _install_urlopen(monkeypatch, {"choices": [{"message": {"content": "Sorry."}}]}, {})
        with pytest.raises(ModelCallFailed, match="<svg>"):
            OpenAIIconRenderer().render("x")

    def test_no_choices(self, monkeypatch, api_key):
        _install_urlopen(monkeypatch, {"choices": []}, {})
        with pytest.raises(ModelCallFailed, match="no choices"):
            OpenAIIconRenderer().render("x")

    def test_http_error(self, monkeypatch, api_key):
        def failing_urlopen(req, timeout=None):
            raise HTTPError(req.full_url, 429, "Too Many Requests", {}, io.BytesIO(b"rate limited"))

        monkeypatch.setattr(pipeline, "urlopen", failing_urlopen)
        with pytest.raises(ModelCallFailed, match="HTTP 429 rate limited"):
            OpenAIIconRenderer().render("x")

    def test_non_json_reply(self, monkeypatch, api_key):
        _install_urlopen(monkeypatch, b"<html>bad gateway</html>", {})
        with pytest.raises(ModelCallFailed, match="not valid JSON"):
            OpenAIIconRenderer().render("x")

    def test_timeout_while_reading(self, monkeypatch, api_key):
        def slow_urlopen(req, timeout=None):
            raise TimeoutError("The read operation timed out")

        monkeypatch.setattr(pipeline, "urlopen", slow_urlopen)
        with pytest.raises(ModelCallFailed, match="timed out"):
            OpenAIIconRenderer().render("x")


def test_estimate_text_cost_clamps_negatives():
    assert estimate_text_cost(-5, 1_000_000, input_rate_per_1m=1.0, output_rate_per_1m=2.0) == 2.0
