from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import structlog

from .errors import ModelCallFailed
from .style_guide import STYLE_GUIDE
from .svg_checks import extract_svg

OPENAI_API_BASE = "https://api.openai.com/v1"

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class IconModelConfig:
    model: str
    temperature: float
    timeout_seconds: float
    input_usd_per_1m: float
    output_usd_per_1m: float


@dataclass(frozen=True)
class UsageCost:
    model: str
    input_tokens: int
    output_tokens: int
    estimated_cost_usd: float
    raw_usage: dict[str, Any]


@dataclass(frozen=True)
class RenderResult:
    svg: str
    raw_text: str
    usage: UsageCost


class IconRenderer(Protocol):
    def render(self, prompt: str) -> RenderResult: ...


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_icon_model_config() -> IconModelConfig:
    return IconModelConfig(
        model=os.environ.get("ICON_MODEL", "gpt-4.1-mini").strip() or "gpt-4.1-mini",
        temperature=_env_float("ICON_MODEL_TEMPERATURE", 0.0),
        timeout_seconds=_env_float("ICON_MODEL_TIMEOUT_SECONDS", 60.0),
        input_usd_per_1m=_env_float("ICON_MODEL_INPUT_USD_PER_1M", 0.4),
        output_usd_per_1m=_env_float("ICON_MODEL_OUTPUT_USD_PER_1M", 1.6),
    )


def _require_openai_api_key() -> str:
    key = os.environ.get("OPENAI_API_KEY", "").strip()
    if not key:
        raise ModelCallFailed("OPENAI_API_KEY is not set")
    return key


def _post_openai_json(path: str, payload: dict[str, Any], *, timeout: float) -> dict[str, Any]:
    api_key = _require_openai_api_key()
    req = Request(
        f"{OPENAI_API_BASE}{path}",
        data=json.dumps(payload).encode("utf-8"),
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        method="POST",
    )
    try:
        with urlopen(req, timeout=timeout) as resp:  # nosec - backend service call
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        body = e.read().decode("utf-8", errors="replace") if hasattr(e, "read") else ""
        raise ModelCallFailed(f"OpenAI request failed: HTTP {e.code} {body[:400]}") from e
    except (URLError, OSError) as e:
        raise ModelCallFailed(f"OpenAI request failed: {e}") from e

    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ModelCallFailed(f"OpenAI response was not valid JSON: {raw[:200]}") from e
    if not isinstance(obj, dict):
        raise ModelCallFailed("OpenAI response was not a JSON object")
    return obj


def estimate_text_cost(
    input_tokens: int,
    output_tokens: int,
    *,
    input_rate_per_1m: float,
    output_rate_per_1m: float,
) -> float:
    in_cost = (max(input_tokens, 0) / 1_000_000.0) * max(input_rate_per_1m, 0.0)
    out_cost = (max(output_tokens, 0) / 1_000_000.0) * max(output_rate_per_1m, 0.0)
    return round(in_cost + out_cost, 8)


def renderer_system_prompt() -> str:
    g = STYLE_GUIDE
    return "\n".join(
        [
            "You are an icon illustrator that answers with SVG markup only.",
            "Return exactly one <svg> element. No markdown and no explanations.",
            f'Use viewBox="{g.view_box}", stroke="{g.stroke_color}" and stroke-width="{g.stroke_width}".',
            f"Keep all geometry inside the {g.live_area}x{g.live_area} live area ({g.padding}px padding).",
            f'Use fill="{g.default_fill}" unless the request asks for filled shapes.',
            "Never use gradients, filters, shadows, text or raster images.",
        ]
    )


class OpenAIIconRenderer:
    """Single call-and-await renderer backed by the OpenAI chat completions API. No retries."""

    def __init__(self, config: IconModelConfig | None = None) -> None:
        self.config = config or get_icon_model_config()

    def render(self, prompt: str) -> RenderResult:
        cfg = self.config
        payload = {
            "model": cfg.model,
            "temperature": cfg.temperature,
            "messages": [
                {"role": "system", "content": renderer_system_prompt()},
                {"role": "user", "content": prompt},
            ],
        }
        data = _post_openai_json("/chat/completions", payload, timeout=cfg.timeout_seconds)

        choices = data.get("choices") or []
        if not choices:
            raise ModelCallFailed("Icon model returned no choices")
        first = choices[0] if isinstance(choices[0], dict) else {}
        msg = first.get("message") if isinstance(first.get("message"), dict) else {}
        raw_text = str(msg.get("content") or "").strip()
        svg = extract_svg(raw_text)
        if svg is None:
            raise ModelCallFailed("Icon model response did not contain an <svg> element")

        usage_obj = data.get("usage") if isinstance(data.get("usage"), dict) else {}
        input_tokens = int(usage_obj.get("prompt_tokens") or 0)
        output_tokens = int(usage_obj.get("completion_tokens") or 0)
        usage = UsageCost(
            model=cfg.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_usd=estimate_text_cost(
                input_tokens,
                output_tokens,
                input_rate_per_1m=cfg.input_usd_per_1m,
                output_rate_per_1m=cfg.output_usd_per_1m,
            ),
            raw_usage=usage_obj,
        )
        logger.info(
            "icon_model_call",
            model=cfg.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            estimated_cost_usd=usage.estimated_cost_usd,
        )
        return RenderResult(svg=svg, raw_text=raw_text, usage=usage)
