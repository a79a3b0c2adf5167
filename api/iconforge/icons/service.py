"""Request-level operations: validation at the boundary, synthesis, and response shaping."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog

from .errors import IconForgeError, InternalFailure, InvalidConfiguration, MissingInput
from .feedback import FeedbackSink, record_feedback
from .inference import infer_config
from .models import IconConfig, validate_icon_config
from .pipeline import IconRenderer
from .presets import DEFAULT_PRESET, list_presets
from .prompt_builder import build_creative_icon_prompt, build_icon_prompt, build_prompt_variants, sha256_json
from .svg_checks import check_svg, summarize_report, to_react_component

PROMPT_VERSION = "1.0"
CREATIVE_PROMPT_VERSION = "1.0-creative"

logger = structlog.get_logger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _inferred_defaults() -> dict[str, Any]:
    return {
        "dimensions": {"canvasSize": 24, "padding": 2, "liveArea": 20},
        "doNotInclude": ["text", "labels", "background"],
        "output": {"format": "SVG", "background": "transparent", "colorMode": "monochrome"},
        "targetUse": "stock icon for interface",
    }


@contextmanager
def _internal(operation: str) -> Iterator[None]:
    try:
        yield
    except IconForgeError:
        raise
    except Exception as e:
        logger.exception("icon_internal_failure", operation=operation)
        raise InternalFailure(operation, str(e)) from e


def require_config(raw: Any, *, error: str = "Invalid configuration") -> IconConfig:
    result = validate_icon_config(raw)
    if result.config is None:
        logger.warning("icon_config_rejected", error_count=len(result.errors), details=result.details)
        raise InvalidConfiguration(result.details, error=error)
    return result.config


def _prompt_metadata(prompt: str, config: IconConfig, *, kind: str, version: str) -> dict[str, Any]:
    return {
        "promptId": sha256_json({"kind": kind, "config": config.to_payload()})[:16],
        "promptLength": len(prompt),
        "generatedAt": _now_iso(),
        "version": version,
    }


def generate_prompt(raw: Any) -> dict[str, Any]:
    with _internal("generate prompt"):
        config = require_config(raw)
        prompt = build_icon_prompt(config)
    logger.info("prompt_generated", kind="standard", config=config.name, prompt_length=len(prompt))
    return {
        "prompt": prompt,
        "config": config.to_payload(),
        "metadata": _prompt_metadata(prompt, config, kind="standard", version=PROMPT_VERSION),
    }


def generate_creative_prompt(raw: Any) -> dict[str, Any]:
    with _internal("generate creative prompt"):
        config = require_config(raw)
        prompt = build_creative_icon_prompt(config)
    logger.info("prompt_generated", kind="creative", config=config.name, prompt_length=len(prompt))
    return {
        "prompt": prompt,
        "config": config.to_payload(),
        "creative": True,
        "metadata": _prompt_metadata(prompt, config, kind="creative", version=CREATIVE_PROMPT_VERSION),
    }


def parse_input(text: Any, preset: str = DEFAULT_PRESET) -> dict[str, Any]:
    if not isinstance(text, str) or not text.strip():
        raise MissingInput()

    with _internal("parse input"):
        partial = infer_config(text, preset)
        config = require_config(
            {**partial.to_payload(), **_inferred_defaults()},
            error="Failed to create valid configuration",
        )
    logger.info("input_parsed", preset=preset, config=config.name)
    return {
        "originalInput": text,
        "parsedConfig": config.to_payload(),
        "preset": preset,
        "suggestions": {"relatedIcons": [], "alternativeNames": []},
    }


def presets_catalog() -> dict[str, Any]:
    with _internal("fetch presets"):
        presets = list_presets()
    return {"presets": presets, "total": len(presets), "default": DEFAULT_PRESET}


def generate_variants(raw: Any) -> dict[str, Any]:
    with _internal("generate variants"):
        config = require_config(raw)
        variants = build_prompt_variants(config)
    logger.info("prompt_variants_generated", config=config.name, total=len(variants))
    return {
        "config": config.to_payload(),
        "variants": variants,
        "metadata": {
            "totalVariants": len(variants),
            "generatedAt": _now_iso(),
            "version": PROMPT_VERSION,
        },
    }


def submit_feedback(
    *,
    prompt_id: str | None,
    config: Any,
    rating: Any,
    comments: Any,
    generated_icon_url: Any,
    sink: FeedbackSink,
) -> dict[str, Any]:
    name = config.get("name") if isinstance(config, dict) else None
    config_name = name if isinstance(name, str) else None
    with _internal("record feedback"):
        feedback_id = record_feedback(
            prompt_id,
            config_name,
            rating,
            comments,
            sink=sink,
            generated_icon_url=generated_icon_url,
        )
    return {"message": "Feedback recorded successfully", "feedbackId": feedback_id, "status": "received"}


def validate_svg(svg: str) -> list[dict[str, str]]:
    return [r.to_payload() for r in check_svg(svg)]


def export_react(svg: str, component_name: str = "GeneratedIcon") -> dict[str, str]:
    return {"component": to_react_component(svg, component_name)}


def generate_icon(raw: Any, *, renderer: IconRenderer, creative: bool = False) -> dict[str, Any]:
    with _internal("generate icon prompt"):
        config = require_config(raw)
        prompt = build_creative_icon_prompt(config) if creative else build_icon_prompt(config)

    result = renderer.render(prompt)
    rules = check_svg(result.svg)
    summary = summarize_report(rules)
    logger.info("icon_generated", config=config.name, creative=creative, summary=summary.describe())
    return {
        "prompt": prompt,
        "config": config.to_payload(),
        "svg": result.svg,
        "validation": [r.to_payload() for r in rules],
        "summary": summary.to_payload(),
        "usage": {
            "model": result.usage.model,
            "inputTokens": result.usage.input_tokens,
            "outputTokens": result.usage.output_tokens,
            "estimatedCostUsd": result.usage.estimated_cost_usd,
        },
    }
