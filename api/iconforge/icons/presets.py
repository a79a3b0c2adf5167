from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping

from .errors import UnknownPreset
from .models import StyleSpec

StylePreset = StyleSpec

DEFAULT_PRESET = "material-design"

STYLE_PRESETS: Mapping[str, StylePreset] = MappingProxyType(
    {
        "material-design": StyleSpec(
            stroke_weight="2dp",
            fill="outline",
            corner_style="rounded",
            perspective="flat",
            grid_alignment="pixel-perfect",
            shading="none",
            decorative_elements="none",
        ),
        "windchill-enterprise": StyleSpec(
            stroke_weight="bold",
            fill="outline",
            corner_style="sharp",
            perspective="orthographic",
            grid_alignment="pixel-perfect",
            shading="minimal",
            decorative_elements="none",
        ),
        "creative-hand-drawn": StyleSpec(
            stroke_weight="bold",
            fill="outline",
            corner_style="rounded",
            perspective="slight-tilt",
            grid_alignment="optical",
            shading="minimal",
            decorative_elements="sparkles",
        ),
        "carbon-design": StyleSpec(
            stroke_weight="2dp",
            fill="outline",
            corner_style="mixed",
            perspective="flat",
            grid_alignment="pixel-perfect",
            shading="none",
            decorative_elements="none",
        ),
        "pixel-art": StyleSpec(
            stroke_weight="thin",
            fill="filled",
            corner_style="sharp",
            perspective="flat",
            grid_alignment="pixel-perfect",
            shading="none",
            decorative_elements="none",
        ),
    }
)

PRESET_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "material-design": "Google Material Design specifications with 2dp strokes and rounded corners",
        "windchill-enterprise": "PTC Windchill enterprise standards with bold strokes and sharp precision",
        "creative-hand-drawn": "Playful isometric style with organic personality and decorative elements",
        "carbon-design": "IBM Carbon Design system with mixed corners and technical precision",
        "pixel-art": "Retro pixel-perfect style with sharp edges and filled shapes",
    }
)


def resolve_preset(preset_id: str) -> StylePreset:
    preset = STYLE_PRESETS.get(preset_id)
    if preset is None:
        raise UnknownPreset(preset_id, STYLE_PRESETS.keys())
    return preset.model_copy()


def preset_display_name(preset_id: str) -> str:
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), preset_id.replace("-", " "))


def preset_description(preset_id: str) -> str:
    return PRESET_DESCRIPTIONS.get(preset_id, "Custom style preset")


def list_presets() -> list[dict[str, Any]]:
    return [
        {
            "id": preset_id,
            "name": preset_display_name(preset_id),
            "style": style.model_dump(mode="json", by_alias=True),
            "description": preset_description(preset_id),
        }
        for preset_id, style in STYLE_PRESETS.items()
    ]
