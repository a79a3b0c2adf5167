from __future__ import annotations

import hashlib
import json
from typing import Any

from .models import IconConfig

DETAILED_DESCRIPTION_SUFFIX = ". Focus on clarity and professional appearance with precise geometric construction."


def sha256_json(obj: dict[str, Any]) -> str:
    payload = json.dumps(obj, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


def _num(value: float) -> str:
    # 24.0 renders as "24", 1.5 as "1.5".
    return str(int(value)) if float(value).is_integer() else str(value)


def build_icon_prompt(config: IconConfig) -> str:
    style = config.style
    dims = config.dimensions
    output = config.output
    canvas = _num(dims.canvas_size)
    live = _num(dims.live_area)
    return "\n".join(
        [
            f'Generate a professional {config.target_use} for "{config.name}". {config.description}',
            "",
            "## VISUAL STYLE REQUIREMENTS",
            f"- **Stroke Weight**: {style.stroke_weight}",
            f"- **Fill Style**: {style.fill}",
            f"- **Corner Treatment**: {style.corner_style}",
            f"- **Perspective**: {style.perspective}",
            f"- **Grid Alignment**: {style.grid_alignment}",
            f"- **Shading**: {style.shading}",
            f"- **Decorative Elements**: {style.decorative_elements}",
            "",
            "## CANVAS SPECIFICATIONS",
            f"- **Canvas Size**: {canvas}×{canvas}px",
            f"- **Padding**: {_num(dims.padding)}px on all sides",
            f"- **Live Area**: {live}×{live}px (usable space)",
            "",
            "## OUTPUT REQUIREMENTS",
            f"- **Format**: {output.format} with proper structure",
            f"- **Background**: {output.background}",
            f"- **Color Mode**: {output.color_mode}",
            "- **Scalability**: Must be crisp at 16px, 24px, and 48px sizes",
            "",
            "## STRICT EXCLUSIONS",
            f"Do NOT include: {', '.join(config.do_not_include)}",
            "",
            "## VALIDATION CHECKLIST",
            "- [ ] Icon represents the concept clearly",
            "- [ ] Follows specified style guidelines exactly",
            "- [ ] Fits within live area constraints",
            "- [ ] No prohibited elements included",
            f"- [ ] Proper {output.format} structure with viewBox",
            "",
            "Generate the icon following these specifications exactly.",
        ]
    )


def build_creative_icon_prompt(config: IconConfig) -> str:
    creative = "\n".join(
        [
            "## CREATIVE PERSONALITY GUIDELINES",
            "- **Hand-drawn Character**: Allow slight organic imperfections and asymmetry",
            "- **Playful Energy**: Add dynamic tilts and implied motion where appropriate",
            f"- **Decorative Accents**: Include {config.style.decorative_elements} balanced around main elements",
            "- **Organic Curves**: Use flowing lines instead of rigid geometry",
            "- **Visual Warmth**: Create approachable, friendly character while maintaining clarity",
            "",
            "## ISOMETRIC CREATIVE TREATMENT",
            "- Apply subtle 15-20 degree perspective tilt for depth",
            "- Add depth hints with bold shadows or thicker lines on one side",
            "- Maintain recognizable silhouette from multiple angles",
            "- Balance playfulness with professional usability",
            "",
            "The icon should have distinctive creative personality while remaining functionally clear for UI use.",
        ]
    )
    return f"{build_icon_prompt(config)}\n\n{creative}"


def build_minimal_prompt(config: IconConfig) -> str:
    style = config.style
    return (
        f'Create a {config.output.format} icon for "{config.name}": {config.description}. '
        f"Style: {style.stroke_weight} strokes, {style.fill} fill, {style.corner_style} corners. "
        f"Canvas: {_num(config.dimensions.canvas_size)}px. No text or labels."
    )


def build_prompt_variants(config: IconConfig) -> dict[str, str]:
    detailed = config.model_copy(update={"description": f"{config.description}{DETAILED_DESCRIPTION_SUFFIX}"})
    return {
        "standard": build_icon_prompt(config),
        "detailed": build_icon_prompt(detailed),
        "creative": build_creative_icon_prompt(config),
        "minimal": build_minimal_prompt(config),
    }
