"""Tests for deterministic prompt synthesis (iconforge/icons/prompt_builder.py)."""

import pytest

from iconforge.icons.models import validate_icon_config
from iconforge.icons.prompt_builder import (
    DETAILED_DESCRIPTION_SUFFIX,
    build_creative_icon_prompt,
    build_icon_prompt,
    build_minimal_prompt,
    build_prompt_variants,
    sha256_json,
)

SECTIONS = [
    "## VISUAL STYLE REQUIREMENTS",
    "## CANVAS SPECIFICATIONS",
    "## OUTPUT REQUIREMENTS",
    "## STRICT EXCLUSIONS",
    "## VALIDATION CHECKLIST",
]


@pytest.fixture
def config(valid_config):
    return validate_icon_config(valid_config).config


class TestStandardPrompt:
    def test_identity_line(self, config):
        first = build_icon_prompt(config).splitlines()[0]
        assert first == (
            'Generate a professional stock icon for interface for "download". '
            "Arrow pointing down into a horizontal base or tray"
        )

    def test_sections_in_order(self, config):
        prompt = build_icon_prompt(config)
        positions = [prompt.index(s) for s in SECTIONS]
        assert positions == sorted(positions)

    def test_style_lines(self, config):
        prompt = build_icon_prompt(config)
        for line in (
            "- **Stroke Weight**: 2dp",
            "- **Fill Style**: outline",
            "- **Corner Treatment**: rounded",
            "- **Perspective**: flat",
            "- **Grid Alignment**: pixel-perfect",
            "- **Shading**: none",
            "- **Decorative Elements**: none",
        ):
            assert line in prompt.splitlines()

    def test_canvas_and_output(self, config):
        prompt = build_icon_prompt(config)
        assert "- **Canvas Size**: 24×24px" in prompt
        assert "- **Padding**: 2px on all sides" in prompt
        assert "- **Live Area**: 20×20px (usable space)" in prompt
        assert "- **Format**: SVG with proper structure" in prompt
        assert "- **Scalability**: Must be crisp at 16px, 24px, and 48px sizes" in prompt

    def test_fractional_dimensions_keep_decimals(self, valid_config):
        valid_config["dimensions"] = {"canvasSize": 32.5, "padding": 0, "liveArea": 28}
        prompt = build_icon_prompt(validate_icon_config(valid_config).config)
        assert "32.5×32.5px" in prompt
        assert "- **Padding**: 0px on all sides" in prompt

    def test_exclusions_and_checklist(self, config):
        lines = build_icon_prompt(config).splitlines()
        assert "Do NOT include: text, labels, background" in lines
        checklist = [line for line in lines if line.startswith("- [ ]")]
        assert len(checklist) == 5
        assert checklist[-1] == "- [ ] Proper SVG structure with viewBox"
        assert lines[-1] == "Generate the icon following these specifications exactly."

    def test_deterministic(self, config):
        assert build_icon_prompt(config) == build_icon_prompt(config)
        assert build_creative_icon_prompt(config) == build_creative_icon_prompt(config)


class TestCreativePrompt:
    def test_extends_standard_prompt(self, config):
        standard = build_icon_prompt(config)
        creative = build_creative_icon_prompt(config)
        assert creative.startswith(standard + "\n\n## CREATIVE PERSONALITY GUIDELINES")
        assert creative.index("## CREATIVE PERSONALITY GUIDELINES") < creative.index("## ISOMETRIC CREATIVE TREATMENT")

    def test_interpolates_decorative_elements(self, valid_config):
        valid_config["style"]["decorativeElements"] = "sparkles"
        creative = build_creative_icon_prompt(validate_icon_config(valid_config).config)
        assert "- **Decorative Accents**: Include sparkles balanced around main elements" in creative

    def test_bullet_counts(self, config):
        creative = build_creative_icon_prompt(config)
        block = creative.split("## CREATIVE PERSONALITY GUIDELINES")[1]
        personality, treatment = block.split("## ISOMETRIC CREATIVE TREATMENT")
        assert len([x for x in personality.splitlines() if x.startswith("- **")]) == 5
        assert len([x for x in treatment.splitlines() if x.startswith("- ")]) == 4

    def test_no_trailing_whitespace(self, config):
        creative = build_creative_icon_prompt(config)
        assert not creative.endswith("\n")
        assert all(line == line.rstrip() for line in creative.splitlines())


class TestVariants:
    def test_four_named_variants(self, config):
        variants = build_prompt_variants(config)
        assert list(variants) == ["standard", "detailed", "creative", "minimal"]

    def test_detailed_only_changes_description(self, config):
        variants = build_prompt_variants(config)
        expected_first_line = (
            'Generate a professional stock icon for interface for "download". '
            f"Arrow pointing down into a horizontal base or tray{DETAILED_DESCRIPTION_SUFFIX}"
        )
        assert variants["detailed"].splitlines()[0] == expected_first_line
        assert variants["detailed"].splitlines()[1:] == variants["standard"].splitlines()[1:]
        assert config.description == "Arrow pointing down into a horizontal base or tray"

    def test_minimal(self, config):
        assert build_minimal_prompt(config) == (
            'Create a SVG icon for "download": Arrow pointing down into a horizontal base or tray. '
            "Style: 2dp strokes, outline fill, rounded corners. Canvas: 24px. No text or labels."
        )

    def test_minimal_omits_exclusions(self, config):
        assert "Do NOT include" not in build_prompt_variants(config)["minimal"]


class TestSha256Json:
    def test_key_order_does_not_matter(self):
        assert sha256_json({"a": 1, "b": [1, 2]}) == sha256_json({"b": [1, 2], "a": 1})
        assert sha256_json({"a": 1}) != sha256_json({"a": 2})
