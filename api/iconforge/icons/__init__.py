"""Icon configuration models, presets, inference, deterministic prompt builder and SVG checks."""

from .errors import IconForgeError, InternalFailure, InvalidConfiguration, MissingInput, ModelCallFailed, UnknownPreset
from .inference import PartialIconConfig, infer_config
from .models import ConfigValidation, FieldError, FieldErrorKind, IconConfig, StyleSpec, validate_icon_config
from .pipeline import IconRenderer, OpenAIIconRenderer, get_icon_model_config
from .presets import DEFAULT_PRESET, STYLE_PRESETS, StylePreset, resolve_preset
from .prompt_builder import build_creative_icon_prompt, build_icon_prompt, build_prompt_variants, sha256_json
from .style_guide import STYLE_GUIDE, StyleGuide
from .svg_checks import RuleStatus, ValidationRule, check_svg, extract_svg, summarize_report

__all__ = [
    "IconForgeError",
    "InternalFailure",
    "InvalidConfiguration",
    "MissingInput",
    "ModelCallFailed",
    "UnknownPreset",
    "PartialIconConfig",
    "infer_config",
    "ConfigValidation",
    "FieldError",
    "FieldErrorKind",
    "IconConfig",
    "StyleSpec",
    "validate_icon_config",
    "IconRenderer",
    "OpenAIIconRenderer",
    "get_icon_model_config",
    "DEFAULT_PRESET",
    "STYLE_PRESETS",
    "StylePreset",
    "resolve_preset",
    "build_creative_icon_prompt",
    "build_icon_prompt",
    "build_prompt_variants",
    "sha256_json",
    "STYLE_GUIDE",
    "StyleGuide",
    "RuleStatus",
    "ValidationRule",
    "check_svg",
    "extract_svg",
    "summarize_report",
]
