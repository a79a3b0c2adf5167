"""
Textual conformance checks for model-produced SVG markup.

Every check is a substring heuristic over the raw markup, not a structural
parse: unconventional quoting or attribute order can produce false results.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from .style_guide import STYLE_GUIDE, StyleGuide


class RuleStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    WARNING = "WARNING"


@dataclass(frozen=True)
class ValidationRule:
    rule: str
    status: RuleStatus
    message: str

    def to_payload(self) -> dict[str, str]:
        out = asdict(self)
        out["status"] = self.status.value
        return out


@dataclass(frozen=True)
class ReportSummary:
    passes: int
    failures: int
    warnings: int

    @property
    def compliant(self) -> bool:
        return self.failures == 0

    def describe(self) -> str:
        return f"{self.passes} passes, {self.failures} failures, {self.warnings} warnings"

    def to_payload(self) -> dict[str, Any]:
        return {
            "passes": self.passes,
            "failures": self.failures,
            "warnings": self.warnings,
            "compliant": self.compliant,
            "text": self.describe(),
        }


def _rule(ok: bool, label: str, passed: str, failed: str, *, soft: bool = False) -> ValidationRule:
    if ok:
        return ValidationRule(rule=label, status=RuleStatus.PASS, message=passed)
    return ValidationRule(rule=label, status=RuleStatus.WARNING if soft else RuleStatus.FAIL, message=failed)


def check_stroke_width(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    return _rule(
        f'stroke-width="{guide.stroke_width}"' in svg,
        f"Stroke width: {guide.stroke_width}dp",
        "Correct stroke width applied",
        f"Stroke width must be {guide.stroke_width}dp",
    )


def check_canvas_size(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    size = guide.canvas_size
    return _rule(
        f'viewBox="{guide.view_box}"' in svg,
        f"Canvas size: {size}x{size}dp",
        "Correct canvas dimensions",
        f"Canvas must be {size}x{size}dp",
    )


def check_no_gradients(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    return _rule(
        "gradient" not in svg and 'fill="url(' not in svg,
        "No gradients used",
        "No gradients detected",
        "Gradients are not allowed",
    )


def check_stroke_color(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    return _rule(
        f'stroke="{guide.stroke_color}"' in svg or 'stroke="black"' in svg,
        "Stroke color: black",
        "Correct stroke color",
        "Stroke should be black",
        soft=True,
    )


def check_flat_perspective(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    return _rule(
        not any(token in svg for token in ("filter", "shadow", 'transform="matrix')),
        "Flat perspective only",
        "No 3D effects detected",
        "Avoid 3D effects and shadows",
        soft=True,
    )


def check_live_area(svg: str, guide: StyleGuide = STYLE_GUIDE) -> ValidationRule:
    return _rule(
        not any(f'{attr}="-' in svg for attr in ("x", "y", "cx", "cy")),
        "Live area respected",
        "Elements within live area bounds",
        "Check element positioning within live area",
        soft=True,
    )


SVG_CHECKS: tuple[Callable[[str, StyleGuide], ValidationRule], ...] = (
    check_stroke_width,
    check_canvas_size,
    check_no_gradients,
    check_stroke_color,
    check_flat_perspective,
    check_live_area,
)


def check_svg(svg: str, guide: StyleGuide = STYLE_GUIDE) -> list[ValidationRule]:
    return [check(svg, guide) for check in SVG_CHECKS]


def summarize_report(rules: Iterable[ValidationRule]) -> ReportSummary:
    statuses = [r.status for r in rules]
    return ReportSummary(
        passes=statuses.count(RuleStatus.PASS),
        failures=statuses.count(RuleStatus.FAIL),
        warnings=statuses.count(RuleStatus.WARNING),
    )


_SVG_ELEMENT_RE = re.compile(r"<svg[^>]*>[\s\S]*?</svg>", re.IGNORECASE)


def extract_svg(text: str) -> str | None:
    m = _SVG_ELEMENT_RE.search(text or "")
    return m.group(0) if m else None


def to_react_component(svg: str, component_name: str = "GeneratedIcon") -> str:
    processed = svg.replace('stroke="#000000"', 'stroke="currentColor"').replace('fill="#000000"', 'fill="currentColor"')
    processed = processed.replace("<svg", "<svg className={className} {...props}", 1)
    return f"export const {component_name} = ({{ className, ...props }}) => (\n  {processed}\n);"
