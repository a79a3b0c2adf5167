from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

StrokeWeight = Literal["thin", "2dp", "bold", "variable"]
FillStyle = Literal["outline", "filled", "duotone", "none"]
CornerStyle = Literal["rounded", "sharp", "mixed"]
Perspective = Literal["flat", "isometric", "slight-tilt", "orthographic"]
GridAlignment = Literal["pixel-perfect", "optical", "loose"]
Shading = Literal["none", "minimal", "soft", "realistic"]
DecorativeElements = Literal["none", "sparkles", "dots", "organic-accents"]
OutputFormat = Literal["SVG", "PNG", "vector"]
OutputBackground = Literal["transparent", "white", "none"]
ColorMode = Literal["monochrome", "colored", "duotone"]

DEFAULT_DO_NOT_INCLUDE = ("text", "labels", "background", "realistic shading", "bitmap elements")
DEFAULT_TARGET_USE = "stock icon for interface"


class _Record(BaseModel):
    """Wire format is camelCase; attributes are snake_case. Unknown keys are dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
        frozen=True,
    )


class StyleSpec(_Record):
    stroke_weight: StrokeWeight = "2dp"
    fill: FillStyle = "outline"
    corner_style: CornerStyle = "rounded"
    perspective: Perspective = "flat"
    grid_alignment: GridAlignment = "pixel-perfect"
    shading: Shading = "none"
    decorative_elements: DecorativeElements = "none"


class Dimensions(_Record):
    # liveArea is deliberately not cross-checked against canvasSize - 2 * padding.
    canvas_size: float = Field(default=24, gt=0, strict=True)
    padding: float = Field(default=2, ge=0, strict=True)
    live_area: float = Field(default=20, gt=0, strict=True)


class OutputSpec(_Record):
    format: OutputFormat = "SVG"
    background: OutputBackground = "transparent"
    color_mode: ColorMode = "monochrome"


class IconConfig(_Record):
    """Validated, fully-defaulted description of a desired icon."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    style: StyleSpec = Field(default_factory=StyleSpec)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    do_not_include: tuple[str, ...] = DEFAULT_DO_NOT_INCLUDE
    output: OutputSpec = Field(default_factory=OutputSpec)
    target_use: str = DEFAULT_TARGET_USE
    tags: tuple[str, ...] | None = None
    related_icons: tuple[str, ...] | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FieldErrorKind(str, Enum):
    INVALID_DIMENSION = "InvalidDimension"
    INVALID_ENUM = "InvalidEnum"
    EMPTY_FIELD = "EmptyField"
    MISSING_FIELD = "MissingField"
    INVALID_TYPE = "InvalidType"


@dataclass(frozen=True)
class FieldError:
    path: str
    kind: FieldErrorKind
    message: str

    def render(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ConfigValidation:
    config: IconConfig | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def success(self) -> bool:
        return self.config is not None

    @property
    def details(self) -> list[str]:
        return [e.render() for e in self.errors]


_NON_EMPTY_FIELDS = {"name", "description"}


def _classify(loc: tuple[Any, ...], error_type: str) -> FieldErrorKind:
    if error_type == "missing":
        return FieldErrorKind.MISSING_FIELD
    if len(loc) > 1 and loc[0] == "dimensions":
        return FieldErrorKind.INVALID_DIMENSION
    if error_type == "literal_error":
        return FieldErrorKind.INVALID_ENUM
    if error_type == "string_too_short" and loc and loc[-1] in _NON_EMPTY_FIELDS:
        return FieldErrorKind.EMPTY_FIELD
    return FieldErrorKind.INVALID_TYPE


def _field_errors(exc: ValidationError) -> tuple[FieldError, ...]:
    out: list[FieldError] = []
    for err in exc.errors(include_url=False):
        loc = tuple(err.get("loc") or ())
        path = ".".join(str(p) for p in loc) or "config"
        out.append(FieldError(path=path, kind=_classify(loc, str(err.get("type") or "")), message=str(err.get("msg") or "")))
    return tuple(out)


def validate_icon_config(raw: Any) -> ConfigValidation:
    """
    Validate raw caller input into an IconConfig.

    Absent fields take their defaults; present fields are checked and every
    violation is collected, in order, rather than stopping at the first one.
    Never raises for bad input.
    """
    try:
        config = IconConfig.model_validate(raw)
    except ValidationError as e:
        return ConfigValidation(errors=_field_errors(e))
    return ConfigValidation(config=config)
