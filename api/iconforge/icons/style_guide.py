from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleGuide:
    canvas_size: int = 24
    live_area: int = 20
    padding: int = 2
    stroke_width: int = 2
    stroke_color: str = "#000000"
    outer_corner_radius: int = 2
    interior_corner_style: str = "square"
    max_sparkles: int = 3
    max_dots: int = 5
    max_dot_size: float = 1.5
    default_fill: str = "none"
    allowed_fill: str = "#FFFFFF"
    min_contrast_ratio: float = 4.5

    @property
    def view_box(self) -> str:
        return f"0 0 {self.canvas_size} {self.canvas_size}"


STYLE_GUIDE = StyleGuide()
