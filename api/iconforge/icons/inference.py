from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .errors import MissingInput
from .presets import DEFAULT_PRESET, StylePreset, resolve_preset

# Insertion order is the match order; the first hit wins.
SEMANTIC_LIBRARY: Mapping[str, str] = MappingProxyType(
    {
        "download": "Arrow pointing down into a horizontal base or tray",
        "upload": "Arrow pointing up from a horizontal base",
        "save": "Floppy disk or download arrow into container",
        "edit": "Pencil or pen with editing indication",
        "delete": "Trash can or X mark for removal",
        "search": "Magnifying glass for finding content",
        "settings": "Gear or cog for configuration",
        "user": "Person silhouette or avatar circle",
        "calendar": "Calendar grid with date indication",
        "email": "Envelope for messaging",
        "notification": "Bell or alert indicator",
        "home": "House outline for navigation",
        "menu": "Three horizontal lines for navigation",
        "close": "X mark for closing",
        "check": "Checkmark for confirmation",
        "warning": "Triangle with exclamation point",
        "info": "Circle with i for information",
        "help": "Question mark for assistance",
        "lock": "Padlock for security",
        "unlock": "Open padlock for access",
    }
)

_SEPARATOR_RE = re.compile(r"[_-]")
_IMAGE_EXT_RE = re.compile(r"\.(svg|png|jpg|jpeg)$")


@dataclass(frozen=True)
class PartialIconConfig:
    """Inferred name, description, style and tags; dimensions, exclusions and output are left to the caller."""

    name: str
    description: str
    style: StylePreset
    tags: tuple[str, ...]

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "style": self.style.model_dump(mode="json", by_alias=True),
            "tags": list(self.tags),
        }


def normalize_input(text: str) -> str:
    normalized = _SEPARATOR_RE.sub(" ", (text or "").lower())
    normalized = _IMAGE_EXT_RE.sub("", normalized)
    return normalized.strip()


def match_keyword(normalized: str) -> str | None:
    for keyword in SEMANTIC_LIBRARY:
        if keyword in normalized or normalized in keyword:
            return keyword
    return None


def infer_config(text: str, preset_id: str = DEFAULT_PRESET) -> PartialIconConfig:
    style = resolve_preset(preset_id)
    normalized = normalize_input(text)
    if not normalized:
        raise MissingInput()

    keyword = match_keyword(normalized)
    if keyword is None:
        name = normalized
        description = f"Visual representation of {normalized}"
    else:
        name = keyword
        description = SEMANTIC_LIBRARY[keyword]

    tags = tuple(word for word in normalized.split() if len(word) > 2)
    return PartialIconConfig(name=name, description=description, style=style, tags=tags)
