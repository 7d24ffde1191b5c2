"""Promotional slideshow models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, get_args

TransitionEffect = Literal[
    "fade",
    "slide-left",
    "slide-right",
    "zoom-in",
    "zoom-out",
    "flip-x",
    "flip-y",
    "rotate-in",
    "rotate-out",
    "bounce",
]

TRANSITION_EFFECTS: tuple[str, ...] = get_args(TransitionEffect)
DEFAULT_TRANSITION_EFFECT = "fade"


@dataclass(slots=True, frozen=True)
class PromoImage:
    id: int
    name: str
    image_url: str | None = None
    duration_seconds: int | None = 5
    transition_effect: str = DEFAULT_TRANSITION_EFFECT
    order_index: int = 0
    is_active: bool = True
    file_size: int | None = None
    mime_type: str | None = None
    created_date: datetime | None = None
