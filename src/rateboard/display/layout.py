"""Responsive presentation parameters and promo transition table.

Everything here is a pure function of the viewport width, the orientation and
the display settings; nothing is remembered between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from ..promo.promo_models import DEFAULT_TRANSITION_EFFECT
from ..settings.settings_models import DEFAULT_DISPLAY_SETTINGS, DisplaySettings

MOBILE_MAX_WIDTH = 768
TABLET_MAX_WIDTH = 1024
DESKTOP_MAX_WIDTH = 1920
MOBILE_BANNER_SCALE = 0.6

TRANSITION_DURATION_SECONDS = 0.8
BOUNCE_EASING = (0.34, 1.56, 0.64, 1.0)
DEFAULT_EASING = "easeInOut"

_FONT_TOKEN_RE = re.compile(r"^text-(\d*)xl$")


class ScreenSize(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    TV = "tv"


_FIXED_FONT_TOKENS = {
    ScreenSize.MOBILE: "text-xl",
    ScreenSize.TABLET: "text-3xl",
    ScreenSize.TV: "text-6xl",
}


@dataclass(slots=True, frozen=True)
class DisplayLayout:
    screen: ScreenSize
    rate_font_token: str
    font_tier: int
    columns: int
    vertical: bool


@dataclass(slots=True, frozen=True)
class TransitionSpec:
    effect: str
    initial: Mapping[str, Any]
    animate: Mapping[str, Any]
    exit: Mapping[str, Any]
    duration_seconds: float = TRANSITION_DURATION_SECONDS
    easing: str | tuple[float, ...] = field(default=DEFAULT_EASING)


def screen_size_for(width: int) -> ScreenSize:
    if width < MOBILE_MAX_WIDTH:
        return ScreenSize.MOBILE
    if width < TABLET_MAX_WIDTH:
        return ScreenSize.TABLET
    if width < DESKTOP_MAX_WIDTH:
        return ScreenSize.DESKTOP
    return ScreenSize.TV


def font_tier(token: str) -> int:
    """Numeric step of an ``xl`` font token (``text-xl`` is 1, ``text-6xl`` is 6).

    Tokens below ``xl`` map to 0; unrecognised tokens use the default tier.
    """
    match = _FONT_TOKEN_RE.match(token)
    if match is not None:
        return int(match.group(1) or 1)
    if token in {"text-xs", "text-sm", "text-base", "text-lg"}:
        return 0
    return font_tier(DEFAULT_DISPLAY_SETTINGS.rate_number_font_size)


def rate_font_token(screen: ScreenSize, settings: DisplaySettings) -> str:
    return _FIXED_FONT_TOKENS.get(screen, settings.rate_number_font_size)


def column_count(screen: ScreenSize, orientation: str) -> int:
    if screen is ScreenSize.MOBILE or orientation == "vertical":
        return 1
    return 2


def banner_height(screen: ScreenSize, configured_height: int | None) -> int:
    height = configured_height or 120
    if screen is ScreenSize.MOBILE:
        return round(height * MOBILE_BANNER_SCALE)
    return height


def derive_layout(width: int, settings: DisplaySettings) -> DisplayLayout:
    screen = screen_size_for(width)
    token = rate_font_token(screen, settings)
    return DisplayLayout(
        screen=screen,
        rate_font_token=token,
        font_tier=font_tier(token),
        columns=column_count(screen, settings.orientation),
        vertical=settings.orientation == "vertical",
    )


_TRANSITIONS: dict[str, tuple[dict[str, Any], dict[str, Any], dict[str, Any]]] = {
    "fade": ({"opacity": 0}, {"opacity": 1}, {"opacity": 0}),
    "slide-left": ({"x": "100%"}, {"x": 0}, {"x": "-100%"}),
    "slide-right": ({"x": "-100%"}, {"x": 0}, {"x": "100%"}),
    "zoom-in": ({"scale": 0.8, "opacity": 0}, {"scale": 1, "opacity": 1}, {"scale": 0.8, "opacity": 0}),
    "zoom-out": ({"scale": 1.2, "opacity": 0}, {"scale": 1, "opacity": 1}, {"scale": 1.2, "opacity": 0}),
    "flip-x": ({"rotateX": -90, "opacity": 0}, {"rotateX": 0, "opacity": 1}, {"rotateX": 90, "opacity": 0}),
    "flip-y": ({"rotateY": -90, "opacity": 0}, {"rotateY": 0, "opacity": 1}, {"rotateY": 90, "opacity": 0}),
    "rotate-in": (
        {"rotate": -90, "scale": 0.8, "opacity": 0},
        {"rotate": 0, "scale": 1, "opacity": 1},
        {"rotate": 90, "scale": 0.8, "opacity": 0},
    ),
    "rotate-out": (
        {"rotate": 90, "scale": 0.8, "opacity": 0},
        {"rotate": 0, "scale": 1, "opacity": 1},
        {"rotate": -90, "scale": 0.8, "opacity": 0},
    ),
    "bounce": ({"scale": 0.5, "opacity": 0}, {"scale": 1, "opacity": 1}, {"scale": 0.5, "opacity": 0}),
}


def transition_for(effect: str | None) -> TransitionSpec:
    """Return animation parameters for ``effect``; unknown names fall back to fade."""
    name = effect if effect in _TRANSITIONS else DEFAULT_TRANSITION_EFFECT
    initial, animate, exit_ = _TRANSITIONS[name]
    return TransitionSpec(
        effect=name,
        initial=initial,
        animate=animate,
        exit=exit_,
        easing=BOUNCE_EASING if name == "bounce" else DEFAULT_EASING,
    )
