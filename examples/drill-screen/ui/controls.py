"""Bottom control strip: two drill buttons and the cadence slider."""
from __future__ import annotations

import pygame

from iqvision import view
from iqvision.types import DrillState
from ui.constants import (
    BUTTON_COLOR,
    BUTTON_DISABLED,
    BUTTON_H,
    BUTTON_TEXT,
    BUTTON_W,
    CONTROLS_H,
    SCREEN_H,
    SCREEN_W,
    SLIDER_KNOB,
    SLIDER_KNOB_R,
    SLIDER_RAIL,
    SLIDER_W,
    TEXT_COLOR,
)


def layout() -> dict[str, pygame.Rect]:
    """Hit rects for the clickable controls."""
    cy = SCREEN_H - CONTROLS_H // 2
    third = SCREEN_W // 3
    number = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    number.center = (third // 2, cy)
    color = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    color.center = (SCREEN_W - third // 2, cy)
    slider = pygame.Rect(0, 0, SLIDER_W, SLIDER_KNOB_R * 2)
    slider.center = (SCREEN_W // 2, cy + 16)
    return {"number": number, "color": color, "slider": slider}


def _draw_button(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rect: pygame.Rect,
    text: str,
    enabled: bool,
) -> None:
    fill = BUTTON_COLOR if enabled else BUTTON_DISABLED
    pygame.draw.rect(surface, fill, rect, border_radius=10)
    label = font.render(text, True, BUTTON_TEXT)
    surface.blit(label, label.get_rect(center=rect.center))


def draw_controls(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state: DrillState,
    number_enabled: bool,
    color_enabled: bool,
) -> None:
    rects = layout()
    _draw_button(surface, font, rects["number"], view.number_button_label(state), number_enabled)
    _draw_button(surface, font, rects["color"], view.color_button_label(state), color_enabled)

    slider = rects["slider"]
    title = font.render(view.INTERVAL_TITLE, True, TEXT_COLOR)
    surface.blit(title, title.get_rect(midbottom=(slider.centerx, slider.top - 8)))

    lo = font.render("1s", True, TEXT_COLOR)
    hi = font.render("2s", True, TEXT_COLOR)
    surface.blit(lo, lo.get_rect(midright=(slider.left - 12, slider.centery)))
    surface.blit(hi, hi.get_rect(midleft=(slider.right + 12, slider.centery)))

    pygame.draw.line(surface, SLIDER_RAIL, slider.midleft, slider.midright, 4)
    knob_x = slider.left + int(view.slider_position(state.interval_seconds) * slider.width)
    pygame.draw.circle(surface, SLIDER_KNOB, (knob_x, slider.centery), SLIDER_KNOB_R)


def slider_fraction(x: int) -> float:
    slider = layout()["slider"]
    return (x - slider.left) / slider.width
