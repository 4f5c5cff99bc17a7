"""Loading splash and the main drill view."""
from __future__ import annotations

import pygame

from iqvision import view
from iqvision.types import DrillState
from ui.constants import (
    BG_COLOR,
    CONTROLS_H,
    LOADING_ACCENT,
    LOADING_BG,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
)


def draw_loading(
    surface: pygame.Surface,
    font: pygame.font.Font,
    background: pygame.Surface | None = None,
) -> None:
    if background is not None:
        scaled = pygame.transform.smoothscale(background, surface.get_size())
        surface.blit(scaled, (0, 0))
        return
    surface.fill(LOADING_BG)
    title = font.render("IQ Vision", True, LOADING_ACCENT)
    surface.blit(title, title.get_rect(center=(SCREEN_W // 2, SCREEN_H // 2)))


def draw_drill(
    surface: pygame.Surface,
    number_font: pygame.font.Font,
    color_font: pygame.font.Font,
    state: DrillState,
) -> None:
    surface.fill(BG_COLOR)
    area_h = SCREEN_H - CONTROLS_H
    cx = SCREEN_W // 2

    number = view.number_text(state)
    name, ink = view.color_text(state)

    if number is not None:
        label = number_font.render(number, True, TEXT_COLOR)
        surface.blit(label, label.get_rect(center=(cx, area_h // 2)))
    elif name:
        label = color_font.render(name, True, ink)
        surface.blit(label, label.get_rect(center=(cx, area_h // 2)))
