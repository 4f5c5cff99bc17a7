"""Drill Screen — full-screen number and color drills.

Exercises iqvision's DrillController and SplashGate.

Controls:
  N           Start / stop the number drill
  C           Start / stop the color drill
  Left/Right  Shorter / longer cadence (1s, 1.5s, 2s)
  Click       Press a drill button or drag the cadence slider
  Space       Skip the splash
  Esc         Quit
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

import pygame

from iqvision import DrillConfig, DrillController, Engine, SignalBus, SplashGate
from iqvision import view
from iqvision.config import ALLOWED_INTERVALS, DEFAULT_TPS, SPLASH_SECONDS
from iqvision.signals import MODE_CHANGED, SPLASH_DONE
from ui.constants import (
    COLOR_FONT_SIZE,
    FPS,
    LABEL_FONT_SIZE,
    NUMBER_FONT_SIZE,
    SCREEN_H,
    SCREEN_W,
)
from ui.controls import draw_controls, layout, slider_fraction
from ui.screens import draw_drill, draw_loading

logger = logging.getLogger("drill-screen")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Drill Screen — number and color drills")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=DEFAULT_TPS,
                   help=f"Ticks per second (default: {DEFAULT_TPS})")
    p.add_argument("--interval", type=float, default=ALLOWED_INTERVALS[0],
                   choices=ALLOWED_INTERVALS, help="Starting cadence in seconds")
    p.add_argument("--splash", type=float, default=SPLASH_SECONDS,
                   help=f"Splash duration in seconds (default: {SPLASH_SECONDS:g})")
    p.add_argument("--splash-image", type=str, default=None, metavar="FILE",
                   help="Background image for the splash")
    p.add_argument("--fullscreen", action="store_true", help="Run full screen")
    p.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"),
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Set logging level")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = DrillConfig(
            tps=args.tps,
            seed=args.seed,
            interval=args.interval,
            splash_seconds=args.splash,
            fullscreen=args.fullscreen,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    engine = Engine(tps=cfg.tps, seed=cfg.seed)
    bus = SignalBus()
    controller = DrillController(engine, bus=bus, interval=cfg.interval)
    splash = SplashGate(engine, bus=bus, seconds=cfg.splash_seconds)
    logger.info("Seed %d, %d tps, cadence %.1fs", engine.seed, cfg.tps, cfg.interval)

    bus.subscribe(SPLASH_DONE, lambda signal, data: logger.info("Splash done"))
    bus.subscribe(
        MODE_CHANGED,
        lambda signal, data: pygame.display.set_caption(
            f"IQ Vision — {data['new'].value.replace('_', ' ')}"
        ),
    )

    pygame.init()
    flags = pygame.FULLSCREEN | pygame.SCALED if cfg.fullscreen else 0
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), flags)
    pygame.display.set_caption("IQ Vision")
    clock = pygame.time.Clock()
    label_font = pygame.font.SysFont(None, LABEL_FONT_SIZE)
    number_font = pygame.font.SysFont(None, NUMBER_FONT_SIZE, bold=True)
    color_font = pygame.font.SysFont(None, COLOR_FONT_SIZE)

    background = None
    if args.splash_image:
        try:
            background = pygame.image.load(args.splash_image).convert()
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Cannot load splash image %s: %s", args.splash_image, exc)

    tick_interval = engine.clock.dt
    accumulator = 0.0
    dragging = False
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif splash.loading:
                    if event.key == pygame.K_SPACE:
                        splash.skip()
                elif event.key == pygame.K_n and controller.can_toggle_number:
                    controller.toggle_number_drill()
                elif event.key == pygame.K_c and controller.can_toggle_color:
                    controller.toggle_color_drill()
                elif event.key == pygame.K_LEFT:
                    controller.nudge_interval(-1)
                elif event.key == pygame.K_RIGHT:
                    controller.nudge_interval(+1)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if splash.loading:
                    continue
                rects = layout()
                if rects["number"].collidepoint(event.pos) and controller.can_toggle_number:
                    controller.toggle_number_drill()
                elif rects["color"].collidepoint(event.pos) and controller.can_toggle_color:
                    controller.toggle_color_drill()
                elif rects["slider"].inflate(24, 24).collidepoint(event.pos):
                    dragging = True

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False

            if dragging and event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION):
                target = view.interval_at(slider_fraction(event.pos[0]))
                if target != controller.interval_seconds:
                    controller.set_interval(target)

        # --- Tick ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        # --- Render ---
        if splash.loading:
            draw_loading(screen, label_font, background)
        else:
            state = controller.state
            draw_drill(screen, number_font, color_font, state)
            draw_controls(
                screen,
                label_font,
                state,
                number_enabled=controller.can_toggle_number,
                color_enabled=controller.can_toggle_color,
            )

        pygame.display.flip()

    controller.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
