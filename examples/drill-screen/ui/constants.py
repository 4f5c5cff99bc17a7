"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 1280
SCREEN_H = 800
CONTROLS_H = 140
BUTTON_W = 300
BUTTON_H = 56
SLIDER_W = 360
SLIDER_KNOB_R = 12

NUMBER_FONT_SIZE = 400
COLOR_FONT_SIZE = 300
LABEL_FONT_SIZE = 28

# Colors
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (141, 198, 63)  # iq_green
BUTTON_DISABLED = (70, 98, 32)
BUTTON_TEXT = (0, 0, 0)
SLIDER_RAIL = (128, 128, 128)
SLIDER_KNOB = (230, 230, 230)
LOADING_BG = (12, 12, 16)
LOADING_ACCENT = (141, 198, 63)
