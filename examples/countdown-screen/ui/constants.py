"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 360
SCREEN_H = 640

WHEEL_SIZE = 250
OUTER_STROKE = 20
INNER_INSET = 50

FIELD_W = 220
FIELD_H = 64

BUTTON_W = 220
BUTTON_H = 56
BUTTON_MARGIN = 24  # from the bottom edge

# Colors
BG_COLOR = (18, 18, 24)
PRIMARY = (98, 0, 238)
SECONDARY = (3, 218, 197)
FIELD_BG = (40, 40, 52)
BUTTON_BG = PRIMARY
BUTTON_HOVER = (124, 40, 255)
TEXT_COLOR = (235, 235, 240)
TEXT_DIM = (130, 130, 150)
