"""Default layout, timing, and color constants."""

# Timing
FPS = 60
TICK_PERIOD_MS = 30
SCALE_GAP = 0.02

# Layout
SCREEN_W = 800
SCREEN_H = 600
NODE_COUNT = 5
LINE_COUNT = 2
SIZE_FACTOR = 2.9
STROKE_FACTOR = 90
RADIUS_FACTOR = 3

# Colors
FORE_COLOR = (49, 27, 146)  # #311B92
BACK_COLOR = (189, 189, 189)  # #BDBDBD

LINE_CAP = "round"
