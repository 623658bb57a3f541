# ── Central defaults (tune here, not scattered across files) ──

# Display
DISPLAY_WIDTH = 240
DISPLAY_HEIGHT = 160
PIXEL_SCALE = 4
DOT_RADIUS = 2
BG_COLOR = (0, 0, 0)
DOT_COLOR = (255, 255, 255)
AVERAGE_COLOR = (255, 64, 64)

# Swarm
MAX_BOUNCERS = 20
SPEED_RANGE = (-5, 5)

# Loop
FPS = 60
SEED = 0
