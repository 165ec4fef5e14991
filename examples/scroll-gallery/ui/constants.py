"""Layout constants and colors."""

FPS = 60
SCREEN_W = 760
SCREEN_H = 640
SIDEBAR_W = 180
SCROLL_STEP = 60

BG_COLOR = (20, 20, 30)
SECTION_BG = (32, 32, 48)
SECTION_BORDER = (60, 60, 84)
SIDEBAR_BG = (25, 25, 38)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
BOX_COLOR = (120, 200, 140)
ERROR_COLOR = (220, 90, 90)
