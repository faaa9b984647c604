# viz/renderer_colors.py
from core.frame import SNAKE_HEAD

BG = (0, 0, 0)
FOOD = (255, 0, 0)
HEAD = SNAKE_HEAD
TEXT = (255, 255, 255)
GAME_OVER = (255, 0, 0)

# raised-cell edge shading
SHADE = 0.7

def brighter(c):
    r, g, b = c
    return tuple(min(255, int(v / SHADE)) if v else 0 for v in (r, g, b))

def darker(c):
    return tuple(int(v * SHADE) for v in c)
