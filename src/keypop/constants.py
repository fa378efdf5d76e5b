LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

INITIAL_SCORE = 0
INITIAL_GAME_TIME = 20
INITIAL_GAME_SPEED = 1
SPEED_UP_SCORE_SCALE = 10

# Seconds between clock ticks; each tick costs one unit of remaining time.
TICK_INTERVAL = 1.0
# Spawn cycle period at speed level 1. Divided by the current speed level.
BASE_SPAWN_INTERVAL = 1.0

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "KeyPop"

# Board dimensions are the viewport minus these margins, fixed at world creation.
BOARD_MARGIN_X = 100
BOARD_MARGIN_Y = 200

BUBBLE_RADIUS = 18
BUBBLE_COLOR = (203, 63, 32)  # #cb3f20
BUBBLE_TEXT_COLOR = (255, 255, 255)

# Start button footprint, a 44x20 base scaled up.
BUTTON_WIDTH = 44 * 4
BUTTON_HEIGHT = 20 * 3

HUD_HEIGHT = 40
HUD_FONT_SIZE = 18

# Reason strings reported with EVENT_GAME_ENDED.
END_REASON_TIME_UP = "time_up"
END_REASON_INTERNAL_ERROR = "internal_error"
