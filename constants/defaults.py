TITLE = "Snake hunting"

# Grid size in cells
ROWS = 40
COLUMNS = 40

# Size of a cell in pixels
CELL_SIZE = 15

# Game updates per second
UPDATE_PER_SEC = 3

# Shortest wait between two ticks, in seconds
MIN_SLEEP_SEC = 0.01

# Cells of a freshly regenerated snake
INITIAL_LENGTH = 3

# Head-side segments never checked for self collision
SELF_COLLISION_EXEMPT_SEGMENTS = 3

# Colors
BACKGROUND_COLOR = (0x3F, 0x91, 0x9E)
STATUS_BAR_COLOR = (238, 238, 238)
BODY_COLOR = (0, 0, 0)
HEAD_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)
TEXT_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)

STATUS_BAR_HEIGHT = 40

HELP_TEXT = (
    "Arrow keys to change direction\n"
    "P to pause/resume\n"
    "S to toggle sound on/off\n"
)
