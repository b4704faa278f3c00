# cave_config.py
# Shared constants and console logging for the Speleo cave simulator

# ---------- CAVE GEOMETRY ----------

ENTRY_ROW = 0          # traversal starts from every free cell of this row

# Neighbour offsets in push order: North, East, West, South.
# The frontier is LIFO, so South is explored first after each pop.
NEIGHBOUR_OFFSETS = (
    (-1, 0),   # NORTH
    (0, 1),    # EAST
    (0, -1),   # WEST
    (1, 0),    # SOUTH
)

# ---------- EXECUTION MODES ----------

MODE_SHOW_PATHS = "A"   # user map, show explored cells
MODE_SINGLE = "B"       # one accessibility value, many samples
MODE_SWEEP = "C"        # mode B for every accessibility in 1% steps
MODES = (MODE_SHOW_PATHS, MODE_SINGLE, MODE_SWEEP)

SWEEP_STEPS = 100       # 0.00, 0.01, ... 1.00 -> 101 points

RATE_DIGITS = 4         # fixed-point digits for printed probabilities

# ---------- PYGAME VIEW ----------

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 720

BG_COLOR = (5, 8, 16)
TEXT_COLOR = (220, 220, 230)
ROCK_COLOR = (40, 44, 58)
OPEN_COLOR = (80, 140, 255)
VISITED_COLOR = (90, 190, 110)
GRID_EDGE = (10, 10, 20)
CURVE_COLOR = (255, 210, 80)
AXIS_COLOR = (120, 130, 150)

# ---------- LOGGING ----------

DEBUG_LOG_TO_CONSOLE = False  # flipped on by main --debug


def log(message: str) -> None:
    """Conditional logger so the simulator stays quiet by default."""
    if DEBUG_LOG_TO_CONSOLE:
        print(f"[debug] {message}")
