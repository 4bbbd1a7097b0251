# Default board footprint (the classic 6 x 9 chain reaction grid).
GRID_ROWS = 6
GRID_COLS = 9

MIN_BOARD_SIDE = 1

# Two capacity-1 cells facing each other detonate into one another forever.
CYCLING_BOARD_SHAPES = ((1, 2), (2, 1))

MIN_PLAYERS = 2
MAX_PLAYERS = 4

# Seat-ordered display colours; the engine never interprets them.
PLAYER_COLORS = (
    (255, 0, 0),     # red
    (0, 255, 0),     # green
    (0, 0, 255),     # blue
    (255, 165, 0),   # orange
)

DEFAULT_PLAYER_NAME = "Player {n}"

# Seconds between detonation steps when a ChainPacerSystem drives resolution.
EXPLOSION_STEP_DELAY = 0.3
