# === Global configuration & tuning ===

# Size of one expanded tile in pixels, used for collision rectangles
TILE = 24

# === Procedural Level Generation Configuration ===
# Level size, in cells. The tile grid is 2 * size + 1 on each axis.
LEVEL_WIDTH = 15
LEVEL_HEIGHT = 15

# Maze shaping (all 0-100)
MAZE_RANDOMNESS = 30      # How often corridors turn
MAZE_SPARSENESS = 70      # Percentage of cells sealed back into rock
DEAD_END_REMOVAL = 0      # Chance for each dead end to be extended into a loop

# Rooms
NUM_ROOMS = 5
ROOM_MIN_WIDTH = 2
ROOM_MAX_WIDTH = 3
ROOM_MIN_HEIGHT = 2
ROOM_MAX_HEIGHT = 3

# Seed used when none is configured; None draws a fresh one per run
DEFAULT_SEED = None

# Location of the JSON overrides read by src.level.config_loader
LEVEL_CONFIG_PATH = "config/level_config.json"
