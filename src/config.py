WIDTH = 800
HEIGHT = 400
FULLSCREEN = False
FPS = 60
VSYNC = False
# Print driver/spawner diagnostics to stdout
VERBOSE = False

# Terrain strip at the bottom of the screen; everything stands on GROUND_Y
GROUND_HEIGHT = 50
GROUND_Y = HEIGHT - GROUND_HEIGHT

# Simulated duration of a single tick (ms). Animation timers advance by this.
TICK_MS = 16

# Player kinematics (per tick)
GRAVITY = 0.6
JUMP_POWER = -12.0
# Second jump is weaker than the first
DOUBLE_JUMP_FACTOR = 0.8
PLAYER_X = 50
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 50
PLAYER_DUCK_HEIGHT = 25
PLAYER_FRAME_COUNT = 8
PLAYER_FRAME_INTERVAL_MS = 100

# Scrolling / pacing
INITIAL_SCROLL_SPEED = 6.0
SPEED_STEP = 0.5
SPEED_STEP_EVERY = 1000
SCORE_NOTIFY_EVERY = 100
NIGHT_MODE_EVERY = 5000
NIGHT_MODE_DURATION = 5000

# Spawn gates (ms of simulated time)
OBSTACLE_SPAWN_MIN_MS = 1000
OBSTACLE_SPAWN_MAX_MS = 3000
# Obstacle interval multiplier = max(DIFFICULTY_FLOOR, 1 - score / DIFFICULTY_SCORE_SPAN)
DIFFICULTY_SCORE_SPAN = 10000
DIFFICULTY_FLOOR = 0.5
POWER_UP_SPAWN_MIN_MS = 10000
POWER_UP_SPAWN_MAX_MS = 15000
# Vertical band kept clear of the sky edge and the ground strip
SAFE_BAND_TOP = 50
SAFE_BAND_BOTTOM_MARGIN = 50

# Effects
SHIELD_DURATION_TICKS = 500  # about 8 seconds
CROW_FLAP_INTERVAL_MS = 200

# Parallax layers (cosmetic)
STAR_COUNT = 100
PLANET_COUNT = 3

# Colors (presentation only)
SKY_DAY = (0, 0, 0)
SKY_NIGHT = (0, 0, 51)
GROUND_DAY = (51, 0, 51)
GROUND_NIGHT = (0, 51, 0)
GROUND_DETAIL_DAY = (68, 0, 68)
GROUND_DETAIL_NIGHT = (0, 68, 0)
