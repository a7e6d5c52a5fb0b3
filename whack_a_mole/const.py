# Session
GAME_DURATION_SEC = 30             # countdown start value (seconds)
COUNTDOWN_TICK_MS = 1000           # countdown ticker period

# Board
BOARD_SIZE = 9                     # number of holes

# Timing
MOLE_SPAWN_INTERVAL_MS = 600       # how often a new mole can appear
MOLE_SHOW_TIME_MS = 800            # how long an unhit mole stays visible
HIT_DESPAWN_MS = 100               # how long a whacked mole stays on screen

# UX
LOW_TIME_WARNING_SEC = 5           # time display turns red at or below this
