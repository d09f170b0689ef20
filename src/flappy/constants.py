"""
constants.py: Default tuning values for the game world.
"""

# -------- Playfield Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
RENDER_FPS = 60                 # One simulation tick per rendered frame

# -------- Sprite Config --------
SPRITE_WIDTH = 40
SPRITE_HEIGHT = 30
SPRITE_X_RATIO = 0.25           # Spawn x as a fraction of playfield width
SPRITE_Y_RATIO = 0.5            # Spawn y as a fraction of playfield height

# -------- Physics Config (units / tick) --------
GRAVITY = 0.3                   # Added to dy every tick
JUMP_IMPULSE = -8.0             # dy is set to this on jump

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 200
PIPE_SPEED = 2.0                # Horizontal speed (units/tick)
PIPE_FREQUENCY = 100            # Spawn every 100 ticks
PIPE_MIN_MARGIN = 50            # Minimum pipe length above and below the gap

# -------- Environment --------
ENV_PREFIX = "FLAPPY_"
