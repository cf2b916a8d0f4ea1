# --- Display ---
WIDTH, HEIGHT = 900, 600
FPS = 60

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (120, 120, 120)

# --- Files ---
SAVE_FILE = 'savefile.json'

# --- Controls panel defaults ---
DEFAULT_PRESET = 'rope'
PASSES_RANGE = (1, 1000)
GRAVITY_RANGE = (0.0, 0.005)
