# --- window & timing ---
SCREEN_W, SCREEN_H = 1024, 768
FPS = 60
WINDOW_TITLE = "Hyrule Map Explorer"
CLEAR_COLOUR = (0, 0, 0)

# --- assets (relative to the working directory) ---
BACKGROUND_PATH = "assets/map-part1.jpg"
PLAYER_SPRITE_PATH = "assets/chest.png"
MUSIC_PATH = "assets/kakariko-village.mp3"

# --- audio ---
SAMPLE_RATE = 48000

# --- camera ---
TARGET_TILE = 512         # the map is split into tiles of roughly this many pixels
CAMERA_FOLLOW = True      # False hands the viewport back to the arrow keys
PAN_TILES = 1             # tiles moved per frame by the arrow keys

# --- player ---
PLAYER_SPEED = 3.0        # world pixels per frame
PLAYER_SCREEN_FRACTION = 0.03   # sprite size relative to the smaller window side

# --- shadow under the player ---
SHADOW_W_FRACTION = 0.8
SHADOW_H_FRACTION = 0.3
SHADOW_OFFSET_Y = 2.1     # in player heights, measured from the sprite top
SHADOW_ALPHA = 100
SHADOW_OPACITY = 0.9
