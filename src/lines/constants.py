BOARD_WIDTH = 9
BOARD_HEIGHT = 9

# Shortest run of same-colored balls that gets cleared.
MIN_LINE_LENGTH = 5

# Balls requested from the spawner after every move that clears nothing.
BALLS_PER_TURN = 3
# Balls placed on the board when a new game starts.
INITIAL_BALLS = 5

# Pacing (seconds) used by TurnFlowSystem in place of real animations.
MOVE_DURATION = 0.15
CLEAR_DURATION = 0.25
SHOOT_DURATION = 0.2

# Window / layout
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
TILE_SIZE = 60
BOTTOM_MARGIN = 20
BALL_PADDING = 10

# Mouse buttons as reported by arcade
MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4
