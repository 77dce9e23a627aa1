from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so handlers on systems that are not kept in a variable still fire.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_CELL_CLICK = "cell_click"            # payload: x, y, button


# ============================================================================
# SELECTION & MOVES
# ============================================================================
EVENT_BALL_SELECTED = "ball_selected"              # payload: x, y, ball
EVENT_BALL_DESELECTED = "ball_deselected"          # payload: x, y, reason=str
EVENT_BALL_MOVE_STARTED = "ball_move_started"      # payload: src=(x,y), dst=(x,y), ball
EVENT_BALL_MOVE_ENDED = "ball_move_ended"          # payload: dst=(x,y), ball, balls_to_clear=list[(x,y)]


# ============================================================================
# LINES & SPAWNING
# ============================================================================
EVENT_LINES_CLEARED = "lines_cleared"      # payload: positions=list[(x,y)]
EVENT_BALLS_SHOT = "balls_shot"            # payload: balls=list[((x,y), Ball)]
EVENT_BALLS_PLACED = "balls_placed"        # payload: balls=list[((x,y), Ball)], next_state=GameState


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_NEW_GAME_STARTED = "new_game_started"    # payload: width, height, balls=list[((x,y), Ball)]
EVENT_STATE_CHANGED = "state_changed"          # payload: previous_state=GameState, new_state=GameState
EVENT_GAME_OVER = "game_over"                  # payload: reason=str
EVENT_COMMAND_REJECTED = "command_rejected"    # payload: command=str, error=GameError, message=str
