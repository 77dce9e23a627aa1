from lines.components.game_state import GameState
from lines.constants import MOUSE_BUTTON_LEFT, MOUSE_BUTTON_RIGHT
from lines.events.bus import EventBus, EVENT_CELL_CLICK
from lines.systems.game_controller import GameController


class CellClickSystem:
    """Routes cell clicks to controller commands.

    Left click on a ball selects it (or switches the selection); left click on
    an empty cell while a ball is selected starts the move. Right click drops
    the current selection. Clicks in any other phase are ignored.
    """

    def __init__(self, event_bus: EventBus, controller: GameController):
        self.event_bus = event_bus
        self.controller = controller
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', MOUSE_BUTTON_LEFT)
        if x is None or y is None:
            return
        state = self.controller.state
        if button == MOUSE_BUTTON_RIGHT:
            if state == GameState.BALL_SELECTED:
                self.controller.cancel_selection(reason='right_click')
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        if state not in (GameState.WAITING_FOR_SELECTION, GameState.BALL_SELECTED):
            return
        if not self.controller.in_bounds(x, y):
            return
        if self.controller.is_occupied(x, y):
            self.controller.select_ball(x, y)
        elif state == GameState.BALL_SELECTED:
            self.controller.start_move(x, y)
