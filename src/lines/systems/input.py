from lines.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_CELL_CLICK
from lines.ui.layout import cell_at


class InputSystem:
    """Translates raw mouse presses into cell clicks on the board grid."""

    def __init__(self, event_bus: EventBus, window, cols: int, rows: int):
        self.event_bus = event_bus
        self.window = window
        self.cols = cols
        self.rows = rows
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        cell = cell_at(x, y, self.window.width, self.window.height, self.cols, self.rows)
        if cell is None:
            return
        self.event_bus.emit(EVENT_CELL_CLICK, x=cell[0], y=cell[1], button=button)
