"""Entry point for the Lines prototype.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, key
from lines.world import create_world
from lines.constants import BOARD_WIDTH, BOARD_HEIGHT, WINDOW_WIDTH, WINDOW_HEIGHT
from lines.events.bus import EventBus, EVENT_TICK, EVENT_MOUSE_PRESS
from lines.systems.cell_click import CellClickSystem
from lines.systems.game_controller import GameController
from lines.systems.input import InputSystem
from lines.systems.render import RenderSystem
from lines.systems.turn_flow import TurnFlowSystem


class LinesWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Lines")
        self.set_update_rate(1/60)
        set_background_color((30, 32, 40))
        self.start_session()

    def start_session(self):
        # Each game gets its own bus, world and systems; a finished session is discarded.
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, BOARD_WIDTH, BOARD_HEIGHT)
        self.controller = GameController(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.controller)
        self.input_system = InputSystem(self.event_bus, self, BOARD_WIDTH, BOARD_HEIGHT)
        self.cell_click_system = CellClickSystem(self.event_bus, self.controller)
        self.turn_flow_system = TurnFlowSystem(self.world, self.event_bus, self.controller)
        self.controller.new_game()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.N:
            self.start_session()


def main():
    logging.basicConfig(level=logging.INFO)
    LinesWindow()
    run()

if __name__ == "__main__":
    main()
