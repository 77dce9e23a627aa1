import arcade
from esper import World

from lines.components.game_state import GameState
from lines.constants import BALL_PADDING, MOVE_DURATION
from lines.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_BALL_SELECTED,
    EVENT_BALL_DESELECTED,
    EVENT_BALL_MOVE_STARTED,
    EVENT_BALL_MOVE_ENDED,
    EVENT_BALLS_SHOT,
    EVENT_BALLS_PLACED,
    EVENT_NEW_GAME_STARTED,
)
from lines.systems.game_controller import GameController
from lines.ui.layout import compute_board_geometry, cell_center
from lines.utils.world_access import get_palette

CELL_FILL = (60, 65, 80)
CELL_OUTLINE = (80, 85, 100)
SELECTED_OUTLINE = (255, 220, 100)
CLEAR_OUTLINE = (255, 255, 255)


class RenderSystem:
    """Draws the board, the selection highlight, the ball in flight and pending spawns."""

    def __init__(self, world: World, event_bus: EventBus, window, controller: GameController):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.controller = controller
        self.selected = None
        self.move_src = None
        self.move_progress = 0.0
        self.incoming = []
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_BALL_SELECTED, self.on_ball_selected)
        self.event_bus.subscribe(EVENT_BALL_DESELECTED, self.on_ball_deselected)
        self.event_bus.subscribe(EVENT_BALL_MOVE_STARTED, self.on_move_started)
        self.event_bus.subscribe(EVENT_BALL_MOVE_ENDED, self.on_move_ended)
        self.event_bus.subscribe(EVENT_BALLS_SHOT, self.on_balls_shot)
        self.event_bus.subscribe(EVENT_BALLS_PLACED, self.on_balls_placed)
        self.event_bus.subscribe(EVENT_NEW_GAME_STARTED, self.on_new_game)

    def on_tick(self, sender, **kwargs):
        if self.move_src is not None:
            self.move_progress = min(1.0, self.move_progress + kwargs.get('dt', 0.0) / MOVE_DURATION)

    def on_ball_selected(self, sender, **kwargs):
        self.selected = (kwargs.get('x'), kwargs.get('y'))

    def on_ball_deselected(self, sender, **kwargs):
        self.selected = None

    def on_move_started(self, sender, **kwargs):
        self.selected = None
        self.move_src = kwargs.get('src')
        self.move_progress = 0.0

    def on_move_ended(self, sender, **kwargs):
        self.move_src = None

    def on_balls_shot(self, sender, **kwargs):
        self.incoming = [pos for pos, _ in kwargs.get('balls', [])]

    def on_balls_placed(self, sender, **kwargs):
        self.incoming = []

    def on_new_game(self, sender, **kwargs):
        self.selected = None
        self.move_src = None
        self.incoming = []

    def process(self):
        controller = self.controller
        palette = get_palette(self.world)
        w, h = self.window.width, self.window.height
        tile_size, start_x, start_y = compute_board_geometry(w, h, controller.width, controller.height)
        radius = max(tile_size - BALL_PADDING, 4) / 2
        pending_clear = set(self.controller.balls_to_clear)
        for x in range(controller.width):
            for y in range(controller.height):
                left = start_x + x * tile_size
                bottom = start_y + (controller.height - 1 - y) * tile_size
                arcade.draw_lbwh_rectangle_filled(left, bottom, tile_size, tile_size, CELL_FILL)
                arcade.draw_lbwh_rectangle_outline(left, bottom, tile_size, tile_size, CELL_OUTLINE, 1)
                cx, cy = cell_center(x, y, w, h, controller.width, controller.height)
                ball = controller.get(x, y)
                if ball is not None:
                    arcade.draw_circle_filled(cx, cy, radius, palette.rgb_for(ball.color))
                    if (x, y) in pending_clear:
                        arcade.draw_circle_outline(cx, cy, radius + 2, CLEAR_OUTLINE, 3)
                if (x, y) == self.selected:
                    arcade.draw_circle_outline(cx, cy, radius + 3, SELECTED_OUTLINE, 3)
                if (x, y) in self.incoming:
                    arcade.draw_circle_outline(cx, cy, radius / 3, CELL_OUTLINE, 2)
        moving = self.controller.moving_ball
        dst = self.controller.moving_destination
        if moving is not None and dst is not None and self.move_src is not None:
            sx, sy = cell_center(*self.move_src, w, h, controller.width, controller.height)
            dx, dy = cell_center(*dst, w, h, controller.width, controller.height)
            p = self.move_progress
            arcade.draw_circle_filled(sx + (dx - sx) * p, sy + (dy - sy) * p, radius, palette.rgb_for(moving.color))
        if self.controller.state == GameState.GAME_OVER:
            arcade.draw_text("Game over - press N for a new game", w / 2, h - 14,
                             arcade.color.WHITE, 14, anchor_x="center", anchor_y="center")
