from __future__ import annotations

from typing import Dict

from esper import World

from lines.components.game_state import GameState
from lines.constants import BALLS_PER_TURN, MOVE_DURATION, CLEAR_DURATION, SHOOT_DURATION
from lines.errors import GameError
from lines.events.bus import EventBus, EVENT_TICK, EVENT_STATE_CHANGED
from lines.systems.game_controller import GameController
from lines.systems.spawner import random_balls
from lines.utils.world_access import get_palette


class TurnFlowSystem:
    """Advances the automatic phases of a turn once their animation time has elapsed.

    BALL_MOVING lands the ball, CLEAR_LINES clears and picks spawn cells,
    SHOOT_NEW_BALLS places them. New balls are only requested when the move
    cleared nothing.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        controller: GameController,
        *,
        balls_per_turn: int = BALLS_PER_TURN,
        durations: Dict[GameState, float] | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.controller = controller
        self.balls_per_turn = balls_per_turn
        self.durations = durations or {
            GameState.BALL_MOVING: MOVE_DURATION,
            GameState.CLEAR_LINES: CLEAR_DURATION,
            GameState.SHOOT_NEW_BALLS: SHOOT_DURATION,
        }
        self.elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_STATE_CHANGED, self.on_state_changed)

    def on_state_changed(self, sender, **kwargs):
        self.elapsed = 0.0

    def on_tick(self, sender, **kwargs):
        state = self.controller.state
        duration = self.durations.get(state)
        if duration is None:
            return
        self.elapsed += kwargs.get('dt', 0.0)
        if self.elapsed < duration:
            return
        if state == GameState.BALL_MOVING:
            self.controller.end_move()
        elif state == GameState.CLEAR_LINES:
            self._clear_and_spawn()
        elif state == GameState.SHOOT_NEW_BALLS:
            self.controller.apply_new_balls_and_advance()

    def _clear_and_spawn(self) -> None:
        count = 0 if self.controller.balls_to_clear else self.balls_per_turn
        new_balls = random_balls(get_palette(self.world), count, self.controller.random)
        result = self.controller.clear_and_spawn(new_balls)
        if not result and result.error == GameError.BOARD_FULL:
            self.controller.end_game_if_full()
