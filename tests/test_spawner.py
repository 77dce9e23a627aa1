import random

from lines.components.ball import Ball
from lines.components.ball_palette import BallPalette, DEFAULT_COLORS
from lines.systems.spawner import choose_spawn_positions, random_balls


def test_places_min_of_requested_and_available():
    rng = random.Random(0)
    empty = [(0, 0), (1, 1)]
    balls = [Ball("red"), Ball("blue"), Ball("green")]
    chosen = choose_spawn_positions(empty, balls, rng)
    assert len(chosen) == 2
    assert {pos for pos, _ in chosen} <= set(empty)
    assert [ball for _, ball in chosen] == balls[:2]


def test_positions_are_distinct_empty_cells():
    rng = random.Random(5)
    empty = [(x, y) for x in range(3) for y in range(3)]
    chosen = choose_spawn_positions(empty, [Ball("red")] * 4, rng)
    positions = [pos for pos, _ in chosen]
    assert len(positions) == len(set(positions)) == 4
    assert all(pos in empty for pos in positions)


def test_no_empty_cells_returns_empty():
    assert choose_spawn_positions([], [Ball("red")], random.Random(0)) == []


def test_no_requested_balls_returns_empty():
    assert choose_spawn_positions([(0, 0)], [], random.Random(0)) == []


def test_same_seed_same_choice():
    empty = [(x, y) for x in range(9) for y in range(9)]
    balls = [Ball("red"), Ball("blue"), Ball("green")]
    first = choose_spawn_positions(empty, balls, random.Random(42))
    second = choose_spawn_positions(empty, balls, random.Random(42))
    assert first == second


def test_does_not_mutate_inputs():
    empty = [(0, 0), (0, 1), (0, 2)]
    balls = [Ball("red")]
    choose_spawn_positions(empty, balls, random.Random(1))
    assert empty == [(0, 0), (0, 1), (0, 2)]
    assert balls == [Ball("red")]


def test_random_balls_use_spawnable_colors():
    palette = BallPalette(colors=dict(DEFAULT_COLORS), spawnable=["red", "blue"])
    balls = random_balls(palette, 20, random.Random(3))
    assert len(balls) == 20
    assert {ball.color for ball in balls} <= {"red", "blue"}


def test_palette_filters_unknown_spawnable_names():
    palette = BallPalette(colors=dict(DEFAULT_COLORS), spawnable=["red", "nope", "red"])
    assert palette.spawnable_colors() == ["red"]
    palette.set_spawnable(["nope"])
    assert palette.spawnable_colors() == list(DEFAULT_COLORS.keys())
    assert palette.rgb_for("red") == DEFAULT_COLORS["red"]
