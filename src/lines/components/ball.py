from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Ball:
    """A ball on the board. Only its color matters to the rules.

    Visual representation (RGB, sprite, outline) is looked up by color name in
    the BallPalette registry by whoever draws the board.
    """
    color: str
