from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

@dataclass(slots=True)
class BallPalette:
    """Canonical ball colors stored on the state entity.

    Maps color name -> RGB for renderers and keeps the subset of names new
    balls are drawn from.
    """
    colors: Dict[str, Tuple[int, int, int]]
    spawnable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.spawnable:
            self.set_spawnable(self.spawnable)
        else:
            self.spawnable = list(self.colors.keys())

    def rgb_for(self, color: str) -> Tuple[int, int, int]:
        return self.colors[color]

    def spawnable_colors(self) -> List[str]:
        return list(self.spawnable)

    def set_spawnable(self, names: Iterable[str]) -> None:
        # Preserve order while filtering unknown or repeated names.
        seen: set[str] = set()
        filtered: List[str] = []
        for name in names:
            if name in self.colors and name not in seen:
                filtered.append(name)
                seen.add(name)
        self.spawnable = filtered or list(self.colors.keys())


DEFAULT_COLORS: Dict[str, Tuple[int, int, int]] = {
    'red':     (220, 50, 50),
    'green':   (50, 180, 50),
    'blue':    (50, 100, 220),
    'yellow':  (220, 180, 50),
    'magenta': (180, 50, 180),
    'cyan':    (50, 200, 200),
    'orange':  (255, 130, 50),
}
