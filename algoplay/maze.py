"""A text maze with monsters marching along a fixed path."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

WALL = "■"
FLOOR = "  "
MONSTER = "★"

MAZE: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 1, 1, 1, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1, 0, 0),
    (1, 0, 0, 0, 0, 0, 0, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

PATH = (1, 1, 3, 3, 3, 3, 3, 3, 3, 1, 1, 1, 3)
START = (2, 0)


class Direction(Enum):
    """A step direction; x moves two screen columns per maze cell."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-2, 0),
    Direction.RIGHT: (2, 0),
}


@dataclass(frozen=True)
class Move:
    """One monster step: the screen cell to clear and the one to draw."""

    monster: int
    erase: tuple[int, int]
    draw: tuple[int, int]
    tick: int = 0


@dataclass
class Monster:
    """A monster walking a fixed list of directions from its start position."""

    ident: int
    x: int
    y: int
    path: tuple[Direction, ...] = field(default_factory=tuple)
    step: int = 0

    def __post_init__(self) -> None:
        self.path = tuple(Direction(d) for d in self.path)

    def finished(self) -> bool:
        """Return whether every step of the path has been taken."""
        return self.step >= len(self.path)

    def advance(self) -> Move:
        """Take the next step of the path and describe it."""
        if self.finished():
            raise IndexError("monster has no steps left on its path")
        erase = (self.x, self.y)
        dx, dy = self.path[self.step].delta
        self.x += dx
        self.y += dy
        self.step += 1
        return Move(self.ident, erase, (self.x, self.y))


def render_maze(maze: Iterable[Iterable[int]]) -> str:
    """Draw walls (1) as blocks and floor (0) as two spaces, one line per row."""
    glyphs = {0: FLOOR, 1: WALL}
    return "\n".join("".join(glyphs.get(cell, "") for cell in row) for row in maze)


def simulate_monsters(
    path: Sequence[Direction | int],
    start: tuple[int, int],
    monster_count: int,
    interval: int,
) -> Iterator[Move]:
    """Yield every monster move, tick by tick.

    A new monster spawns at ``start`` every ``interval`` ticks until
    ``monster_count`` exist; the run lasts
    ``len(path) + monster_count + interval`` ticks.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    directions = tuple(Direction(d) for d in path)
    ticks = len(directions) + monster_count + interval
    monsters: list[Monster] = []
    for tick in range(ticks):
        if tick % interval == 0 and len(monsters) < monster_count:
            monsters.append(Monster(len(monsters), start[0], start[1], directions))
        for monster in monsters:
            if not monster.finished():
                yield replace(monster.advance(), tick=tick)


def _goto(out, x: int, y: int) -> None:
    out.write(f"\x1b[{y + 1};{x + 1}H")


def main(argv: Sequence[str] | None = None) -> int:
    """Draw the maze and animate the monsters in the terminal."""
    parser = argparse.ArgumentParser(description="Monsters marching through a maze.")
    parser.add_argument("--monsters", type=int, default=5, help="number of monsters")
    parser.add_argument("--interval", type=int, default=2, help="ticks between spawns")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds per move")
    args = parser.parse_args(argv)
    if args.interval <= 0:
        parser.error("--interval must be positive")

    out = sys.stdout
    out.write("\x1b[2J\x1b[H")
    out.write(render_maze(MAZE) + "\n")
    out.flush()

    for move in simulate_monsters(PATH, START, args.monsters, args.interval):
        _goto(out, *move.erase)
        out.write(FLOOR)
        _goto(out, *move.draw)
        out.write(MONSTER)
        out.flush()
        if args.delay > 0:
            time.sleep(args.delay)

    _goto(out, 0, len(MAZE))
    out.write("\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())