"""The live bricks of the current level.

The field is rebuilt from scratch when a level starts. Row count grows
with the level number, which is the only thing that makes later levels
harder.
"""

from typing import Iterable, Iterator, List, Tuple

from bricklane.logging import get_logger

from .brick import Brick, BrickConfig

log = get_logger('brick_field')


class BrickField:
    """Ordered collection of live bricks laid out on a fixed grid.

    Column j sits at x = j * width + offset_x and row i at
    y = i * height + offset_y, so neighbouring bricks share an edge but
    never overlap.
    """

    def __init__(self, config: BrickConfig):
        """Create an empty field.

        Args:
            config: Brick size and grid rules
        """
        self._config = config
        self._bricks: List[Brick] = []

    @property
    def bricks(self) -> Tuple[Brick, ...]:
        """Live bricks in layout order (row by row)."""
        return tuple(self._bricks)

    def rows_for_level(self, level: int) -> int:
        """Number of brick rows on the given level."""
        return self._config.base_rows + level

    def initialize(self, level: int) -> None:
        """Replace all bricks with a fresh grid for `level`.

        Args:
            level: 1-based level number
        """
        cfg = self._config
        rows = self.rows_for_level(level)
        self._bricks = [
            Brick(
                col * cfg.width + cfg.offset_x,
                row * cfg.height + cfg.offset_y,
                cfg.width,
                cfg.height,
            )
            for row in range(rows)
            for col in range(cfg.columns)
        ]
        log.debug("Level %d field: %d rows x %d columns", level, rows, cfg.columns)

    def remove_all(self, destroyed: Iterable[Brick]) -> None:
        """Remove exactly the given bricks, keeping the order of the rest.

        Args:
            destroyed: Bricks to remove; bricks not in the field are ignored
        """
        doomed = set(destroyed)
        if doomed:
            self._bricks[:] = [brick for brick in self._bricks if brick not in doomed]

    def is_empty(self) -> bool:
        """True once every brick of the level is destroyed."""
        return not self._bricks

    def __len__(self) -> int:
        return len(self._bricks)

    def __iter__(self) -> Iterator[Brick]:
        return iter(self._bricks)
