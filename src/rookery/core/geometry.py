"""Board geometry: alignment tests, directions and paths between squares.

Nothing here looks at board contents.  Functions that need two aligned or
distinct squares raise :class:`ValueError` when handed anything else; that is
a caller bug, not an illegal move.
"""

from __future__ import annotations

from rookery.core.enums import Sign
from rookery.core.types import BOARD_SIZE, Direction, Square


def in_bounds(sq: Square) -> bool:
    return 0 <= sq[0] < BOARD_SIZE and 0 <= sq[1] < BOARD_SIZE


def is_horizontal(a: Square, b: Square) -> bool:
    """Same row."""
    return a[0] == b[0]


def is_vertical(a: Square, b: Square) -> bool:
    """Same column."""
    return a[1] == b[1]


def is_diagonal(a: Square, b: Square) -> bool:
    return abs(b[0] - a[0]) == abs(b[1] - a[1])


def direction_of(a: Square, b: Square) -> Direction | None:
    """Direction of the straight line from *a* to *b*.

    Returns ``None`` when ``a == b`` or the squares share no row, column or
    diagonal (e.g. a knight jump).

    Raises:
        ValueError: if either square is off the board.
    """
    if not in_bounds(a) or not in_bounds(b):
        raise ValueError(f"Square out of bounds: {a} -> {b}")
    if a == b:
        return None
    if is_horizontal(a, b) or is_vertical(a, b) or is_diagonal(a, b):
        return (Sign.from_int(b[0] - a[0]), Sign.from_int(b[1] - a[1]))
    return None


def path_between(a: Square, b: Square) -> list[Square]:
    """Squares strictly between *a* and *b*, ordered from *a* towards *b*.

    Empty for adjacent squares.

    Raises:
        ValueError: if the squares are identical, off the board or not aligned.
    """
    direction = direction_of(a, b)
    if direction is None:
        raise ValueError(f"No straight path between {a} and {b}")
    dr, dc = direction
    path: list[Square] = []
    row, col = a[0] + dr, a[1] + dc
    while (row, col) != b:
        path.append((row, col))
        row += dr
        col += dc
    return path


def directed_ray(start: Square, direction: Direction) -> list[Square]:
    """Squares from just past *start* to the board edge along *direction*.

    Raises:
        ValueError: for the zero direction.
    """
    dr, dc = direction
    if dr == Sign.ZERO and dc == Sign.ZERO:
        raise ValueError("(ZERO, ZERO) is not a direction")
    ray: list[Square] = []
    row, col = start[0] + dr, start[1] + dc
    while in_bounds((row, col)):
        ray.append((row, col))
        row += dr
        col += dc
    return ray


def offset_squares(origin: Square, offsets: tuple[tuple[int, int], ...]) -> list[Square]:
    """On-board squares at each *offset* from *origin*, in offset order."""
    squares = [(origin[0] + dr, origin[1] + dc) for dr, dc in offsets]
    return [sq for sq in squares if in_bounds(sq)]
