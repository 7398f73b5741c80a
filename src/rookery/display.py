"""Terminal rendering of a position."""

from __future__ import annotations

from termcolor import colored

from rookery.core.position import Position
from rookery.core.types import BOARD_SIZE

# Background highlights for the two square shades
_DARK_ON = "on_light_grey"
_LIGHT_ON = "on_white"


def render_board(position: Position, color: bool = True) -> str:
    """Board as text, row 1 at the top, one-indexed labels on both axes.

    With *color* the squares get a checkered background; without it empty
    squares show as ``.`` so the grid stays readable.  The *color* flag is
    the user's choice, so colour is forced even when stdout is not a tty.
    """
    header = "    " + "".join(f" {col + 1} " for col in range(BOARD_SIZE))
    lines = [header]
    for row in range(BOARD_SIZE):
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            piece = position[(row, col)]
            if color:
                on_color = _DARK_ON if (row + col) % 2 == 0 else _LIGHT_ON
                glyph = str(piece) if piece is not None else " "
                cells.append(colored(f" {glyph} ", on_color=on_color, force_color=True))
            else:
                cells.append(f" {piece if piece is not None else '.'} ")
        lines.append(f" {row + 1}  {''.join(cells)}")
    return "\n".join(lines)
