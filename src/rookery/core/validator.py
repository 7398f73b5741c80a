"""Move validation: the single legality decision for a ``(from, to)`` pair.

:func:`validate_move` layers check and pin rules over the per-piece
geometry in :mod:`rookery.core.movement`:

* Moving the king: the destination must not be attacked, and a king in
  check may not retreat along the line of a sliding attacker (the ray scan
  from the destination would otherwise be blocked by the king itself).
* Moving anything else, by pin state and number of checking pieces:

  ======== ========== ==============================================
  pinned   attackers  outcome
  ======== ========== ==============================================
  yes      0          legal only along the pin line
  yes      1+         illegal
  no       0          legal
  no       1          legal only if it captures or blocks the checker
  no       2+         illegal, only the king can move
  ======== ========== ==============================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookery.core.attacks import attackers_of, pin_direction
from rookery.core.enums import Color
from rookery.core.errors import IllegalMoveError, MoveError
from rookery.core.geometry import direction_of, in_bounds, path_between
from rookery.core.movement import can_move
from rookery.core.types import Direction, Square, square_label

if TYPE_CHECKING:
    from rookery.core.position import Position


def _out_of_bounds(sq: Square) -> IllegalMoveError:
    return IllegalMoveError(
        MoveError.OUT_OF_BOUNDS, f"{square_label(sq)} is out of bounds."
    )


def validate_from(position: Position, from_sq: Square, color: Color | None = None) -> None:
    """Ensure *from_sq* is on the board and holds a piece of *color*.

    *color* defaults to the side to move.

    Raises:
        IllegalMoveError: ``OUT_OF_BOUNDS``, ``NO_PIECE`` or ``NOT_YOUR_PIECE``.
    """
    color = position.side_to_move if color is None else color
    if not in_bounds(from_sq):
        raise _out_of_bounds(from_sq)
    piece = position[from_sq]
    if piece is None:
        raise IllegalMoveError(MoveError.NO_PIECE)
    if piece.color != color:
        raise IllegalMoveError(MoveError.NOT_YOUR_PIECE)


def validate_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    color: Color | None = None,
) -> None:
    """Raise :class:`IllegalMoveError` unless *color* may play *from_sq* → *to_sq*.

    *color* defaults to the side to move.  A missing king for *color* is a
    malformed position and raises :class:`ValueError`.
    """
    color = position.side_to_move if color is None else color
    validate_from(position, from_sq, color)
    if not in_bounds(to_sq):
        raise _out_of_bounds(to_sq)

    target = position[to_sq]
    if target is not None:
        if target.is_king:
            raise IllegalMoveError(MoveError.CAPTURE_KING)
        if target.color == color:
            raise IllegalMoveError(MoveError.SQUARE_OCCUPIED)

    piece = position[from_sq]
    assert piece is not None
    can_move(piece, position, from_sq, to_sq)

    king_sq = position.king_square(color)
    checkers = attackers_of(position, king_sq, color)
    move_dir = direction_of(from_sq, to_sq)

    if from_sq == king_sq:
        _validate_king_move(position, from_sq, to_sq, color, checkers, move_dir)
    else:
        _validate_piece_move(position, from_sq, to_sq, color, king_sq, checkers, move_dir)


def _validate_king_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    color: Color,
    checkers: list[Square],
    move_dir: Direction | None,
) -> None:
    if attackers_of(position, to_sq, color):
        if checkers:
            raise IllegalMoveError(MoveError.STILL_IN_CHECK)
        raise IllegalMoveError(MoveError.SELF_CHECK)

    # Stepping straight away from a slider: from to_sq the ray back towards
    # the attacker is blocked by the king's own (old) square.
    for attacker in checkers:
        attack_dir = direction_of(attacker, from_sq)
        if attack_dir is not None and attack_dir == move_dir:
            raise IllegalMoveError(MoveError.STILL_IN_CHECK)


def _validate_piece_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    color: Color,
    king_sq: Square,
    checkers: list[Square],
    move_dir: Direction | None,
) -> None:
    pin_dir = pin_direction(position, from_sq, king_sq, color)

    if pin_dir is not None:
        if checkers:
            raise IllegalMoveError(MoveError.PINNED_IN_CHECK)
        if move_dir is None:
            raise IllegalMoveError(MoveError.PINNED_NO_LINE)
        if move_dir != pin_dir:
            raise IllegalMoveError(MoveError.PINNED_OFF_LINE)
        return

    if not checkers:
        return
    if len(checkers) > 1:
        raise IllegalMoveError(MoveError.MUST_MOVE_KING)

    checker = checkers[0]
    if to_sq == checker:
        return
    # A knight has no line to block.
    if direction_of(checker, king_sq) is not None and to_sq in path_between(checker, king_sq):
        return
    raise IllegalMoveError(MoveError.STILL_IN_CHECK)


def is_legal_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    color: Color | None = None,
) -> bool:
    """Boolean form of :func:`validate_move`."""
    try:
        validate_move(position, from_sq, to_sq, color)
    except IllegalMoveError:
        return False
    return True
