"""Random move selection."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from rookery.core.errors import NoLegalMoveError
from rookery.core.rules import Rules
from rookery.core.types import Square

if TYPE_CHECKING:
    from rookery.core.position import Position


class RandomMover:
    """Picks a uniformly random piece that can move, then a random destination.

    The generator is injected so games can be replayed from a seed.

    Args:
        rng: Source of randomness; a fresh :class:`random.Random` if omitted.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def choose(self, position: Position) -> tuple[Square, Square]:
        """Return a legal ``(from, to)`` for the side to move.

        Raises:
            NoLegalMoveError: if the side to move cannot move.
        """
        from_squares = position.pieces()
        self._rng.shuffle(from_squares)
        for from_sq in from_squares:
            destinations = Rules.legal_destinations(position, from_sq)
            if destinations:
                return from_sq, self._rng.choice(destinations)
        raise NoLegalMoveError(
            f"On turn {position.turn}, {position.side_to_move} has no valid moves"
        )
