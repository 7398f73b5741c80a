"""Game management layer: session, undo history and random moves.

Quick start::

    from rookery.game import GameSession, RandomMover

    session = GameSession()
    session.submit_move((1, 4), (3, 4))
    session.play_random(RandomMover())
    session.undo()
"""

from rookery.game.player import RandomMover
from rookery.game.session import GameSession, GameStatus, SessionEvents

__all__ = [
    "GameSession",
    "GameStatus",
    "RandomMover",
    "SessionEvents",
]
