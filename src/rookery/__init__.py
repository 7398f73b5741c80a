"""Rookery: a small chess rules engine with terminal and Qt front ends.

The rules live in :mod:`rookery.core`, game flow (undo, random moves,
checkpoints) in :mod:`rookery.game`.
"""

__version__ = "0.1.0"
