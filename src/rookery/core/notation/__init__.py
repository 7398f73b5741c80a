"""Notation package: plain-text board serialization."""

from rookery.core.notation.board_text import (
    EMPTY_TOKEN,
    BoardFormatError,
    load_position,
    position_from_text,
    position_to_text,
    save_position,
)

__all__ = [
    "EMPTY_TOKEN",
    "BoardFormatError",
    "load_position",
    "position_from_text",
    "position_to_text",
    "save_position",
]
