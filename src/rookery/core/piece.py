"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.enums import Color, PieceType

_GLYPHS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FROM_GLYPH: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _GLYPHS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Unicode glyph, e.g. ♞."""
        return _GLYPHS[(self.color, self.piece_type)]

    @classmethod
    def from_glyph(cls, glyph: str) -> Piece:
        """Create piece from its unicode glyph, e.g. '♘' → white knight."""
        try:
            color, ptype = _FROM_GLYPH[glyph.strip()]
        except KeyError:
            raise ValueError(f"Not a recognized piece: {glyph!r}") from None
        return cls(color, ptype)

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING
