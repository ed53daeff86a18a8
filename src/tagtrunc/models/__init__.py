"""Data models."""

from tagtrunc.models.piece import Piece, PieceKind
from tagtrunc.models.truncate import TruncateRequest, TruncationResult

__all__ = ["Piece", "PieceKind", "TruncateRequest", "TruncationResult"]
