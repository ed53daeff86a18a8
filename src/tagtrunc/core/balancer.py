"""Cutting a piece sequence and rebalancing tags across the cut."""

import logging
from collections.abc import Sequence

from tagtrunc.models.piece import Piece, PieceKind

logger = logging.getLogger(__name__)


def _closing_text(text: str) -> str:
    return text.replace("<", "</")


def closing_tag_of(candidate: Piece | None, opener: Piece | None) -> bool:
    """Check whether ``candidate`` closes ``opener``.

    Matching is literal: the opener's text with ``<`` rewritten to ``</``
    must equal the candidate's text. Singleton tags such as ``<br/>`` never
    match anything.
    """
    if candidate is None or not candidate.is_tag:
        return False
    if opener is None or not opener.is_tag:
        return False
    return _closing_text(opener.text) == candidate.text


def opened_tags(pieces: Sequence[Piece]) -> list[Piece]:
    """Return tags left open after scanning ``pieces``, outermost first."""
    stack: list[Piece] = []
    for piece in pieces:
        if not piece.is_tag:
            continue
        if stack and closing_tag_of(piece, stack[-1]):
            stack.pop()
        else:
            stack.append(piece)
    return stack


def closing_tag_piece(tag: Piece) -> Piece:
    """Build the synthetic closing tag for an opener."""
    return Piece(kind=PieceKind.TAG, text=_closing_text(tag.text))


def slice_pieces(
    pieces: Sequence[Piece], spot: int
) -> tuple[list[Piece], list[Piece]]:
    """Cut ``pieces`` after index ``spot`` and balance tags on both sides.

    Tags still open at the cut are closed at the end of the prefix
    (innermost first) and reopened at the start of the suffix (outermost
    first).

    Args:
        pieces: Classified pieces in source order.
        spot: Index of the last piece to keep in the prefix; negative
            means no cut.

    Returns:
        Tuple of (prefix, suffix) piece lists.
    """
    if spot < 0:
        return list(pieces), []

    prefix = list(pieces[: spot + 1])
    suffix = list(pieces[spot + 1 :])

    unclosed = opened_tags(prefix)
    if unclosed:
        logger.debug(
            "Rebalancing %d tag(s) across cut at %d: %s",
            len(unclosed),
            spot,
            "".join(tag.text for tag in unclosed),
        )

    prefix.extend(closing_tag_piece(tag) for tag in reversed(unclosed))
    suffix[:0] = unclosed

    return prefix, suffix
