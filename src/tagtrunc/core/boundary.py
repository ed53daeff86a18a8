"""Selection of the truncation boundary."""

from collections.abc import Sequence

from tagtrunc.models.piece import Piece

# Returned when the whole sequence fits in the budget
NO_CUT = -1


def select_slicing_spot(pieces: Sequence[Piece], length: int) -> int:
    """Find the index of the last piece to keep visible.

    Only word pieces count toward the budget. The cut always falls right
    before a word, so tags and entities preceding that word stay visible.

    Args:
        pieces: Classified pieces in source order.
        length: Visible length budget in word characters.

    Returns:
        Index of the last visible piece, or NO_CUT if nothing needs hiding.
    """
    visible_chars = 0
    for index, piece in enumerate(pieces):
        if not piece.is_word:
            continue
        if visible_chars >= length:
            return index - 1
        visible_chars += len(piece.text)

    return NO_CUT
