"""Fragment tokenizer.

Splits an HTML-ish fragment into tags, entities and words, then classifies
each piece by its first character.
"""

import re
from collections.abc import Iterable

from tagtrunc.models.piece import Piece, PieceKind

# Alternatives are tried in order at each position: tag, word (with its
# trailing spaces), entity. Unmatched characters are skipped.
PIECE_PATTERN = re.compile(r"<[^<>]+>|[^<>& ]+ *|&[^ ]+;")


def split(fragment: str) -> list[str]:
    """Split a fragment into raw pieces.

    Args:
        fragment: The HTML fragment.

    Returns:
        Raw piece strings in source order.
    """
    return PIECE_PATTERN.findall(fragment)


def tag_piece(text: str) -> Piece:
    """Classify a raw piece by its first character."""
    if text.startswith("<"):
        kind = PieceKind.TAG
    elif text.startswith("&"):
        kind = PieceKind.ENTITY
    else:
        kind = PieceKind.WORD
    return Piece(kind=kind, text=text)


def tag_pieces(texts: Iterable[str]) -> list[Piece]:
    return [tag_piece(text) for text in texts]


def tokenize(fragment: str) -> list[Piece]:
    """Split and classify a fragment in one step."""
    return tag_pieces(split(fragment))
