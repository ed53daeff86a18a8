"""Top-level truncation entry points."""

import logging

from tagtrunc.core.balancer import slice_pieces
from tagtrunc.core.boundary import select_slicing_spot
from tagtrunc.core.tokenizer import tokenize
from tagtrunc.models.truncate import TruncateRequest, TruncationResult

logger = logging.getLogger(__name__)


def truncate(fragment: str, length: int) -> tuple[str, str]:
    """Truncate a fragment to a visible word-character budget.

    Args:
        fragment: The HTML fragment.
        length: Visible length budget, counted over word text only.

    Returns:
        Tuple of (visible, hidden). Both halves are balanced: tags open at
        the cut are closed in ``visible`` and reopened in ``hidden``.
    """
    pieces = tokenize(fragment)
    spot = select_slicing_spot(pieces, length)
    visible, hidden = slice_pieces(pieces, spot)

    logger.debug(
        "Truncated fragment",
        extra={
            "fragment_chars": len(fragment),
            "length": length,
            "pieces": len(pieces),
            "spot": spot,
        },
    )

    return (
        "".join(piece.text for piece in visible),
        "".join(piece.text for piece in hidden),
    )


trunc = truncate


def truncate_fragment(fragment: str, length: int) -> TruncationResult:
    """Truncate a fragment and wrap the halves in a TruncationResult.

    Unlike ``truncate``, arguments are validated first.

    Raises:
        pydantic.ValidationError: If ``fragment`` is not a string or
            ``length`` is negative.
    """
    request = TruncateRequest(fragment=fragment, length=length)
    visible, hidden = truncate(request.fragment, request.length)
    return TruncationResult(visible=visible, hidden=hidden, truncated=bool(hidden))
