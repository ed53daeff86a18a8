"""Fragment piece models produced by the tokenizer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PieceKind(str, Enum):
    """Classification of a fragment piece."""

    TAG = "tag"
    ENTITY = "entity"
    WORD = "word"


class Piece(BaseModel):
    """An atomic, immutable unit of a fragment.

    ``text`` is the exact source substring: full delimiters for tags and
    entities, trailing spaces included for words.
    """

    model_config = ConfigDict(frozen=True)

    kind: PieceKind
    text: str

    @property
    def is_tag(self) -> bool:
        return self.kind == PieceKind.TAG

    @property
    def is_word(self) -> bool:
        return self.kind == PieceKind.WORD
