"""Defines the value record for a single note, :class:`Note`."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Note:
    """A single note.

    Instances held by a :class:`termnotes.collection.NoteList` are owned by it; the list only ever hands out
    copies, since renumbering rewrites :attr:`code` in place.
    """

    code: int
    """Dense, 1-based position of the note within its collection."""

    title: str
    """Short name of the note. It is written unescaped to the store, so it must not contain commas or newlines."""

    description: str
    """Body of the note. It must not contain newlines."""

    def as_tuple(self) -> Tuple[int, str, str]:
        return self.code, self.title, self.description
