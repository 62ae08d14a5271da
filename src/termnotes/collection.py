"""Provides the ordered collection of notes, :class:`NoteList`."""

from dataclasses import replace
import logging
from typing import Iterator, List, Optional, Tuple
from termnotes.models import Note

logger = logging.getLogger(__name__)


class NoteList:
    """An ordered sequence of notes whose codes are always ``1..len(self)`` in list order.

    New notes are always added at the tail. Every structural change (:meth:`append` or :meth:`delete_by_code`)
    is followed by :meth:`renumber`, so a note's code is simply its position and may change whenever an
    earlier note is deleted.

    Notes are never handed out directly; :meth:`find_by_code` returns a copy and iteration yields plain tuples.

    Here's an example:

    .. code-block:: python

       notes = NoteList()
       notes.append('Groceries', 'Buy milk')
       notes.append('Meeting', 'Standup at 9')
       notes.delete_by_code(1)
       assert list(notes) == [(1, 'Meeting', 'Standup at 9')]
    """

    def __init__(self):
        self._notes: List[Note] = []

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Tuple[int, str, str]]:
        """Yields ``(code, title, description)`` for each note, in order."""
        for note in self._notes:
            yield note.as_tuple()

    def __repr__(self) -> str:
        return f'NoteList({self._notes!r})'

    def is_empty(self) -> bool:
        return not self._notes

    def next_code(self) -> int:
        """Returns the code the next appended note will receive."""
        return len(self._notes) + 1

    def append(self, title: str, description: str) -> int:
        """Adds a note at the end of the list and returns its code."""
        code = self.next_code()
        self._notes.append(Note(code, title, description))
        self.renumber()
        return code

    def find_by_code(self, code: int) -> Optional[Note]:
        """Returns a copy of the note with the given code, or None if there is no such note."""
        for note in self._notes:
            if note.code == code:
                return replace(note)
        return None

    def delete_by_code(self, code: int) -> bool:
        """Removes the note with the given code and renumbers the rest.

        The search starts from whichever end of the list has the code numerically closest to ``code``
        (the head wins ties) and walks inward.

        Returns False, leaving the list unchanged, if no note has that code.
        """
        if not self._notes:
            return False
        lowest = self._notes[0].code
        highest = self._notes[-1].code
        if abs(code - lowest) <= abs(code - highest):
            indexes = range(len(self._notes))
        else:
            indexes = range(len(self._notes) - 1, -1, -1)
        for i in indexes:
            if self._notes[i].code == code:
                del self._notes[i]
                self.renumber()
                return True
        logger.debug('no note with code %s among %d notes', code, len(self._notes))
        return False

    def renumber(self) -> None:
        """Sets each note's code to its 1-based position."""
        for i, note in enumerate(self._notes, start=1):
            note.code = i

    def list_codes(self) -> List[str]:
        """Returns the current codes as strings, in order.

        These are exactly the inputs the shell accepts when asking which note to delete.
        """
        return [str(note.code) for note in self._notes]
