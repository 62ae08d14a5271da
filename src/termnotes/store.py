"""Reads and writes a :class:`termnotes.collection.NoteList` as a comma-delimited text file.

Each note is stored on its own line as ``code,title,description``. Nothing is quoted or escaped: the description
runs to the end of the line, so it may contain commas, but a comma in a title or a newline anywhere will corrupt
the file the next time it is loaded.

The codes written to the file are informational only. :func:`load` appends notes in file order, so they are
always renumbered ``1..n`` regardless of what the file says.
"""

import logging
import re
from typing import Optional, Tuple
from termnotes.collection import NoteList

logger = logging.getLogger(__name__)

DELIMITER = ','

ENCODING = 'utf-8'

DEFAULT_PATH = 'note_store'
"""Where the shell keeps its notes, relative to the working directory."""

CODE_MIN = -2 ** 31
CODE_MAX = 2 ** 31 - 1

_CODE_PATTERN = re.compile(r'\s*[+-]?\d+\s*', re.ASCII)


def parse_code(text: str) -> Optional[int]:
    """Parses a note code, or returns None if the text isn't one.

    A code is an optional sign followed by ASCII digits, optionally surrounded by whitespace, whose value fits in
    a signed 32-bit integer.
    """
    if not _CODE_PATTERN.fullmatch(text):
        return None
    code = int(text)
    if not CODE_MIN <= code <= CODE_MAX:
        return None
    return code


def parse_line(line: str) -> Optional[Tuple[int, str, str]]:
    """Splits a stored line into ``(code, title, description)``.

    Returns None if the line has fewer than three fields, if the description is empty, or if the code is not
    valid according to :func:`parse_code`. Trailing newlines should be removed before calling this.
    """
    fields = line.split(DELIMITER, 2)
    if len(fields) < 3 or not fields[2]:
        return None
    code = parse_code(fields[0])
    if code is None:
        return None
    return code, fields[1], fields[2]


def format_line(code: int, title: str, description: str) -> str:
    return f'{code}{DELIMITER}{title}{DELIMITER}{description}\n'


def load(path: str = DEFAULT_PATH) -> NoteList:
    """Reads notes from the given file.

    If the file can't be opened, an empty file is created in its place and an empty list is returned; this is
    logged but not treated as an error. Lines that aren't valid UTF-8 or can't be parsed (see :func:`parse_line`)
    are skipped.
    """
    notes = NoteList()
    try:
        file = open(path, 'rb')
    except OSError as e:
        logger.warning('Failed to open %s to read (%s), starting with no notes', path, e)
        try:
            open(path, 'wb').close()
        except OSError as e2:
            logger.warning('Failed to create %s: %s', path, e2)
        return notes
    with file:
        for lineno, raw in enumerate(file, start=1):
            try:
                line = raw.decode(ENCODING)
            except UnicodeDecodeError as e:
                logger.debug('Skipping line %d of %s: %s', lineno, path, e)
                continue
            parsed = parse_line(line.rstrip('\r\n'))
            if parsed is None:
                logger.debug('Skipping malformed line %d of %s', lineno, path)
                continue
            notes.append(parsed[1], parsed[2])
    return notes


def save(notes: NoteList, path: str = DEFAULT_PATH) -> bool:
    """Overwrites the given file with every note in the list, in order.

    Returns False if the notes could not be encoded or the file could not be opened or written. Encoding happens
    before the file is opened, so an unencodable note leaves the existing file untouched; an IO error part way
    through may leave it truncated.
    """
    try:
        data = ''.join(format_line(*note) for note in notes).encode(ENCODING)
    except UnicodeEncodeError as e:
        logger.error('Failed to encode notes for %s: %s', path, e)
        return False
    try:
        with open(path, 'wb') as file:
            file.write(data)
    except OSError as e:
        logger.error('Failed to write %s: %s', path, e)
        return False
    return True
