"""Keeps a small list of text notes in a comma-delimited file, managed from an interactive terminal menu.

If you installed via ``pip``, run ``termnotes`` to start the menu.
Or, run ``python3 -m termnotes``.

To use the Python API, look at :class:`termnotes.collection.NoteList` and :mod:`termnotes.store`.
"""
