from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List
from termnotes import store


@dataclass
class ShellConf:
    """Fixed settings for the interactive shell.

    An instance is built once by :func:`termnotes.cli.main` and handed to :class:`termnotes.cli.Shell`; nothing
    changes it afterwards. Text attributes may contain `rich markup <https://rich.readthedocs.io/en/latest/markup.html>`_.
    """

    store_path: str = store.DEFAULT_PATH
    """File the notes are loaded from at startup and written to on exit, relative to the working directory."""

    display_key: str = 'c'
    """Menu command that prints every note."""

    write_key: str = 'w'
    """Menu command that creates a new note."""

    remove_key: str = 'r'
    """Menu command that deletes a note by code."""

    exit_key: str = 'e'
    """Menu command that saves and exits."""

    continue_key: str = 'c'
    """Key the user must enter after each command before the menu is shown again."""

    instruction_prompt: str = '[bold yellow][Choice]:[/] What would you like to do? '
    """Prompt shown when waiting for a menu command."""

    code_width: int = 5
    """Codes are zero-padded to this many digits when notes are displayed."""

    exit_code: int = 15
    """Returned by :meth:`termnotes.cli.Shell.run` once the notes are saved and the shutdown delay is over."""

    shutdown_delay: float = 5.0
    """Seconds to wait after saving before exiting."""

    def options(self) -> List[str]:
        """The accepted menu commands, in menu order."""
        return [self.display_key, self.write_key, self.remove_key, self.exit_key]

    def standardize(self) -> ShellConf:
        """Returns a copy with keys lowercased, since user input is lowercased before it is compared to them.

        Raises :exc:`ValueError` if two menu commands share a key.
        """
        conf = replace(
            self,
            display_key=self.display_key.lower(),
            write_key=self.write_key.lower(),
            remove_key=self.remove_key.lower(),
            exit_key=self.exit_key.lower(),
            continue_key=self.continue_key.lower()
        )
        options = conf.options()
        if len(set(options)) != len(options):
            raise ValueError(f'Menu commands must be distinct: {options}')
        return conf

    def instantiate(self):
        """Loads the notes from :attr:`store_path` and returns a :class:`termnotes.cli.Shell` ready to run."""
        from termnotes.cli import Shell
        conf = self.standardize()
        return Shell(conf, store.load(conf.store_path))
