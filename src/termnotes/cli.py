"""Interactive terminal menu for termnotes."""


import logging
import time
from typing import Callable, Dict, Sequence
from rich.console import Console
from rich.markup import escape
from terminaltables import AsciiTable
from termnotes import store
from termnotes.collection import NoteList
from termnotes.conf import ShellConf

logger = logging.getLogger(__name__)

SEPARATOR = '---------------------------------------'


class Shell:
    """Runs the note menu until the user chooses to exit.

    Each pass through :meth:`run` prints the menu, reads a command, runs it, then waits for the continue key before
    clearing the screen. Invalid input is reported and the same prompt is repeated; no error escapes the loop.

    .. attribute:: conf
       :type: termnotes.conf.ShellConf

    .. attribute:: notes
       :type: termnotes.collection.NoteList

       Owned by the shell for its whole lifetime, and saved by :meth:`exit`.
    """

    def __init__(self, conf: ShellConf, notes: NoteList, console: Console = None):
        self.conf = conf
        self.notes = notes
        self.console = console or Console(highlight=False, emoji=False)
        self._commands: Dict[str, Callable[[], None]] = {
            conf.display_key: self.display,
            conf.write_key: self.create,
            conf.remove_key: self.delete,
        }

    def run(self) -> int:
        """Loops over menu commands and returns the exit code once the exit command has finished.

        End of input is treated the same as the exit command, so notes are still saved.
        """
        while True:
            self.print_menu()
            try:
                choice = self.fetch_input(self.conf.instruction_prompt, self.conf.options())
                if choice == self.conf.exit_key:
                    break
                self._commands[choice]()
                self.console.print(f'[bold yellow]Press {self.conf.continue_key} to continue.[/]')
                self.fetch_input('... ', [self.conf.continue_key])
            except EOFError:
                logger.info('End of input, exiting')
                self.console.print()
                break
            self.console.clear()
        return self.exit()

    def fetch_input(self, prompt: str, expected: Sequence[str] = ()) -> str:
        """Prompts until the user enters something non-blank, and returns it without leading whitespace.

        If ``expected`` is non-empty, the input is lowercased and must be one of its entries; anything else is
        reported as an error and the prompt is repeated. Input that can't be decoded, or that couldn't be saved as
        UTF-8, is reported and re-prompted too.

        Raises :exc:`EOFError` if standard input is exhausted.
        """
        while True:
            try:
                value = self.console.input(prompt).lstrip()
                value.encode(store.ENCODING)
            except UnicodeError:
                self._error('Invalid input! Please use valid UTF-8 text.')
                continue
            if not value:
                continue
            if not expected:
                return value
            value = value.lower()
            if value in expected:
                return value
            self._error('Invalid input! Please insert a valid option.')

    def print_menu(self) -> None:
        c = self.conf
        self.console.print('-------------- [bold blue][Options][/] --------------')
        self.console.print(f'[bold yellow][Display]:[/] Display all saved notes. Press {c.display_key}.')
        self.console.print(f'[bold yellow][Write]:[/] Write and save a new note. Press {c.write_key}.')
        self.console.print(f'[bold yellow][Delete]:[/] Delete an existing note. Press {c.remove_key}.')
        self.console.print(f'[bold yellow][Exit]:[/] Exit the program. Press {c.exit_key}.')
        self.console.print(SEPARATOR)

    def display(self) -> None:
        """Prints every note as a small table. Prints nothing at all if there are no notes."""
        if self.notes.is_empty():
            return
        self.console.print()
        self.console.print('[bold blue][Display]:[/]')
        self.console.print()
        for ordinal, (code, title, description) in enumerate(self.notes, start=1):
            table = AsciiTable([
                ('Code', f'{code:0{self.conf.code_width}d}'),
                ('Name', title),
                ('Description', description),
            ], f'Note {ordinal}')
            table.inner_heading_row_border = False
            self.console.print(escape(table.table), soft_wrap=True)
        self.console.print(SEPARATOR)

    def create(self) -> None:
        self.console.print()
        self.console.print('---------- [bold blue][Note Insertion][/] -----------')
        title = self.fetch_input('[bold yellow][Name]:[/] What is the name of the note? ')
        description = self.fetch_input('[bold yellow][Description]:[/] What is the description of the note? ')
        code = self.notes.append(title, description)
        self.console.print(f'[bold yellow][Inserted]:[/] [bold on green]{escape(title)}[/] at position {code}.')
        self.console.print(SEPARATOR)

    def delete(self) -> None:
        self.console.print()
        self.console.print('----------- [bold blue][Note Deletion][/] -----------')
        codes = self.notes.list_codes()
        if not codes:
            self.console.print('[bold yellow][Deletion]:[/] There are no notes to delete.')
            self.console.print(SEPARATOR)
            return
        while True:
            answer = self.fetch_input(
                "[bold yellow][Code]:[/] What is the code of the note you'd like to delete? ", codes)
            code = store.parse_code(answer)
            if code is not None:
                break
            # list_codes only contains valid codes, so this shouldn't happen
            self._error('Invalid input! Not a valid number.')
        if self.notes.delete_by_code(code):
            self.console.print('[bold yellow][Deletion]:[/] Successfully deleted the note.')
        else:
            self.console.print('[bold yellow][Deletion]:[/] Note not found.')
        self.console.print(SEPARATOR)

    def exit(self) -> int:
        """Saves the notes, waits for the shutdown delay, and returns the configured exit code.

        A failed save is reported but does not stop the shutdown.
        """
        if not store.save(self.notes, self.conf.store_path):
            self._error('Failed to save the notes.')
        self.console.print()
        self.console.print('[bold green][EXIT]:[/] Cleaning up... ')
        time.sleep(self.conf.shutdown_delay)
        return self.conf.exit_code

    def _error(self, message: str) -> None:
        self.console.print(f'[bold red][ERROR]:[/] [red]{escape(message)}[/]')


def main(args=None) -> int:
    """Runs the interactive menu and returns its exit code.

    There are no command-line options; args is accepted so that this can be used as a console script entry point,
    and is ignored.
    """
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    shell = ShellConf().instantiate()
    return shell.run()
