"""
Line-oriented terminal I/O shared by the shell and its gates
"""

import sys
import logging
import readline
from typing import Optional, TextIO

from rich.console import Console

logger = logging.getLogger('MyShell.terminal')

class Terminal:
    """
    Reads lines from and writes notices to the user's terminal

    Output is routed through a rich Console so tables render nicely on a real
    terminal and degrade to plain text on pipes and StringIO buffers.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 use_rawinput: bool = True):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.use_rawinput = use_rawinput
        self.console = Console(file=self.stdout, highlight=False)
        self._replace_undecodable_input()

    def _replace_undecodable_input(self):
        """Decode stray non-UTF-8 bytes as U+FFFD instead of raising"""
        reconfigure = getattr(self.stdin, 'reconfigure', None)
        if reconfigure is None:
            return
        try:
            reconfigure(errors='replace')
        except (ValueError, OSError) as e:
            logger.debug(f"Could not set input error handler: {e}")

    def is_interactive(self) -> bool:
        """True when input comes from a tty"""
        try:
            return self.stdin.isatty()
        except ValueError:
            return False

    def echo(self, text: str = "", style: Optional[str] = None):
        """Print one line of plain text"""
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)

    def error(self, text: str):
        self.echo(text, style='red')

    def success(self, text: str):
        self.echo(text, style='green')

    def read_line(self, prompt: str = "", history: bool = True) -> str:
        """
        Read one line of input without its trailing newline

        Lines that cannot be decoded are reported and read again.

        Args:
            prompt: Text shown before the cursor
            history: Keep the line in readline history (answers to yes/no
                and menu prompts pass False)

        Raises:
            EOFError: when the input stream is exhausted
        """
        while True:
            try:
                return self._read_raw(prompt, history)
            except UnicodeDecodeError as e:
                logger.warning(f"Discarding undecodable input: {e}")
                self.error("Error: input is not valid text, please try again.")

    def _read_raw(self, prompt: str, history: bool) -> str:
        if self.use_rawinput:
            length = readline.get_current_history_length()
            line = input(prompt)
            if not history and readline.get_current_history_length() > length:
                readline.remove_history_item(length)
            return line

        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip('\r\n')

    def read_until_eof(self) -> str:
        """Read everything typed until end of input (Ctrl+D)"""
        return self.stdin.read()
