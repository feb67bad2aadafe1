"""
MyShell interactive shell
Reads a line, tokenizes it, dispatches through the command table
"""

import cmd
import os
import sys
import socket
import logging
import readline
from typing import Optional

from ..config import ShellConfig
from ..core.privilege import current_user
from ..core.terminal import Terminal
from .context import ShellContext
from .tokenizer import parse_invocation
from .commands import Outcome, build_command_table

logger = logging.getLogger('MyShell.shell')

class MyShell(cmd.Cmd):
    """
    Menu-driven shell around common Linux administration tasks

    The loop only ends through the `exit` command (end of input counts as
    `exit`). Every other condition, including unknown commands and failing
    handlers, is reported and the next prompt is shown.
    """

    intro = "Welcome to MyShell (v4 - Interactive Features)! Type 'help' for commands."
    prompt = 'MyShell> '

    def __init__(self, config: Optional[ShellConfig] = None, stdin=None, stdout=None,
                 context: Optional[ShellContext] = None):
        if context is not None:
            stdin, stdout = context.terminal.stdin, context.terminal.stdout
            config = context.config
        super().__init__(stdin=stdin, stdout=stdout)

        if context is not None:
            self.use_rawinput = context.terminal.use_rawinput
        elif stdin is not None and stdin is not sys.stdin:
            self.use_rawinput = False

        self.config = config or ShellConfig()
        self.prompt = self.config.prompt
        self.context = context or ShellContext.create(
            self.config, Terminal(self.stdin, self.stdout, bool(self.use_rawinput))
        )
        self.terminal = self.context.terminal
        self.commands = build_command_table(self.context)
        self.running = True
        self.last_outcome: Optional[Outcome] = None
        self._old_completer = None

    # Session lifecycle

    def preloop(self):
        self.context.action_log.open()
        self.context.action_log.log(f"myshell started by {current_user()} on {socket.gethostname()}")
        if not self.terminal.is_interactive():
            logger.warning("Not running in an interactive terminal. Some prompts may not work.")
        self._load_history()

    def postloop(self):
        self._save_history()
        self.context.action_log.close()

    def _load_history(self):
        """Load command history"""
        if not self.use_rawinput:
            return
        try:
            if os.path.exists(self.config.history_file):
                readline.read_history_file(self.config.history_file)
        except OSError as e:
            logger.debug(f"Could not load history: {e}")

    def _save_history(self):
        """Save command history"""
        if not self.use_rawinput:
            return
        try:
            readline.write_history_file(self.config.history_file)
        except OSError as e:
            logger.debug(f"Could not save history: {e}")

    def _install_completer(self):
        if self.use_rawinput and self.completekey:
            self._old_completer = readline.get_completer()
            readline.set_completer(self.complete)
            readline.parse_and_bind(self.completekey + ": complete")

    def _restore_completer(self):
        if self.use_rawinput and self.completekey:
            readline.set_completer(self._old_completer)

    # Loop and dispatch

    def cmdloop(self, intro=None):
        """Run the read-dispatch loop until `exit`"""
        self.preloop()
        self._install_completer()
        try:
            intro = self.intro if intro is None else intro
            if intro:
                self.terminal.echo(str(intro))

            stop = False
            while not stop:
                try:
                    line = self.terminal.read_line(self.prompt)
                except EOFError:
                    logger.debug("End of input, treating as exit")
                    self.terminal.echo()
                    line = 'exit'
                except KeyboardInterrupt:
                    self.terminal.echo("^C")
                    continue

                try:
                    line = self.precmd(line)
                    stop = self.onecmd(line)
                    stop = self.postcmd(stop, line)
                except KeyboardInterrupt:
                    self.terminal.echo("^C")
                except Exception as e:
                    logger.error(f"Error processing command: {e}", exc_info=True)
                    self.terminal.error(f"Error: {e}")
                    self.terminal.echo()
        finally:
            self._restore_completer()
            self.postloop()

    def onecmd(self, line: str) -> bool:
        """Dispatch one line; returns True when the shell should stop"""
        self.last_outcome = None
        invocation = parse_invocation(line)
        if invocation is None:
            return self.emptyline()

        self.lastcmd = line
        command = self.commands.get(invocation.name)
        if command is None:
            self.default(line)
        else:
            logger.debug(f"Dispatching {invocation.name} with {list(invocation.args)}")
            self.last_outcome = command(invocation.args)

        if self.last_outcome is Outcome.EXIT:
            self.running = False
            return True

        self.terminal.echo()
        return False

    def emptyline(self) -> bool:
        """Do nothing on empty line"""
        return False

    def default(self, line: str):
        """Handle unknown commands"""
        invocation = parse_invocation(line)
        name = invocation.name if invocation else line.strip()
        self.terminal.error(f"Error: Command not found '{name}'. Try 'help'.")

    def completenames(self, text, *ignored):
        return sorted(name for name in self.commands if name.startswith(text))

    def run_command(self, line: str) -> Optional[Outcome]:
        """Execute a single line outside the interactive loop"""
        with self.context.action_log:
            self.onecmd(line)
        return self.last_outcome
