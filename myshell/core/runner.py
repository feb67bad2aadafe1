"""
Delegated calls to external system utilities
"""

import os
import subprocess
import logging
from typing import Callable, List, Optional, Sequence

from ..exceptions import CommandFailed
from .terminal import Terminal

logger = logging.getLogger('MyShell.runner')

# Shell convention for "command not found"
NOT_FOUND_STATUS = 127

class CommandRunner:
    """
    Runs external utilities attached to the user's terminal

    A call succeeds iff the utility exits with status zero.
    """

    def __init__(self, terminal: Terminal, sudo_command: str = 'sudo',
                 geteuid: Callable[[], int] = os.geteuid,
                 run: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self.terminal = terminal
        self.sudo_command = sudo_command
        self._geteuid = geteuid
        self._run = run

    def build_argv(self, argv: Sequence[str], privileged: bool = False) -> List[str]:
        """Prefix the sudo command for privileged calls unless already root"""
        argv = list(argv)
        if privileged and self._geteuid() != 0:
            return [self.sudo_command] + argv
        return argv

    def run(self, argv: Sequence[str], privileged: bool = False,
            input_text: Optional[str] = None, quiet: bool = False) -> int:
        """
        Run a command and wait for it

        Args:
            argv: Command and arguments, passed without a shell
            privileged: Run through sudo when not already root
            input_text: Text fed to the command's stdin instead of the terminal
            quiet: Discard the command's stdout

        Returns:
            The command's exit status
        """
        argv = self.build_argv(argv, privileged)
        logger.debug(f"Running: {' '.join(argv)}")

        kwargs = {}
        if input_text is not None:
            kwargs['input'] = input_text
            kwargs['text'] = True
        if quiet:
            kwargs['stdout'] = subprocess.DEVNULL

        try:
            result = self._run(argv, check=False, **kwargs)
        except FileNotFoundError:
            logger.warning(f"Executable not found: {argv[0]}")
            self.terminal.error(f"{argv[0]}: command not found")
            return NOT_FOUND_STATUS
        except OSError as e:
            logger.error(f"Failed to start {argv[0]}: {e}")
            self.terminal.error(f"{argv[0]}: {e}")
            return NOT_FOUND_STATUS - 1

        logger.debug(f"{argv[0]} exited with status {result.returncode}")
        return result.returncode

    def check(self, argv: Sequence[str], privileged: bool = False,
              input_text: Optional[str] = None, quiet: bool = False):
        """
        Run a command, raising CommandFailed on a non-zero exit status
        """
        status = self.run(argv, privileged=privileged, input_text=input_text, quiet=quiet)
        if status != 0:
            raise CommandFailed(argv, status)

    def write_file(self, path: str, text: str, append: bool = False):
        """Write a root-owned file through `sudo tee`"""
        argv = ['tee', '-a', path] if append else ['tee', path]
        self.check(argv, privileged=True, input_text=text, quiet=True)
