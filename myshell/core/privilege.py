"""
Privilege gate for actions that need root
"""

import os
import getpass
import logging
from typing import Callable, Sequence

from ..exceptions import PermissionDenied
from .terminal import Terminal
from .runner import CommandRunner

logger = logging.getLogger('MyShell.privilege')

class PrivilegeGate:
    """
    Makes sure the session may run privileged commands

    Credential caching is left to sudo itself: `sudo -v` refreshes the cached
    timestamp, so repeated calls within the sudo timeout do not prompt again.
    Other elevation tools need their own validate_args (`doas true`).
    """

    def __init__(self, terminal: Terminal, runner: CommandRunner,
                 geteuid: Callable[[], int] = os.geteuid,
                 validate_args: Sequence[str] = ('-v',)):
        self.terminal = terminal
        self.runner = runner
        self.validate_args = list(validate_args)
        self._geteuid = geteuid

    def is_elevated(self) -> bool:
        return self._geteuid() == 0

    def require(self):
        """
        Ensure elevated privilege is available

        Raises:
            PermissionDenied: if sudo validation is refused or fails
        """
        if self.is_elevated():
            return

        sudo = self.runner.sudo_command
        self.terminal.echo(f"This action requires root privileges. Asking {sudo}...")
        status = self.runner.run([sudo] + self.validate_args)
        if status != 0:
            logger.info(f"sudo validation failed with status {status}")
            raise PermissionDenied("sudo failed or was cancelled.")

def current_user() -> str:
    """Name of the invoking user, as $USER would report it"""
    user = os.environ.get('USER')
    if user:
        return user
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return 'unknown'
