"""
Base class for MyShell command handlers
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Sequence, Tuple

from ...exceptions import ConfirmationDeclined, PermissionDenied, UsageError
from ...core.confirm import confirm

logger = logging.getLogger('MyShell.shell.commands')

class Outcome(Enum):
    """Result of one command invocation"""
    SUCCESS = 'success'
    FAILURE = 'failure'
    USAGE = 'usage'
    CANCELLED = 'cancelled'
    DENIED = 'denied'
    EXIT = 'exit'

class Command(ABC):
    """
    A named shell action

    Subclasses set the class attributes and implement execute(). Calling the
    handler runs execute() and turns usage errors, declined confirmations and
    refused privilege elevation into printed notices, so none of them reaches
    the dispatch loop.
    """

    name: str = ''
    aliases: Tuple[str, ...] = ()
    arity: str = '0'
    usage: str = ''
    summary: str = ''
    category: str = 'General'

    def __init__(self, context):
        self.context = context

    @property
    def terminal(self):
        return self.context.terminal

    @property
    def runner(self):
        return self.context.runner

    def __call__(self, args: Sequence[str]) -> Outcome:
        try:
            return self.execute(list(args))
        except UsageError as e:
            for line in str(e).splitlines():
                self.terminal.echo(line)
            return Outcome.USAGE
        except ConfirmationDeclined as e:
            self.terminal.echo(str(e))
            return Outcome.CANCELLED
        except PermissionDenied as e:
            self.terminal.error(str(e))
            self.log(f"{self.name}: aborted ({str(e).rstrip('.')})")
            return Outcome.DENIED

    @abstractmethod
    def execute(self, args: List[str]) -> Outcome:
        """Run the command with its arguments"""

    # Helpers for subclasses

    def require_args(self, args: List[str], count: int):
        """Raise UsageError unless at least `count` non-empty arguments are present"""
        if len(args) < count or any(not arg for arg in args[:count]):
            raise UsageError(self.usage)

    def confirm_or_cancel(self, prompt: str, cancelled: str):
        """Ask for confirmation, raising ConfirmationDeclined on no"""
        if not confirm(self.terminal, prompt):
            raise ConfirmationDeclined(cancelled)

    def elevate(self):
        self.context.privilege.require()

    def log(self, message: str):
        logger.debug(f"Action log: {message}")
        self.context.action_log.log(message)

    def report(self, status: int, success: str, failure: str,
               logged_success: str, logged_failure: str) -> Outcome:
        """Print and log the result of a delegated call"""
        if status == 0:
            self.terminal.success(success)
            self.log(logged_success)
            return Outcome.SUCCESS
        self.terminal.error(failure)
        self.log(logged_failure)
        return Outcome.FAILURE
