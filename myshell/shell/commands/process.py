"""
Process suspend/resume commands for MyShell
"""

import signal
from typing import List

from ...exceptions import ResolveError, UsageError
from ...core.process import is_pid
from .base import Command, Outcome

class SuspendCommand(Command):
    name = 'my_suspend'
    arity = '1'
    usage = "Usage: my_suspend <PID_or_Name>"
    summary = "suspend (pause) a process using its PID or name"
    category = 'Process management'

    def execute(self, args: List[str]) -> Outcome:
        self.require_args(args, 1)
        token = args[0]

        try:
            target = self.context.resolve_process(token)
        except ResolveError as e:
            self.terminal.error(f"Error: {e}")
            return Outcome.FAILURE

        if target.by_name:
            self.terminal.echo(f"Found '{token}' with PID: {target.pid}")

        try:
            self.context.send_signal(target.pid, signal.SIGSTOP)
        except OSError:
            self.terminal.error(f"Error: Failed to suspend process {target.pid}. Do you have permission?")
            self.log(f"my_suspend: failed to suspend {target.pid} ({token})")
            return Outcome.FAILURE

        self.terminal.success(f"Successfully suspended process {target.pid}.")
        self.log(f"my_suspend: suspended {target.pid} ({token})")
        return Outcome.SUCCESS

class ResumeCommand(Command):
    name = 'my_resume'
    arity = '1 (PID)'
    usage = "Usage: my_resume <PID>\nNote: You must use the PID, not the name."
    summary = "resume (un-pause) a suspended process by PID"
    category = 'Process management'

    def execute(self, args: List[str]) -> Outcome:
        self.require_args(args, 1)
        if not is_pid(args[0]):
            raise UsageError(self.usage)
        pid = int(args[0])

        try:
            self.context.send_signal(pid, signal.SIGCONT)
        except OSError:
            self.terminal.error(f"Error: Failed to resume process {pid}.")
            self.log(f"my_resume: failed to resume {pid}")
            return Outcome.FAILURE

        self.terminal.success(f"Successfully resumed process {pid}.")
        self.log(f"my_resume: resumed {pid}")
        return Outcome.SUCCESS
