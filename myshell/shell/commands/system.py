"""
Cache refresh and power-state commands for MyShell
"""

from typing import List

from .base import Command, Outcome

DROP_CACHES = '/proc/sys/vm/drop_caches'

class RefreshCommand(Command):
    name = 'refresh'
    summary = "clear system memory cache (requires sudo)"
    category = 'System commands'

    def execute(self, args: List[str]) -> Outcome:
        self.terminal.echo("This will clear the system page cache, dentries, and inodes.")
        self.confirm_or_cancel("Are you sure you want to clear the system cache?", "Refresh cancelled.")
        self.elevate()

        self.terminal.echo("Syncing file systems...")
        status = self.runner.run(['sync'])
        if status == 0:
            self.terminal.echo(f"Clearing cache (echo 3 > {DROP_CACHES})...")
            status = self.runner.run(['tee', DROP_CACHES], privileged=True,
                                     input_text='3\n', quiet=True)

        return self.report(status, "System cache cleared.", "Error: Failed to clear cache.",
                           "refresh: cache cleared", f"refresh: failed to clear cache (exit {status})")

class PowerCommand(Command):
    """
    Confirm, elevate, then hand the machine to systemctl

    The log entry is written before the call since the host may go down
    before systemctl returns.
    """

    category = 'System commands'
    verb = ''
    prompt = ''
    cancelled = ''
    request = ''

    def execute(self, args: List[str]) -> Outcome:
        self.confirm_or_cancel(self.prompt, self.cancelled)
        self.elevate()
        self.log(self.request)
        status = self.runner.run(['systemctl', self.verb], privileged=True)
        if status != 0:
            self.terminal.error(f"Error: systemctl {self.verb} failed (exit status {status}).")
            return Outcome.FAILURE
        return Outcome.SUCCESS

class ShutdownCommand(PowerCommand):
    name = 'shutdown'
    aliases = ('poweroff',)
    summary = "shutdown the machine"
    verb = 'poweroff'
    prompt = "Are you sure you want to shutdown the system now?"
    cancelled = "Shutdown cancelled."
    request = "shutdown requested by user"

class RestartCommand(PowerCommand):
    name = 'restart'
    aliases = ('reboot',)
    summary = "reboot the machine"
    verb = 'reboot'
    prompt = "Reboot the system now?"
    cancelled = "Reboot cancelled."
    request = "reboot requested by user"

class SleepCommand(PowerCommand):
    name = 'sleep'
    aliases = ('suspend',)
    summary = "suspend to RAM (systemctl suspend)"
    verb = 'suspend'
    prompt = "Suspend to RAM (sleep) now?"
    cancelled = "Suspend cancelled."
    request = "suspend requested by user"
