"""
Package index refresh and upgrade through the host package manager
"""

from abc import abstractmethod
from typing import List, Sequence

from ...core.pkgmgr import PackageManagerKind, update_argv, upgrade_argvs
from .base import Command, Outcome

class PackageCommand(Command):
    """Shared flow for update/upgrade: detect, elevate, run, report"""

    category = 'System commands'

    @abstractmethod
    def argvs_for(self, kind: PackageManagerKind) -> Sequence[Sequence[str]]:
        """Candidate argvs for this manager, tried in order until one succeeds"""

    def execute(self, args: List[str]) -> Outcome:
        # Detected on every call, never cached
        kind = self.context.detect_package_manager()
        if kind is PackageManagerKind.UNKNOWN:
            self.terminal.error(
                f"Package manager not recognized. Please run your distro's {self.name} command manually."
            )
            self.log(f"{self.name}: package manager not recognized")
            return Outcome.FAILURE

        argvs = self.argvs_for(kind)
        sudo = self.runner.sudo_command
        description = f"{sudo} {' '.join(argvs[0])}"
        if len(argvs) > 1:
            description += f" (or {' '.join(argvs[1])})"
        self.terminal.echo(f"Detected {kind.value}. Running: {description}")

        self.elevate()
        status = 1
        for argv in argvs:
            status = self.runner.run(argv, privileged=True)
            if status == 0:
                break

        return self.report(
            status,
            f"Package {self.name} finished.",
            f"Error: package {self.name} failed (exit status {status}).",
            f"{self.name} run with pkgmgr={kind.value}",
            f"{self.name} failed with pkgmgr={kind.value} (exit {status})",
        )

class UpdateCommand(PackageCommand):
    name = 'update'
    summary = "update package lists (apt/pacman detection)"

    def argvs_for(self, kind):
        return [update_argv(kind)]

class UpgradeCommand(PackageCommand):
    name = 'upgrade'
    summary = "upgrade packages (apt/pacman detection)"

    def argvs_for(self, kind):
        return upgrade_argvs(kind)
