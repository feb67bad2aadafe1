"""
Collaborators shared by every command handler
"""

import os
import shlex
from dataclasses import dataclass, field
from typing import Callable

from ..config import ShellConfig
from ..core.action_log import ActionLog
from ..core.pkgmgr import PackageManagerKind, detect_package_manager
from ..core.privilege import PrivilegeGate
from ..core.process import ProcessTarget, resolve_process
from ..core.runner import CommandRunner
from ..core.terminal import Terminal

@dataclass
class ShellContext:
    """Everything a handler may touch outside its own arguments"""
    config: ShellConfig
    terminal: Terminal
    action_log: ActionLog
    runner: CommandRunner
    privilege: PrivilegeGate
    detect_package_manager: Callable[[], PackageManagerKind] = field(default=detect_package_manager)
    resolve_process: Callable[[str], ProcessTarget] = field(default=resolve_process)
    send_signal: Callable[[int, int], None] = field(default=os.kill)

    @classmethod
    def create(cls, config: ShellConfig, terminal: Terminal, **overrides) -> 'ShellContext':
        """Build a context with real collaborators for the given config"""
        runner = overrides.pop('runner', None) or CommandRunner(terminal, sudo_command=config.sudo_command)
        privilege = overrides.pop('privilege', None) or PrivilegeGate(
            terminal, runner, validate_args=shlex.split(config.sudo_validate)
        )
        action_log = overrides.pop('action_log', None) or ActionLog(config.log_file)
        return cls(config=config, terminal=terminal, action_log=action_log,
                   runner=runner, privilege=privilege, **overrides)
