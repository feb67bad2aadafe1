"""
MyShell core services

Terminal I/O, the confirmation and privilege gates, the delegated command
runner, the action log, package-manager detection and process resolution.
"""

from .terminal import Terminal
from .privilege import PrivilegeGate
from .runner import CommandRunner
from .action_log import ActionLog
from .pkgmgr import PackageManagerKind, detect_package_manager
from .process import ProcessTarget, is_pid, resolve_process

__all__ = [
    'Terminal',
    'PrivilegeGate',
    'CommandRunner',
    'ActionLog',
    'PackageManagerKind',
    'detect_package_manager',
    'ProcessTarget',
    'is_pid',
    'resolve_process',
]
