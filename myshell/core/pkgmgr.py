"""
Host package manager detection
"""

import shutil
import logging
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

logger = logging.getLogger('MyShell.pkgmgr')

class PackageManagerKind(Enum):
    PACMAN = 'pacman'
    APT = 'apt'
    UNKNOWN = 'unknown'

# Probed in order, first match wins
PROBE_ORDER: Tuple[Tuple[PackageManagerKind, Tuple[str, ...]], ...] = (
    (PackageManagerKind.PACMAN, ('pacman',)),
    (PackageManagerKind.APT, ('apt', 'apt-get')),
)

def detect_package_manager(which: Callable[[str], Optional[str]] = shutil.which) -> PackageManagerKind:
    """Return the first package manager whose executable is on PATH"""
    for kind, executables in PROBE_ORDER:
        for executable in executables:
            if which(executable):
                logger.debug(f"Detected {kind.value} via {executable}")
                return kind
    logger.debug("No known package manager found on PATH")
    return PackageManagerKind.UNKNOWN

def update_argv(kind: PackageManagerKind,
                which: Callable[[str], Optional[str]] = shutil.which) -> Sequence[str]:
    """Command that refreshes the package index"""
    if kind is PackageManagerKind.PACMAN:
        return ['pacman', '-Syy']
    if kind is PackageManagerKind.APT:
        return ['apt', 'update'] if which('apt') else ['apt-get', 'update']
    raise ValueError(f"No update command for {kind.value}")

def upgrade_argvs(kind: PackageManagerKind,
                  which: Callable[[str], Optional[str]] = shutil.which) -> Sequence[Sequence[str]]:
    """Commands that upgrade installed packages, tried in order until one succeeds"""
    if kind is PackageManagerKind.PACMAN:
        return [['pacman', '-Syu']]
    if kind is PackageManagerKind.APT:
        if which('apt'):
            return [['apt', 'full-upgrade', '-y'], ['apt-get', 'upgrade', '-y']]
        return [['apt-get', 'upgrade', '-y']]
    raise ValueError(f"No upgrade command for {kind.value}")
