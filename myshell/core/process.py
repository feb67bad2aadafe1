"""
Resolve a PID-or-name token to exactly one process id
"""

import os
import re
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import psutil

from ..exceptions import AmbiguousProcess, ProcessNotFound

logger = logging.getLogger('MyShell.process')

PID_PATTERN = re.compile(r'[0-9]+')

@dataclass(frozen=True)
class ProcessTarget:
    """A resolved process; name is set only when looked up by name"""
    pid: int
    name: Optional[str] = None

    @property
    def by_name(self) -> bool:
        return self.name is not None

def is_pid(token: str) -> bool:
    """True when the token is one or more decimal digits"""
    return PID_PATTERN.fullmatch(token) is not None

def _matches(info: dict, name: str) -> bool:
    # Same rule as pidof: process name or basename of argv[0]
    if info.get('name') == name:
        return True
    cmdline = info.get('cmdline')
    return bool(cmdline) and os.path.basename(cmdline[0]) == name

def find_pids(name: str, process_iter: Callable[..., Iterable] = psutil.process_iter) -> List[int]:
    """All live process ids running under the given name"""
    pids = set()
    for proc in process_iter(['pid', 'name', 'cmdline']):
        try:
            if _matches(proc.info, name):
                pids.add(proc.info['pid'])
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            pass
    return sorted(pids)

def resolve_process(token: str, process_iter: Callable[..., Iterable] = psutil.process_iter) -> ProcessTarget:
    """
    Resolve a user token to a single process

    A numeric token is taken as a PID without checking that it exists.
    Anything else is looked up by name in the process table.

    Raises:
        ProcessNotFound: no process has that name
        AmbiguousProcess: more than one process has that name
    """
    if is_pid(token):
        return ProcessTarget(pid=int(token))

    pids = find_pids(token, process_iter)
    logger.debug(f"Name lookup for '{token}' matched {pids}")
    if not pids:
        raise ProcessNotFound(f"Process name '{token}' not found.")
    if len(pids) > 1:
        raise AmbiguousProcess(token, pids)
    return ProcessTarget(pid=pids[0], name=token)
