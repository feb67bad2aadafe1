"""
Shared fixtures for MyShell tests
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import Mock

from myshell.config import ShellConfig
from myshell.core.action_log import ActionLog
from myshell.core.pkgmgr import PackageManagerKind
from myshell.core.privilege import PrivilegeGate
from myshell.core.process import ProcessTarget
from myshell.core.runner import CommandRunner
from myshell.core.terminal import Terminal
from myshell.shell.context import ShellContext

class FakeProcess:
    """Stands in for a psutil.Process returned by process_iter"""

    def __init__(self, pid, name, cmdline=None):
        self.info = {'pid': pid, 'name': name, 'cmdline': cmdline}

def fake_process_iter(*processes):
    def process_iter(attrs=None):
        return iter(processes)
    return process_iter

class ShellTestCase(unittest.TestCase):
    """Builds a ShellContext with fake collaborators over StringIO streams"""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp(prefix='myshell-test-')
        self.addCleanup(shutil.rmtree, self.tmpdir, True)
        self.config = ShellConfig(
            log_file=os.path.join(self.tmpdir, 'myshell.log'),
            history_file=os.path.join(self.tmpdir, 'history'),
        )

    def make_context(self, input_text: str = "", **overrides) -> ShellContext:
        self.stdin = io.StringIO(input_text)
        self.stdout = io.StringIO()
        terminal = Terminal(self.stdin, self.stdout, use_rawinput=False)

        self.runner = Mock(spec=CommandRunner)
        self.runner.sudo_command = 'sudo'
        self.runner.run.return_value = 0
        self.privilege = Mock(spec=PrivilegeGate)
        self.action_log = ActionLog(self.config.log_file)
        self.addCleanup(self.action_log.close)

        settings = dict(
            detect_package_manager=Mock(return_value=PackageManagerKind.APT),
            resolve_process=Mock(side_effect=lambda token: ProcessTarget(pid=int(token))),
            send_signal=Mock(),
        )
        settings.update(overrides)
        self.context = ShellContext(
            config=self.config,
            terminal=terminal,
            action_log=self.action_log,
            runner=self.runner,
            privilege=self.privilege,
            **settings
        )
        return self.context

    @property
    def output(self) -> str:
        return self.stdout.getvalue()

    def log_lines(self):
        """Action log entries without their timestamps"""
        self.action_log.close()
        if not os.path.exists(self.config.log_file):
            return []
        with open(self.config.log_file, encoding='utf-8') as f:
            return [line.rstrip('\n').split('] ', 1)[1] for line in f if line.strip()]
