"""
Unit tests for delegated command execution
"""

import io
import subprocess
import unittest
from unittest.mock import Mock

from myshell.core.runner import CommandRunner, NOT_FOUND_STATUS
from myshell.core.terminal import Terminal
from myshell.exceptions import CommandFailed

class TestCommandRunner(unittest.TestCase):
    """Test argv construction and exit status handling"""

    def setUp(self):
        self.terminal = Terminal(io.StringIO(), io.StringIO(), use_rawinput=False)
        self.run = Mock(return_value=subprocess.CompletedProcess([], 0))

    def make_runner(self, euid=1000):
        return CommandRunner(self.terminal, sudo_command='sudo', geteuid=lambda: euid, run=self.run)

    def test_privileged_call_uses_sudo(self):
        runner = self.make_runner()
        self.assertEqual(runner.build_argv(['systemctl', 'reboot'], privileged=True),
                         ['sudo', 'systemctl', 'reboot'])

    def test_root_skips_sudo(self):
        runner = self.make_runner(euid=0)
        self.assertEqual(runner.build_argv(['systemctl', 'reboot'], privileged=True),
                         ['systemctl', 'reboot'])

    def test_unprivileged_call(self):
        runner = self.make_runner()
        self.assertEqual(runner.run(['ls', '-l']), 0)
        self.run.assert_called_once_with(['ls', '-l'], check=False)

    def test_returns_exit_status(self):
        self.run.return_value = subprocess.CompletedProcess([], 3)
        self.assertEqual(self.make_runner().run(['false']), 3)

    def test_missing_executable(self):
        self.run.side_effect = FileNotFoundError
        status = self.make_runner().run(['no-such-tool'])

        self.assertEqual(status, NOT_FOUND_STATUS)
        self.assertIn("no-such-tool: command not found", self.terminal.stdout.getvalue())

    def test_check_raises_on_failure(self):
        self.run.return_value = subprocess.CompletedProcess([], 100)
        with self.assertRaises(CommandFailed) as ctx:
            self.make_runner().check(['apt-get', 'install', 'tlp'], privileged=True)
        self.assertEqual(ctx.exception.returncode, 100)
        self.assertEqual(ctx.exception.argv, ['apt-get', 'install', 'tlp'])

    def test_write_file_goes_through_tee(self):
        self.make_runner().write_file('/etc/example.rules', "line\n", append=True)
        self.run.assert_called_once_with(
            ['sudo', 'tee', '-a', '/etc/example.rules'],
            check=False, input="line\n", text=True, stdout=subprocess.DEVNULL
        )

if __name__ == '__main__':
    unittest.main()
