"""
Unit tests for PID-or-name process resolution
"""

import unittest
from unittest.mock import Mock

from myshell.core.process import ProcessTarget, find_pids, is_pid, resolve_process
from myshell.exceptions import AmbiguousProcess, ProcessNotFound, ResolveError

from tests.support import FakeProcess, fake_process_iter

class TestIsPid(unittest.TestCase):

    def test_digits(self):
        self.assertTrue(is_pid("1234"))
        self.assertTrue(is_pid("0"))

    def test_not_digits(self):
        for token in ("", "12a", "-5", "firefox", " 12"):
            with self.subTest(token=token):
                self.assertFalse(is_pid(token))

class TestResolveProcess(unittest.TestCase):
    """Test resolution rules"""

    def test_numeric_token_skips_lookup(self):
        process_iter = Mock()
        target = resolve_process("1234", process_iter=process_iter)

        self.assertEqual(target, ProcessTarget(pid=1234))
        self.assertFalse(target.by_name)
        process_iter.assert_not_called()

    def test_single_match(self):
        process_iter = fake_process_iter(
            FakeProcess(1, 'systemd'),
            FakeProcess(5555, 'webbrowser'),
        )
        target = resolve_process("webbrowser", process_iter=process_iter)

        self.assertEqual(target.pid, 5555)
        self.assertEqual(target.name, 'webbrowser')
        self.assertTrue(target.by_name)

    def test_not_found(self):
        process_iter = fake_process_iter(FakeProcess(1, 'systemd'))
        with self.assertRaises(ProcessNotFound):
            resolve_process("nosuchproc123xyz", process_iter=process_iter)

    def test_ambiguous_never_picks(self):
        process_iter = fake_process_iter(
            FakeProcess(700, 'worker'),
            FakeProcess(701, 'worker'),
        )
        with self.assertRaises(AmbiguousProcess) as ctx:
            resolve_process("worker", process_iter=process_iter)
        self.assertEqual(ctx.exception.pids, [700, 701])
        self.assertIsInstance(ctx.exception, ResolveError)

    def test_matches_argv0_basename(self):
        # Long names are truncated in the kernel's comm field
        process_iter = fake_process_iter(
            FakeProcess(42, 'gnome-shell-cal', ['/usr/libexec/gnome-shell-calendar-server']),
        )
        self.assertEqual(find_pids('gnome-shell-calendar-server', process_iter), [42])

    def test_missing_cmdline_is_tolerated(self):
        process_iter = fake_process_iter(FakeProcess(9, None, None), FakeProcess(10, 'sshd', None))
        self.assertEqual(find_pids('sshd', process_iter), [10])

if __name__ == '__main__':
    unittest.main()
