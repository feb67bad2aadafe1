"""
Integration tests for the MyShell dispatch loop
"""

import functools
import io
import signal
import unittest

from myshell.core.process import resolve_process
from myshell.core.terminal import Terminal
from myshell.shell import MyShell, Outcome

from tests.support import FakeProcess, ShellTestCase, fake_process_iter

class TestDispatch(ShellTestCase):
    """Test single-line dispatch"""

    def make_shell(self, input_text="", **overrides):
        return MyShell(context=self.make_context(input_text, **overrides))

    def test_blank_input_does_nothing(self):
        shell = self.make_shell()
        for line in ("", "   ", "\t  "):
            self.assertFalse(shell.onecmd(line))
        self.assertEqual(self.output, "")
        self.assertEqual(self.log_lines(), [])

    def test_unknown_command(self):
        shell = self.make_shell()
        stop = shell.onecmd("frobnicate --now")

        self.assertFalse(stop)
        self.assertEqual(self.output.count("Command not found"), 1)
        self.assertIn("Error: Command not found 'frobnicate'. Try 'help'.", self.output)
        self.assertIsNone(shell.last_outcome)

    def test_blank_separator_after_command(self):
        shell = self.make_shell()
        shell.onecmd("my_cp onlyone")
        self.assertEqual(self.output, "Usage: my_cp source dest\n\n")

    def test_exit_stops(self):
        shell = self.make_shell()
        self.assertTrue(shell.onecmd("exit"))

        self.assertEqual(self.output, "Goodbye!\n")
        self.assertFalse(shell.running)
        self.assertIs(shell.last_outcome, Outcome.EXIT)
        self.assertEqual(self.log_lines(), ["myshell exited by user"])

    def test_quoted_arguments_reach_handler(self):
        shell = self.make_shell()
        shell.onecmd('my_cp "my file.txt" backup/')
        self.runner.run.assert_called_once_with(['cp', '-v', '--', 'my file.txt', 'backup/'])

    def test_prompt_comes_from_config(self):
        self.assertEqual(self.make_shell().prompt, 'MyShell> ')

class TestSessions(ShellTestCase):
    """End-to-end sessions through cmdloop"""

    def run_session(self, input_text, **overrides):
        shell = MyShell(context=self.make_context(input_text, **overrides))
        shell.cmdloop()
        return shell

    def test_blank_lines_then_exit(self):
        self.run_session("   \n\nexit\n")

        self.assertEqual(self.output.count("MyShell> "), 3)
        self.assertEqual(self.output.replace("MyShell> ", ""), MyShell.intro + "\nGoodbye!\n")

    def test_exit_session_log(self):
        self.run_session("exit\nhelp\n")

        lines = self.log_lines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("myshell started by "))
        self.assertEqual(lines[1], "myshell exited by user")
        # Nothing after exit is read
        self.assertNotIn("MyShell built-in commands:", self.output)

    def test_end_of_input_acts_as_exit(self):
        self.run_session("")

        self.assertIn("Goodbye!", self.output)
        self.assertEqual(self.log_lines()[-1], "myshell exited by user")

    def test_suspend_by_name(self):
        lookup = functools.partial(
            resolve_process,
            process_iter=fake_process_iter(FakeProcess(1, 'init'), FakeProcess(5555, 'webbrowser')),
        )
        self.run_session("my_suspend webbrowser\nexit\n", resolve_process=lookup)

        found = self.output.index("Found 'webbrowser' with PID: 5555")
        succeeded = self.output.index("Successfully suspended process 5555.")
        self.assertLess(found, succeeded)
        self.context.send_signal.assert_called_once_with(5555, signal.SIGSTOP)
        self.assertIn("my_suspend: suspended 5555 (webbrowser)", self.log_lines())

    def test_features_then_quit(self):
        self.run_session("features\nq\nexit\n")

        self.assertEqual(self.output.count("--- Pop!_OS Tweak Menu ---"), 1)
        self.assertIn("Exiting features menu...", self.output)
        self.assertEqual(self.log_lines().count("features: exited menu"), 1)
        self.privilege.require.assert_not_called()
        self.runner.check.assert_not_called()
        self.runner.write_file.assert_not_called()
        # Back at the main prompt afterwards
        self.assertIn("Goodbye!", self.output)

    def test_handler_crash_does_not_end_session(self):
        shell = MyShell(context=self.make_context("my_ls\nexit\n"))
        self.runner.run.side_effect = RuntimeError("boom")
        with self.assertLogs('MyShell.shell', level='ERROR'):
            shell.cmdloop()

        self.assertIn("Error: boom", self.output)
        self.assertIn("Goodbye!", self.output)

    def test_unknown_command_keeps_running(self):
        self.run_session("launch-rockets\nexit\n")

        self.assertIn("Command not found 'launch-rockets'", self.output)
        self.assertIn("Goodbye!", self.output)

    def test_invalid_utf8_input_keeps_running(self):
        context = self.make_context()
        stdin = io.TextIOWrapper(io.BytesIO(b'\xff\xfe junk\nexit\n'), encoding='utf-8')
        context.terminal = Terminal(stdin, self.stdout, use_rawinput=False)
        MyShell(context=context).cmdloop()

        self.assertIn("Error: Command not found", self.output)
        self.assertIn("Goodbye!", self.output)
        self.assertEqual(self.log_lines()[-1], "myshell exited by user")

if __name__ == '__main__':
    unittest.main()
