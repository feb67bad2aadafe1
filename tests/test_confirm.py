"""
Unit tests for the yes/no confirmation prompt
"""

import io
import unittest
from unittest.mock import Mock

from myshell.core.confirm import confirm
from myshell.core.terminal import Terminal

def make_terminal(text):
    return Terminal(io.StringIO(text), io.StringIO(), use_rawinput=False)

class TestConfirm(unittest.TestCase):
    """Test answer normalization"""

    def test_yes_answers(self):
        for answer in ('y', 'Y', 'yes', 'YES', ' yes '):
            with self.subTest(answer=answer):
                self.assertTrue(confirm(make_terminal(answer + "\n"), "Proceed?"))

    def test_no_answers(self):
        for answer in ('n', 'N', 'no', 'NO', ''):
            with self.subTest(answer=answer):
                self.assertFalse(confirm(make_terminal(answer + "\n"), "Proceed?"))

    def test_invalid_answer_reprompts(self):
        terminal = make_terminal("maybe\nsure\ny\n")
        self.assertTrue(confirm(terminal, "Proceed?"))

        output = terminal.stdout.getvalue()
        self.assertEqual(output.count("Proceed? [y/N]: "), 3)
        self.assertEqual(output.count("Please answer 'y' or 'n'."), 2)

    def test_default_yes(self):
        terminal = make_terminal("\n")
        self.assertTrue(confirm(terminal, "Proceed?", default=True))
        self.assertIn("Proceed? [Y/n]: ", terminal.stdout.getvalue())

    def test_end_of_input_takes_default(self):
        self.assertFalse(confirm(make_terminal(""), "Proceed?"))
        self.assertTrue(confirm(make_terminal(""), "Proceed?", default=True))

    def test_answer_kept_out_of_history(self):
        terminal = Mock(spec=Terminal)
        terminal.read_line.return_value = 'y'
        self.assertTrue(confirm(terminal, "Proceed?"))
        terminal.read_line.assert_called_once_with("Proceed? [y/N]: ", history=False)

if __name__ == '__main__':
    unittest.main()
