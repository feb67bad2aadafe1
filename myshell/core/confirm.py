"""
Yes/no confirmation prompt
"""

import logging

from .terminal import Terminal

logger = logging.getLogger('MyShell.confirm')

YES_ANSWERS = ('y', 'yes')
NO_ANSWERS = ('n', 'no')

def confirm(terminal: Terminal, prompt: str = "Are you sure?", default: bool = False) -> bool:
    """
    Ask a yes/no question until a valid answer is given

    Args:
        terminal: Terminal to prompt on
        prompt: Question text, shown with a [y/N] or [Y/n] suffix
        default: Answer taken on empty input or end of input

    Returns:
        True for yes, False for no
    """
    suffix = '[Y/n]' if default else '[y/N]'
    while True:
        try:
            answer = terminal.read_line(f"{prompt} {suffix}: ", history=False)
        except EOFError:
            logger.debug("End of input at confirmation prompt, taking default")
            terminal.echo()
            return default

        answer = answer.strip().lower()
        if answer == '':
            return default
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        terminal.echo("Please answer 'y' or 'n'.")
