"""
MyShell shell package

This package provides the interactive dispatcher, the command table and the
tweak menu.
"""

from .shell import MyShell
from .context import ShellContext
from .tokenizer import Invocation, parse_invocation, tokenize
from .commands import Command, Outcome, build_command_table
from .tweaks import TweakMenu

__all__ = [
    'MyShell',
    'ShellContext',
    'Invocation',
    'parse_invocation',
    'tokenize',
    'Command',
    'Outcome',
    'build_command_table',
    'TweakMenu',
]
