"""
MyShell command table

The table maps every command name and alias to one handler instance. It is
built once per shell and never changes afterwards.
"""

from types import MappingProxyType
from typing import Mapping

from .base import Command, Outcome
from .filesystem import ListCommand, CatCommand, CopyCommand, MoveCommand, RemoveCommand
from .process import SuspendCommand, ResumeCommand
from .system import RefreshCommand, ShutdownCommand, RestartCommand, SleepCommand
from .packages import UpdateCommand, UpgradeCommand
from .builtins import FeaturesCommand, HelpCommand, ExitCommand

# Order is the order shown by help
COMMAND_CLASSES = (
    ListCommand,
    CatCommand,
    CopyCommand,
    MoveCommand,
    RemoveCommand,
    SuspendCommand,
    ResumeCommand,
    UpdateCommand,
    UpgradeCommand,
    RefreshCommand,
    RestartCommand,
    ShutdownCommand,
    SleepCommand,
    FeaturesCommand,
    HelpCommand,
    ExitCommand,
)

def build_command_table(context) -> Mapping[str, Command]:
    """Instantiate every command and index it by name and aliases"""
    commands = [cls(context) for cls in COMMAND_CLASSES]

    table = {}
    for command in commands:
        for key in (command.name,) + tuple(command.aliases):
            if key in table:
                raise ValueError(f"Duplicate command name: {key}")
            table[key] = command
        if isinstance(command, HelpCommand):
            command.commands = commands

    return MappingProxyType(table)

__all__ = [
    'Command',
    'Outcome',
    'COMMAND_CLASSES',
    'build_command_table',
]
