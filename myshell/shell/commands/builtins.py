"""
Shell built-ins: features menu, help and exit
"""

from typing import List, Sequence

from rich.table import Table
from rich import box

from .base import Command, Outcome

class FeaturesCommand(Command):
    name = 'features'
    summary = "open the interactive tweak menu"
    category = 'System commands'

    def execute(self, args: List[str]) -> Outcome:
        from ..tweaks import TweakMenu
        TweakMenu(self.context).run()
        return Outcome.SUCCESS

class HelpCommand(Command):
    name = 'help'
    summary = "show this help text"
    category = 'Shell'

    # Filled in by build_command_table
    commands: Sequence[Command] = ()

    def execute(self, args: List[str]) -> Outcome:
        console = self.terminal.console
        console.print("MyShell built-in commands:", markup=False)

        categories = []
        for command in self.commands:
            if command.category not in categories:
                categories.append(command.category)

        for category in categories:
            table = Table(title=category, title_justify='left', box=box.SIMPLE,
                          show_header=False, pad_edge=False)
            table.add_column("Command", style='cyan', no_wrap=True)
            table.add_column("Description")
            for command in self.commands:
                if command.category != category:
                    continue
                synopsis = command.usage.splitlines()[0].replace('Usage: ', '') if command.usage else command.name
                description = command.summary
                if command.aliases:
                    description += f" (alias: {', '.join(command.aliases)})"
                table.add_row(synopsis, description)
            console.print(table)
        return Outcome.SUCCESS

class ExitCommand(Command):
    name = 'exit'
    summary = "exit MyShell"
    category = 'Shell'

    def execute(self, args: List[str]) -> Outcome:
        self.terminal.echo("Goodbye!")
        self.log("myshell exited by user")
        return Outcome.EXIT
