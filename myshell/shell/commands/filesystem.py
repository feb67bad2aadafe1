"""
File commands for MyShell

Each of these hands the real work to the coreutils program of the same name.
"""

import os
from typing import List

from .base import Command, Outcome

class ListCommand(Command):
    name = 'my_ls'
    arity = '0+'
    usage = "Usage: my_ls [options] [paths...]"
    summary = "wrapper for ls (works with -l, -a)"
    category = 'File commands'

    def execute(self, args: List[str]) -> Outcome:
        status = self.runner.run(['ls'] + args + ['--color=auto'])
        return Outcome.SUCCESS if status == 0 else Outcome.FAILURE

class CatCommand(Command):
    """Show a file, or with `> file` write typed text into it"""

    name = 'my_cat'
    arity = "1, or '>' + 1"
    usage = "Usage: my_cat filename"
    summary = "display a file; 'my_cat > <file>' creates/overwrites it (Ctrl+D to save)"
    category = 'File commands'

    WRITE_USAGE = "Usage: my_cat > filename"

    def execute(self, args: List[str]) -> Outcome:
        if args and args[0] == '>':
            if len(args) < 2 or not args[1]:
                self.terminal.echo(self.WRITE_USAGE)
                return Outcome.USAGE
            return self._write(args[1])

        self.require_args(args, 1)
        filename = args[0]
        if not os.path.isfile(filename):
            self.terminal.error(f"File not found: {filename}")
            return Outcome.FAILURE
        status = self.runner.run(['cat', '--', filename])
        return Outcome.SUCCESS if status == 0 else Outcome.FAILURE

    def _write(self, filename: str) -> Outcome:
        self.terminal.echo(f"Enter content for '{filename}'. Press Ctrl+D to save.")
        content = self.terminal.read_until_eof()
        try:
            with open(filename, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            self.terminal.error(f"Error: could not write '{filename}': {e.strerror or e}")
            self.log(f"my_cat: failed to write {filename}")
            return Outcome.FAILURE
        self.terminal.success(f"Saved '{filename}'.")
        self.log(f"my_cat: wrote {filename}")
        return Outcome.SUCCESS

class CopyCommand(Command):
    name = 'my_cp'
    arity = '2'
    usage = "Usage: my_cp source dest"
    summary = "copy file"
    category = 'File commands'

    def execute(self, args: List[str]) -> Outcome:
        self.require_args(args, 2)
        src, dst = args[0], args[1]
        status = self.runner.run(['cp', '-v', '--', src, dst])
        return self.report(status, "Copied.", "Copy failed.",
                           f"my_cp: {src} -> {dst}", f"my_cp: failed {src} -> {dst}")

class MoveCommand(Command):
    name = 'my_mv'
    arity = '2'
    usage = "Usage: my_mv source dest"
    summary = "move/rename file"
    category = 'File commands'

    def execute(self, args: List[str]) -> Outcome:
        self.require_args(args, 2)
        src, dst = args[0], args[1]
        status = self.runner.run(['mv', '-v', '--', src, dst])
        return self.report(status, "Moved/Renamed.", "Move failed.",
                           f"my_mv: {src} -> {dst}", f"my_mv: failed {src} -> {dst}")

class RemoveCommand(Command):
    name = 'my_rm'
    arity = '1'
    usage = "Usage: my_rm filename"
    summary = "remove file (asks first)"
    category = 'File commands'

    def execute(self, args: List[str]) -> Outcome:
        self.require_args(args, 1)
        target = args[0]
        self.confirm_or_cancel(f"Really delete '{target}' ?", "Delete cancelled.")
        status = self.runner.run(['rm', '-v', '--', target])
        return self.report(status, "Removed.", "Remove failed.",
                           f"my_rm: removed {target}", f"my_rm: failed to remove {target}")
