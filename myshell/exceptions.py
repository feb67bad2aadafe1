class MyShellError(Exception):
    """Base exception for MyShell"""
    pass

class UsageError(MyShellError):
    """Raised when a command is missing arguments or given malformed ones"""
    pass

class ConfirmationDeclined(MyShellError):
    """Raised when the user answers no at a confirmation prompt"""
    pass

class PermissionDenied(MyShellError):
    """Raised when privilege elevation is refused or fails"""
    pass

class ConfigError(MyShellError):
    """Raised when the configuration file cannot be used"""
    pass

# Process resolution related exceptions
class ResolveError(MyShellError):
    """Base exception for process lookup errors"""
    pass

class ProcessNotFound(ResolveError):
    """Raised when no process carries the requested name"""
    pass

class AmbiguousProcess(ResolveError):
    """Raised when several processes carry the requested name"""

    def __init__(self, name, pids):
        self.name = name
        self.pids = list(pids)
        pid_list = ', '.join(str(pid) for pid in self.pids)
        super().__init__(
            f"Multiple processes named '{name}' found (PIDs: {pid_list}). Use a PID instead."
        )

class CommandFailed(MyShellError):
    """Raised when a delegated external command exits with a non-zero status"""

    def __init__(self, argv, returncode):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"'{' '.join(self.argv)}' exited with status {returncode}")
