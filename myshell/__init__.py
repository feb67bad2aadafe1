"""
MyShell - interactive menu shell for everyday Linux administration

Wraps file operations, package-manager actions, power-state transitions and
process suspend/resume behind a small command table with confirmation
prompts, sudo gating and an append-only action log.
"""

__version__ = "4.0.0"

__all__ = ['__version__']
