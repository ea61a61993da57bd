"""
Execution module for go2rpm.
Handles external process execution and output capture.
"""

from .runner import CommandRunner, CommandResult

__all__ = [
    "CommandRunner",
    "CommandResult",
]
