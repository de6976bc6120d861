"""
Application common module.

Contains base classes for application layer:
- Command: Base class for write operations
- CommandHandler: Handles command execution
"""

from .command import Command, CommandHandler

__all__ = [
    "Command",
    "CommandHandler",
]
