"""
Command Dispatcher - resolves a parsed Command to its handler and runs it.
"""

import logging
from typing import Optional, Sequence

from ..exceptions import CommandNotFoundError
from ..handlers import HandlerContext
from ..models import Command
from ..parsers import ArgumentParser
from ..repositories.handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """
    Single entry into command execution.

    Design Pattern: Facade Pattern
    Hides the parser, registry and handlers behind dispatch()/run().
    Errors are not reported here; they propagate to the caller.
    """

    def __init__(self, context: Optional[HandlerContext] = None):
        """
        Initialize dispatcher.

        Args:
            context: Shared handler collaborators (defaults from environment)
        """
        self.context = context or HandlerContext()

    def dispatch(self, command: Command) -> None:
        """
        Run the handler for a command.

        Raises:
            CommandNotFoundError: Empty or unknown command name
            IdracError: Whatever the handler raises
        """
        if command.is_empty():
            raise CommandNotFoundError("")

        handler = HandlerRegistry.create_handler(command.name, self.context)
        logger.info(f"Dispatching command: {command.name}")
        handler.handle(command)

    def run(self, args: Sequence[str]) -> None:
        """Parse an argument vector and dispatch it"""
        self.dispatch(ArgumentParser.parse(args))
