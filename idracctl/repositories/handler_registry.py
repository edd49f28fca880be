"""
Handler Registry - Factory Pattern implementation.
Maps command names to handler classes. The set of commands is closed.
"""

import logging
from typing import Dict, List, Type

from ..exceptions import CommandNotFoundError
from ..handlers import (
    CommandHandler,
    HandlerContext,
    LoginHandler,
    LogoutHandler,
    PowerHandler,
    BootSettingsHandler,
    QueryHandler,
    ConsoleHandler,
    HelpHandler,
)

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """
    Factory for command handler instances.

    Design Pattern: Factory Pattern + Registry Pattern
    """

    # Handler registry, in help order
    _HANDLERS: Dict[str, Type[CommandHandler]] = {
        "login": LoginHandler,
        "logout": LogoutHandler,
        "power": PowerHandler,
        "boot_settings": BootSettingsHandler,
        "query": QueryHandler,
        "console": ConsoleHandler,
        "help": HelpHandler,
    }

    @classmethod
    def create_handler(cls, name: str, context: HandlerContext) -> CommandHandler:
        """
        Create a handler instance.

        Args:
            name: Command name
            context: Shared collaborators

        Returns:
            Initialized handler

        Raises:
            CommandNotFoundError: If no handler is registered under name
        """
        handler_class = cls._HANDLERS.get(name)

        if not handler_class:
            raise CommandNotFoundError(name)

        logger.debug(f"Creating handler for command: {name}")
        return handler_class(context)

    @classmethod
    def get_command_names(cls) -> List[str]:
        """
        Get list of supported commands.

        Returns:
            Command names in help order
        """
        return list(cls._HANDLERS.keys())
