"""
Command handlers - Strategy Pattern.
Each CLI command has its own handler with its own validation.
"""

from .base_handler import CommandHandler, HandlerContext
from .auth_handlers import LoginHandler, LogoutHandler
from .power_handlers import PowerHandler, BootSettingsHandler
from .query_handlers import QueryHandler, ConsoleHandler, HelpHandler

__all__ = [
    'CommandHandler',
    'HandlerContext',
    'LoginHandler',
    'LogoutHandler',
    'PowerHandler',
    'BootSettingsHandler',
    'QueryHandler',
    'ConsoleHandler',
    'HelpHandler',
]
