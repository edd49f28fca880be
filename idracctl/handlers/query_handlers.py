"""
Query, console and help handlers.
"""

import logging
from typing import List

from .base_handler import CommandHandler
from ..exceptions import ParseError
from ..formatters import HelpFormatter
from ..models import Command
from ..parsers import DurationParser

logger = logging.getLogger(__name__)


class QueryHandler(CommandHandler):
    """
    Read attributes, once or repeatedly.

    With -watch the query is repeated on the given interval until Ctrl-C.
    """

    @property
    def name(self) -> str:
        return "query"

    @property
    def usage(self) -> str:
        return "query [-watch 1[s|m|h]] <attribute>,<attribute2>..."

    @property
    def description(self) -> str:
        return "gets info about the server's various sensors and attributes"

    @staticmethod
    def attribute_tokens(command: Command) -> List[str]:
        """Positional tokens, with comma-separated lists split apart"""
        tokens = []
        for positional in command.positional:
            tokens.extend(t for t in positional.split(",") if t)
        return tokens

    def handle(self, command: Command) -> None:
        attributes = self.attribute_tokens(command)
        if not attributes:
            raise ParseError("you should pass query parameters")

        interval = None
        watch = command.flag("watch")
        if watch is not None:
            interval = DurationParser.parse(watch)

        with self.connect() as client:
            self.context.output(client.query(*attributes))

            if interval is None:
                return

            poll_loop = self.context.poll_loop_factory(
                lambda: client.query(*attributes),
                interval,
                self.context.output
            )
            poll_loop.run_until_interrupted()


class ConsoleHandler(CommandHandler):
    """Download the virtual console viewer descriptor"""

    @property
    def name(self) -> str:
        return "console"

    @property
    def usage(self) -> str:
        return "console [-o <file>]"

    @property
    def description(self) -> str:
        return "downloads the virtual console viewer (viewer.jnlp)"

    def handle(self, command: Command) -> None:
        destination = command.flag("o", self.context.config.console_file)

        with self.connect() as client:
            path = client.download_console_viewer(destination)
        self.context.output(f"console viewer saved to {path}")


class HelpHandler(CommandHandler):
    """Print usage of every command and the known query attributes"""

    @property
    def name(self) -> str:
        return "help"

    @property
    def usage(self) -> str:
        return "help"

    @property
    def description(self) -> str:
        return "shows this message"

    def handle(self, command: Command) -> None:
        # Lazy import: the registry imports this module
        from ..repositories.handler_registry import HandlerRegistry

        handlers = [
            HandlerRegistry.create_handler(name, self.context)
            for name in HandlerRegistry.get_command_names()
        ]
        usages = [(handler.usage, handler.description) for handler in handlers]
        self.context.output(HelpFormatter().format(usages))
