"""
Login and logout handlers.
"""

import logging

from .base_handler import CommandHandler
from ..exceptions import AuthError, ParseError
from ..models import Command, SessionCredential

logger = logging.getLogger(__name__)


class LoginHandler(CommandHandler):
    """Authenticate against a device and persist the session cookie"""

    REQUIRED_FLAGS = ("u", "p", "h")

    @property
    def name(self) -> str:
        return "login"

    @property
    def usage(self) -> str:
        return "login -u [username] -p [password] -h [host]"

    @property
    def description(self) -> str:
        return "logs you in"

    def handle(self, command: Command) -> None:
        if not all(command.has_flag(flag) for flag in self.REQUIRED_FLAGS):
            raise ParseError("username (-u), password (-p), and a host (-h) must be defined")

        username = command.flag("u")
        password = command.flag("p")
        host = command.flag("h")

        try:
            existing = self.context.store.load()
        except AuthError as e:
            # Unreadable file counts as logged out; save() overwrites it
            logger.warning(f"Ignoring stored credentials: {e}")
            existing = None

        if existing is not None and existing.host == host:
            raise AuthError("you are already logged in")

        self.context.output(f"logging in to {username}@{host}")
        config = self.context.config
        client = self.context.client_factory(host, verify_tls=config.verify_tls, timeout=config.timeout)
        try:
            auth_token = client.login(username, password)
        finally:
            client.close()

        self.context.store.save(SessionCredential(
            host=host,
            username=username,
            auth_token=auth_token
        ))


class LogoutHandler(CommandHandler):
    """Forget the stored session; succeeds when nobody is logged in"""

    @property
    def name(self) -> str:
        return "logout"

    @property
    def usage(self) -> str:
        return "logout"

    @property
    def description(self) -> str:
        return "logs you out"

    def handle(self, command: Command) -> None:
        if not self.context.store.delete():
            logger.info("Not logged in, nothing to remove")
