"""
Base command handler - Abstract base class using Strategy Pattern.
Defines the interface that all command handlers must implement.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config import ClientConfig
from ..models import Command
from ..repositories.credential_store import CredentialStore
from ..services.poll_loop import PollLoop
from ..services.session_client import SessionClient

logger = logging.getLogger(__name__)


@dataclass
class HandlerContext:
    """
    Collaborators shared by all handlers.

    Attributes:
        config: Client configuration
        store: Credential repository
        output: Sink for user-facing text
        client_factory: Builds a SessionClient for a host
        poll_loop_factory: Builds the watch-mode poll loop
    """
    config: ClientConfig = field(default_factory=ClientConfig)
    store: Optional[CredentialStore] = None
    output: Callable[[str], None] = print
    client_factory: Callable[..., SessionClient] = SessionClient
    poll_loop_factory: Callable[..., PollLoop] = PollLoop

    def __post_init__(self):
        if self.store is None:
            self.store = CredentialStore(self.config.credentials_dir)


class CommandHandler(ABC):
    """
    Abstract base class for command handlers.

    Design Pattern: Strategy Pattern
    Each command implements this interface with its own validation and effect.
    """

    def __init__(self, context: HandlerContext):
        self.context = context

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name as typed on the command line"""
        pass

    @property
    @abstractmethod
    def usage(self) -> str:
        """One-line usage synopsis"""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for the help table"""
        pass

    @abstractmethod
    def handle(self, command: Command) -> None:
        """
        Execute the command.

        Args:
            command: Parsed command

        Raises:
            IdracError: On validation, authentication, transport or protocol failure
        """
        pass

    def connect(self) -> SessionClient:
        """
        Build a client from the stored credential.

        Raises:
            AuthError: If nobody is logged in
        """
        credential = self.context.store.require()
        logger.debug(f"Using stored session for {credential.host}")
        return self.context.client_factory(
            credential.host,
            verify_tls=self.context.config.verify_tls,
            timeout=self.context.config.timeout,
            auth_token=credential.auth_token,
            username=credential.username
        )
