"""
idracctl Package

Command-line client for the iDRAC out-of-band management interface.

Architecture:
- Value Objects for commands, credentials and device codes
- Strategy Pattern for command handlers
- Factory/Registry Pattern for the command table
- Facade Pattern for dispatch
"""

from .exceptions import (
    IdracError,
    ParseError,
    CommandNotFoundError,
    AuthError,
    TransportError,
    ProtocolError,
)
from .models import Attribute, PowerState, BootDevice, Command, SessionCredential
from .parsers import ArgumentParser, DurationParser
from .repositories import CredentialStore
from .services import SessionClient, PollLoop, PollState, RequestBuilder

__version__ = "1.0.0"

__all__ = [
    # Errors
    "IdracError",
    "ParseError",
    "CommandNotFoundError",
    "AuthError",
    "TransportError",
    "ProtocolError",
    # Models
    "Attribute",
    "PowerState",
    "BootDevice",
    "Command",
    "SessionCredential",
    # Parsers
    "ArgumentParser",
    "DurationParser",
    # Repositories
    "CredentialStore",
    # Services
    "SessionClient",
    "PollLoop",
    "PollState",
    "RequestBuilder",
]
