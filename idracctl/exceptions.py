"""
Error taxonomy for idracctl.

Every failure raised by the core derives from IdracError so the entry point
can report it in one place and set the process exit status.
"""

from typing import Optional


class IdracError(Exception):
    """Base class for all idracctl failures"""


class ParseError(IdracError):
    """Malformed arguments, duration or symbolic token"""


class CommandNotFoundError(ParseError):
    """Command name missing or not present in the handler table"""

    def __init__(self, name: str):
        self.name = name
        if name:
            message = f'The command "{name}" was not found.'
        else:
            message = "No command given. Run 'help' to list the available commands."
        super().__init__(message)


class AuthError(IdracError):
    """Missing credential, missing session cookie or rejected login"""


class TransportError(IdracError):
    """Connection, TLS handshake or timeout failure"""


class ProtocolError(IdracError):
    """
    Device answered with a status outside [200, 300).

    Attributes:
        status_code: HTTP status returned by the device
        body: Translated response body, when one could be read
    """

    def __init__(self, status_code: int, body: Optional[str] = None, message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"got a non 200 status: {status_code}")
