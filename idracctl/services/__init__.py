"""
Service layer - device session, request encoding, polling and dispatch.

CommandDispatcher lives in idracctl.services.dispatcher and is imported from
there; it depends on the handlers package, which depends on this one.
"""

from .request_builder import RequestBuilder, DeviceRequest, requires_post
from .session_client import SessionClient, SESSION_COOKIE
from .poll_loop import PollLoop, PollState

__all__ = [
    'RequestBuilder',
    'DeviceRequest',
    'requires_post',
    'SessionClient',
    'SESSION_COOKIE',
    'PollLoop',
    'PollState',
]
