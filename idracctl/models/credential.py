"""
Session credential model.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SessionCredential:
    """
    Persisted login for one device.

    Attributes:
        host: Device host or IP
        username: Account used to log in
        auth_token: Value of the session cookie issued at login
    """
    host: str
    username: str = ""
    auth_token: str = ""

    def __post_init__(self):
        """Validate invariants"""
        if not self.host:
            raise ValueError("Credential host cannot be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SessionCredential':
        """Build from the on-disk JSON record (Host/Username/AuthToken keys)"""
        return cls(
            host=data.get("Host", ""),
            username=data.get("Username", ""),
            auth_token=data.get("AuthToken", "")
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "Host": self.host,
            "Username": self.username,
            "AuthToken": self.auth_token,
        }
