"""
Credential store - JSON file repository for the session credential.

File format (credentials.json, tab-indented):
{
	"Host": "10.0.0.5",
	"Username": "root",
	"AuthToken": "..."
}
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..exceptions import AuthError
from ..models import SessionCredential

logger = logging.getLogger(__name__)

CREDENTIALS_FILE = "credentials.json"


class CredentialStore:
    """
    Persists one SessionCredential in a fixed file below a directory.

    Design Pattern: Repository Pattern
    """

    def __init__(self, directory: Union[str, Path] = "."):
        self.path = Path(directory) / CREDENTIALS_FILE

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Optional[SessionCredential]:
        """
        Read the stored credential.

        Returns:
            SessionCredential or None when no file exists

        Raises:
            AuthError: If the file exists but cannot be decoded
        """
        if not self.exists():
            return None

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return SessionCredential.from_dict(data)
        except (json.JSONDecodeError, ValueError, AttributeError) as e:
            raise AuthError(f"could not read {self.path}: {e}") from e

    def require(self) -> SessionCredential:
        """
        Read the stored credential, failing when there is none.

        Raises:
            AuthError: If nobody is logged in
        """
        credential = self.load()
        if credential is None:
            raise AuthError("You should log in first")
        return credential

    def save(self, credential: SessionCredential) -> None:
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(credential.to_dict(), f, indent="\t")
            f.write("\n")
        logger.info(f"Saved credentials for {credential.host} to {self.path}")

    def delete(self) -> bool:
        """
        Remove the stored credential.

        Returns:
            True if a file was removed, False if there was none
        """
        if not self.exists():
            logger.debug(f"No credentials at {self.path}")
            return False

        self.path.unlink()
        logger.info(f"Removed {self.path}")
        return True
