"""
Session client for the iDRAC /data endpoint.

Owns one requests.Session to one device host. Authentication is a login
request that hands back the _appwebSessionId_ cookie; that cookie is then
presented on every following request.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Tuple, Union

import requests
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

from ..exceptions import AuthError, ProtocolError, TransportError
from ..formatters import XmlJsonFormatter
from ..models import Attribute, BootDevice, PowerState
from .request_builder import DeviceRequest, RequestBuilder

logger = logging.getLogger(__name__)

SESSION_COOKIE = "_appwebSessionId_"
DEFAULT_TIMEOUT = (5.0, 5.0)


class SessionClient:
    """
    Authenticated connection to one device.

    Responsibilities:
    - Build /data URLs and pick the HTTP method
    - Attach the session cookie to every request
    - Translate XML bodies and classify status codes
    """

    def __init__(self,
                 host: str,
                 verify_tls: bool = False,
                 timeout: Tuple[float, float] = DEFAULT_TIMEOUT,
                 auth_token: Optional[str] = None,
                 username: Optional[str] = None,
                 formatter: Optional[XmlJsonFormatter] = None):
        """
        Initialize client. No request is made here.

        Args:
            host: Device host or IP
            verify_tls: Validate the device certificate
            timeout: (connect, read) timeout in seconds
            auth_token: Session cookie from an earlier login
            username: Account the token belongs to
            formatter: Response body translator
        """
        self.host = host
        self.username = username or ""
        self.auth_token = auth_token or ""
        self.timeout = timeout
        self.base_url = f"https://{host}"
        self._formatter = formatter or XmlJsonFormatter()

        self._session = requests.Session()
        self._session.verify = verify_tls
        if not verify_tls:
            disable_warnings(InsecureRequestWarning)

    def _send(self, request: DeviceRequest) -> Tuple[str, requests.Response]:
        """
        Issue one request against /data.

        Returns:
            (translated body, raw response)

        Raises:
            TransportError: Connection, TLS or timeout failure
            ProtocolError: Status outside [200, 300); carries the translated body
        """
        method = request.method
        url = f"{self.base_url}/data/{request.path}?{request.query_string}"
        headers = {}
        if request.body is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        logger.debug(f"{method} {url}")
        try:
            response = self._session.request(
                method,
                url,
                data=request.body,
                headers=headers,
                cookies={SESSION_COOKIE: self.auth_token},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"could not make request to {self.host}: {e}") from e

        body = self._formatter.format(response.text)
        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.status_code < 200 or response.status_code >= 300:
            raise ProtocolError(response.status_code, body)

        return body, response

    def login(self, username: str, password: str) -> str:
        """
        Log in and keep the issued session cookie.

        Args:
            username: Device account
            password: Account password

        Returns:
            The session token

        Raises:
            AuthError: Device did not issue a session cookie
        """
        logger.info(f"Logging in to {self.host} as {username}")
        _, response = self._send(RequestBuilder.login(username, password))

        token = response.cookies.get(SESSION_COOKIE)
        if not token:
            raise AuthError("could not find auth token in cookie")

        self.auth_token = token
        self.username = username
        logger.info(f"Successfully logged in to {self.host}")
        return token

    def set_power_state(self, state: PowerState) -> str:
        body, _ = self._send(RequestBuilder.set_power_state(state))
        return body

    def set_boot_override(self, device: BootDevice, once: bool) -> str:
        body, _ = self._send(RequestBuilder.set_boot_override(device, once))
        return body

    def query(self, *attributes: Union[Attribute, str]) -> str:
        """
        Read attributes from the device.

        Args:
            attributes: Attribute members or raw wire tokens

        Returns:
            Translated response body
        """
        body, _ = self._send(RequestBuilder.get_attributes(attributes))
        return body

    def download_console_viewer(self, destination: Union[str, Path]) -> Path:
        """
        Download the virtual console viewer descriptor (viewer.jnlp).

        The file is only saved; launching it is left to the user.

        Args:
            destination: File path to write

        Returns:
            Path of the written file
        """
        timestamp = int(time.time())
        url = f"{self.base_url}/viewer.jnlp({self.host}@0@{self.username}@{timestamp})"

        logger.debug(f"GET {url}")
        try:
            response = self._session.get(
                url,
                cookies={SESSION_COOKIE: self.auth_token},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"could not make request to {self.host}: {e}") from e

        if response.status_code != 200:
            raise ProtocolError(response.status_code, message=f"bad status: {response.status_code}")

        path = Path(destination)
        path.write_bytes(response.content)
        logger.info(f"Console viewer saved to {path}")
        return path

    def close(self) -> None:
        """Release the underlying HTTP connections"""
        self._session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensure cleanup"""
        self.close()
