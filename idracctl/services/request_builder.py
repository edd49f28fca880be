"""
Request builder - composes device operations into /data requests.

Wire format:
- set power:  set=pwState:<code>
- set boot:   set=vmBootOnce:<true|false>,firstBootDevice:<code>
- query:      get=<attr>,<attr>,...
- login:      /data/login with a urlencoded user/password body
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union
from urllib.parse import urlencode

from ..models import Attribute, BootDevice, PowerState

SET_MARKER = "set"


def requires_post(query_string: str) -> bool:
    """
    Decide whether a request must be sent as POST.

    The device firmware expects POST for every mutating request. A mutating
    request is recognised by the substring "set" anywhere in the query
    string, so a query for an attribute such as "offset" is also sent as POST.
    """
    return SET_MARKER in query_string


@dataclass(frozen=True)
class DeviceRequest:
    """
    One request against the device /data endpoint.

    Attributes:
        path: Path below /data ("" for attribute get/set, "login" for login)
        query_string: Encoded operation
        body: Optional urlencoded form body
    """
    path: str = ""
    query_string: str = ""
    body: Optional[str] = None

    @property
    def method(self) -> str:
        return "POST" if requires_post(self.query_string) else "GET"


class RequestBuilder:
    """Factory of typed device operations"""

    @staticmethod
    def set_power_state(state: PowerState) -> DeviceRequest:
        return DeviceRequest(query_string=f"set=pwState:{int(state)}")

    @staticmethod
    def set_boot_override(device: BootDevice, once: bool) -> DeviceRequest:
        boot_once = "true" if once else "false"
        return DeviceRequest(
            query_string=f"set=vmBootOnce:{boot_once},firstBootDevice:{int(device)}"
        )

    @staticmethod
    def get_attributes(attributes: Iterable[Union[Attribute, str]]) -> DeviceRequest:
        """
        Build an attribute query.

        Tokens are passed through as given; unknown names are rejected by
        the device, not here.
        """
        tokens = ",".join(str(attribute) for attribute in attributes)
        return DeviceRequest(query_string=f"get={tokens}")

    @staticmethod
    def login(username: str, password: str) -> DeviceRequest:
        body = urlencode({"user": username, "password": password})
        return DeviceRequest(path="login", body=body)
