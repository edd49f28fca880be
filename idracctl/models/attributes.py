"""
Attribute codec - symbolic names to device wire tokens and back.

The numeric codes are fixed by the device firmware and must match exactly.
Boot device codes are not contiguous.
"""

from enum import Enum, IntEnum
from typing import Dict, Tuple

from ..exceptions import ParseError


class Attribute(str, Enum):
    """Query attributes understood by the device"""
    POWER_STATUS = "pwState"
    SYSTEM_DESCRIPTION = "sysDesc"
    SYSTEM_REVISION = "sysRev"
    HOST_NAME = "hostName"
    OS_NAME = "osName"
    OS_VERSION = "osVersion"
    SERVICE_TAG = "svcTag"
    EXP_SERVICE_CODE = "expSvcCode"
    BIOS_VERSION = "biosVer"
    FIRMWARE_VERSION = "fwVersion"
    LCC_FIRMWARE_VERSION = "LCCfwVersion"
    IPV4_ENABLED = "v4Enabled"
    IPV4_ADDRESS = "v4IPAddr"
    IPV6_ENABLED = "v6Enabled"
    IPV6_LINK_LOCAL = "v6LinkLocal"
    IPV6_ADDRESS = "v6Addr"
    IPV6_SITE_LOCAL = "v6SiteLocal"
    MAC_ADDRESS = "macAddr"
    BATTERIES = "batteries"
    FAN_REDUNDANCY = "fansRedundancy"
    FANS = "fans"
    INTRUSION = "intrusion"
    POWER_SUPPLY_REDUNDANCY = "psRedundancy"
    POWER_SUPPLIES = "powerSupplies"
    RMV_REDUNDANCY = "rmvsRedundancy"
    REMOVABLE_STORAGE = "removableStorage"
    TEMPERATURES = "temperatures"
    VOLTAGES = "voltages"
    KVM_ENABLED = "kvmEnabled"
    POWER_BUDGET_DATA = "budgetpowerdata"
    EVENT_LOG = "eventLogEntries"
    BOOT_ONCE = "vmBootOnce"
    FIRST_BOOT_DEVICE = "firstBootDevice"
    VFK_LICENSE = "vfkLicense"
    USER = "user"
    IDRAC_LOG = "racLogEntries"

    def __str__(self) -> str:
        return self.value


class PowerState(IntEnum):
    OFF = 0
    ON = 1
    COLD_REBOOT = 2
    WARM_REBOOT = 3
    NMI = 4
    GRACEFUL_SHUTDOWN = 5


class BootDevice(IntEnum):
    NO_OVERRIDE = 0
    PXE = 1
    HARD_DRIVE = 2
    LOCAL_CD = 5
    BIOS = 6
    VIRTUAL_CD = 8
    LOCAL_SD = 16


# Order shown by the help command
QUERY_HELP_ATTRIBUTES: Tuple[Attribute, ...] = tuple(Attribute)

POWER_STATE_TOKENS: Dict[str, PowerState] = {
    "on": PowerState.ON,
    "off": PowerState.OFF,
    "cold_reboot": PowerState.COLD_REBOOT,
    "warm_reboot": PowerState.WARM_REBOOT,
    "nmi": PowerState.NMI,
    "graceful_shutdown": PowerState.GRACEFUL_SHUTDOWN,
}

BOOT_DEVICE_TOKENS: Dict[str, BootDevice] = {
    "none": BootDevice.NO_OVERRIDE,
    "pxe": BootDevice.PXE,
    "hdd": BootDevice.HARD_DRIVE,
    "bios": BootDevice.BIOS,
    "virtual_cd": BootDevice.VIRTUAL_CD,
    "local_sd": BootDevice.LOCAL_SD,
    "local_cd": BootDevice.LOCAL_CD,
}


def _choices(tokens: Dict[str, IntEnum]) -> str:
    return "|".join(tokens)


def encode_power_state(token: str) -> PowerState:
    """
    Map a CLI power token to its device code.

    Raises:
        ParseError: If the token is not one of POWER_STATE_TOKENS
    """
    try:
        return POWER_STATE_TOKENS[token]
    except KeyError:
        raise ParseError(f"specify a power state ({_choices(POWER_STATE_TOKENS)})") from None


def decode_power_state(code: int) -> str:
    """Map a device power code back to its CLI token"""
    for token, state in POWER_STATE_TOKENS.items():
        if state == code:
            return token
    raise ParseError(f"unknown power state code: {code}")


def encode_boot_device(token: str) -> BootDevice:
    """
    Map a CLI boot device token to its device code.

    Raises:
        ParseError: If the token is not one of BOOT_DEVICE_TOKENS
    """
    try:
        return BOOT_DEVICE_TOKENS[token]
    except KeyError:
        raise ParseError(f"specify a boot device ({_choices(BOOT_DEVICE_TOKENS)})") from None


def decode_boot_device(code: int) -> str:
    """Map a device boot code back to its CLI token"""
    for token, device in BOOT_DEVICE_TOKENS.items():
        if device == code:
            return token
    raise ParseError(f"unknown boot device code: {code}")
