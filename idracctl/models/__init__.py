"""
Data models and value objects.
"""

from .attributes import (
    Attribute,
    PowerState,
    BootDevice,
    QUERY_HELP_ATTRIBUTES,
    POWER_STATE_TOKENS,
    BOOT_DEVICE_TOKENS,
    encode_power_state,
    decode_power_state,
    encode_boot_device,
    decode_boot_device,
)
from .command import Command, POSITIONAL_KEY
from .credential import SessionCredential

__all__ = [
    'Attribute',
    'PowerState',
    'BootDevice',
    'QUERY_HELP_ATTRIBUTES',
    'POWER_STATE_TOKENS',
    'BOOT_DEVICE_TOKENS',
    'encode_power_state',
    'decode_power_state',
    'encode_boot_device',
    'decode_boot_device',
    'Command',
    'POSITIONAL_KEY',
    'SessionCredential',
]
