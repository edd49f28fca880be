"""
Power and boot override handlers.
"""

import logging

from .base_handler import CommandHandler
from ..exceptions import ParseError
from ..models import (
    Command,
    BOOT_DEVICE_TOKENS,
    POWER_STATE_TOKENS,
    encode_boot_device,
    encode_power_state,
)

logger = logging.getLogger(__name__)


class PowerHandler(CommandHandler):
    """Change the server power state"""

    @property
    def name(self) -> str:
        return "power"

    @property
    def usage(self) -> str:
        return f"power [{'|'.join(POWER_STATE_TOKENS)}]"

    @property
    def description(self) -> str:
        return "manage power state of the server"

    def handle(self, command: Command) -> None:
        tokens = command.positional
        if not tokens:
            raise ParseError(f"specify a power state ({'|'.join(POWER_STATE_TOKENS)})")
        state = encode_power_state(tokens[0])

        with self.connect() as client:
            logger.info(f"Setting power state of {client.host} to {state.name}")
            self.context.output(client.set_power_state(state))


class BootSettingsHandler(CommandHandler):
    """Override the first boot device, optionally for the next boot only"""

    @property
    def name(self) -> str:
        return "boot_settings"

    @property
    def usage(self) -> str:
        return f"boot_settings [-once] [{'|'.join(BOOT_DEVICE_TOKENS)}]"

    @property
    def description(self) -> str:
        return "set the first boot device"

    def handle(self, command: Command) -> None:
        tokens = command.positional
        if not tokens:
            raise ParseError(f"specify a boot device ({'|'.join(BOOT_DEVICE_TOKENS)})")
        device = encode_boot_device(tokens[0])
        once = command.flag("once") == "true"

        with self.connect() as client:
            logger.info(f"Setting first boot device of {client.host} to {device.name} (once={once})")
            self.context.output(client.set_boot_override(device, once))
