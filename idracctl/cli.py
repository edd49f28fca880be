"""
idracctl - iDRAC command-line client

Usage:
    idracctl login -u root -p calvin -h 10.0.0.5   # Log in and store the session
    idracctl power on                             # Change the power state
    idracctl query pwState,temperatures           # Read attributes
    idracctl query fans -watch 10s                # Re-read every 10s until Ctrl-C
    idracctl boot_settings -once pxe              # PXE boot on next start only
    idracctl console                              # Download viewer.jnlp
    idracctl logout                               # Forget the session
    idracctl help                                 # List commands and attributes

Environment (also read from .env):
    IDRAC_ENV_FILE, IDRAC_VERIFY_TLS, IDRAC_CONNECT_TIMEOUT, IDRAC_READ_TIMEOUT,
    IDRAC_CREDENTIALS_DIR, IDRAC_CONSOLE_FILE, IDRAC_VERBOSE, LOG_LEVEL, LOG_FILE
"""

import logging
import os
import sys
from typing import Optional, Sequence

from .config import load_environment, setup_logging
from .exceptions import CommandNotFoundError, IdracError, ProtocolError
from .services.dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one command.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    env_file = os.getenv("IDRAC_ENV_FILE")
    if env_file:
        load_environment(env_file)

    verbose = os.getenv("IDRAC_VERBOSE", "false").lower() == "true"
    setup_logging(verbose=verbose)

    try:
        CommandDispatcher().run(argv)
    except CommandNotFoundError as e:
        logger.error(f"Unknown command: {e.name!r}")
        print(e)
        return 1
    except ProtocolError as e:
        logger.error(f"Device returned status {e.status_code}")
        print(f"The command exited with an error:\n{e}")
        if e.body:
            print(e.body)
        return 1
    except IdracError as e:
        logger.error(f"Command failed: {e}")
        print(f"The command exited with an error:\n{e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
