"""
Duration parser for the watch interval.

Examples:
- 30s → 30.0
- 2m → 120.0
- 1h → 3600.0
"""

import re
import threading

from ..exceptions import ParseError


class DurationParser:
    """Parser for <integer><unit> durations, unit one of s, m, h"""

    DURATION_PATTERN = re.compile(r'^(\d+)([smh])$')

    UNIT_SECONDS = {
        "s": 1,
        "m": 60,
        "h": 3600,
    }

    @classmethod
    def parse(cls, text: str) -> float:
        """
        Parse a duration string into seconds.

        Args:
            text: Duration such as "5s", "10m" or "1h"

        Returns:
            Number of seconds

        Raises:
            ParseError: If the text does not match the grammar, is zero or
                exceeds the longest wait a thread timer supports
        """
        match = cls.DURATION_PATTERN.match(text.strip()) if text else None
        if not match:
            raise ParseError(f'invalid duration "{text}" (expected <number>s, <number>m or <number>h)')

        seconds = int(match.group(1)) * cls.UNIT_SECONDS[match.group(2)]
        if seconds <= 0:
            raise ParseError(f'duration must be positive, got "{text}"')
        if seconds > threading.TIMEOUT_MAX:
            raise ParseError(f'duration "{text}" is too long')

        return float(seconds)
