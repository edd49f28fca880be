"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from typing import Any


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different outputs (device responses, help text).
    """

    @abstractmethod
    def format(self, data: Any) -> str:
        """
        Format data for output.

        Args:
            data: Data to format

        Returns:
            Formatted string for output
        """
        pass
