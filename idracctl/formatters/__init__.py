"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .help_formatter import HelpFormatter
from .xml_json_formatter import XmlJsonFormatter

__all__ = ['OutputFormatter', 'HelpFormatter', 'XmlJsonFormatter']
