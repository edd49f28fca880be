"""
Parser utilities for turning command-line text into structured values.
"""

from .argument_parser import ArgumentParser
from .duration_parser import DurationParser

__all__ = ['ArgumentParser', 'DurationParser']
