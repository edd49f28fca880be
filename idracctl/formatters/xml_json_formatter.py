"""
XML to JSON formatter for device responses.

The /data endpoint answers in XML, e.g.

    <root><pwState>1</pwState><status>ok</status></root>

which is rendered as

    {"root": {"pwState": "1", "status": "ok"}}
"""

import json
import logging
from typing import Optional
from xml.parsers.expat import ExpatError

import xmltodict

from .base_formatter import OutputFormatter

logger = logging.getLogger(__name__)


class XmlJsonFormatter(OutputFormatter):
    """
    Translate an XML response body into JSON text.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, indent: Optional[int] = None):
        """
        Initialize formatter.

        Args:
            indent: JSON indentation, None for compact single-line output
        """
        self.indent = indent

    def format(self, body: str) -> str:
        """
        Format a response body.

        Args:
            body: Raw XML text

        Returns:
            JSON text; empty string for an empty body. Bodies that are not
            XML are returned unchanged.
        """
        if not body or not body.strip():
            return ""

        try:
            document = xmltodict.parse(body)
        except ExpatError as e:
            logger.debug(f"Response body is not XML, passing through: {e}")
            return body

        return json.dumps(document, indent=self.indent)
