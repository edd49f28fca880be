"""
Help formatter - usage table plus the list of query attributes.

Output format:
login -u [username] -p [password] -h [host]: logs you in
...
Possible attributes:
pwState sysDesc sysRev ...   (ten per line)
"""

from typing import Iterable, Sequence, Tuple

from .base_formatter import OutputFormatter
from ..models import Attribute, QUERY_HELP_ATTRIBUTES


class HelpFormatter(OutputFormatter):
    """Render command usage lines followed by the attribute list"""

    ATTRIBUTES_PER_LINE = 10

    def __init__(self, attributes: Sequence[Attribute] = QUERY_HELP_ATTRIBUTES):
        self.attributes = attributes

    def format(self, usages: Iterable[Tuple[str, str]]) -> str:
        """
        Format the help text.

        Args:
            usages: (usage, description) pairs, one per command

        Returns:
            Multi-line help text
        """
        lines = [f"{usage}: {description}" for usage, description in usages]

        lines.append("Possible attributes:")
        for start in range(0, len(self.attributes), self.ATTRIBUTES_PER_LINE):
            chunk = self.attributes[start:start + self.ATTRIBUTES_PER_LINE]
            lines.append(" ".join(str(attribute) for attribute in chunk))

        return "\n".join(lines)
