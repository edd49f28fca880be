"""
Parsed command model - Value Object pattern.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

# Key under which positional (non-flag) arguments are stored
POSITIONAL_KEY = ""


@dataclass(frozen=True)
class Command:
    """
    One invocation of the CLI, built once from argv.

    Immutable: arguments are copied into a read-only mapping of tuples.

    Attributes:
        name: Command name (first argv element), empty when none was given
        arguments: Flag name -> (value,); POSITIONAL_KEY -> positionals in order
    """
    name: str = ""
    arguments: Mapping[str, Sequence[str]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        frozen: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {key: tuple(values) for key, values in self.arguments.items()}
        )
        object.__setattr__(self, "arguments", frozen)

    @classmethod
    def empty(cls) -> 'Command':
        """The "no command given" value"""
        return cls()

    def is_empty(self) -> bool:
        return self.name == ""

    @property
    def positional(self) -> List[str]:
        """Positional arguments in order of appearance"""
        return list(self.arguments.get(POSITIONAL_KEY, []))

    def has_flag(self, name: str) -> bool:
        return name != POSITIONAL_KEY and name in self.arguments

    def flag(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the value of a flag.

        Args:
            name: Flag name without the leading marker
            default: Returned when the flag was not given

        Returns:
            The flag value ("true" for boolean flags) or default
        """
        if not self.has_flag(name):
            return default
        values = self.arguments[name]
        return values[-1] if values else default
