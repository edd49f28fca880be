"""
Argument parser for turning a raw argv into a Command.

Grammar:
- first element is the command name
- "-name value" is a flag with a value
- "-name" as the last element is a boolean flag ("true")
- "-once" is always boolean and never consumes the following element
- everything else is positional

Examples:
- login -u root -p calvin -h 10.0.0.5 → login {u: [root], p: [calvin], h: [10.0.0.5]}
- boot_settings -once local_cd → boot_settings {once: [true], "": [local_cd]}
"""

from typing import Dict, List, Sequence

from ..models import Command, POSITIONAL_KEY

FLAG_MARKER = "-"
BOOLEAN_TRUE = "true"


class ArgumentParser:
    """
    Tokenizer for the CLI argument vector.

    Never raises: malformed input yields a best-effort Command and the
    handlers validate what they need.
    """

    # Flags that never take a value
    BOOLEAN_FLAGS = frozenset({"once"})

    @classmethod
    def is_flag(cls, token: str) -> bool:
        """
        Check if a token introduces a flag.

        A bare marker ("-") has no name and is treated as a positional token.
        """
        return len(token) > len(FLAG_MARKER) and token.startswith(FLAG_MARKER)

    @classmethod
    def parse(cls, args: Sequence[str]) -> Command:
        """
        Parse an argument vector.

        Args:
            args: argv without the program name

        Returns:
            Command; Command.empty() when args is empty

        Examples:
            >>> ArgumentParser.parse(["query", "pwState", "fans"]).positional
            ['pwState', 'fans']
            >>> ArgumentParser.parse(["power", "-x"]).flag("x")
            'true'
        """
        if not args:
            return Command.empty()

        name = args[0]
        arguments: Dict[str, List[str]] = {}

        i = 1
        while i < len(args):
            token = args[i]

            if cls.is_flag(token):
                flag_name = token[len(FLAG_MARKER):]
                value = BOOLEAN_TRUE
                if flag_name not in cls.BOOLEAN_FLAGS and i + 1 < len(args):
                    value = args[i + 1]
                    i += 1
                # Last occurrence wins
                arguments[flag_name] = [value]
            else:
                arguments.setdefault(POSITIONAL_KEY, []).append(token)

            i += 1

        return Command(name=name, arguments=arguments)
