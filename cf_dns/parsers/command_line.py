import logging
from typing import List

from ..core.exceptions import MalformedQuotingError

logger = logging.getLogger(__name__)

QUOTE = '"'
WHITESPACE = " \t"


class CommandLineParser:
    """Split a typed command line into tokens.

    Double-quoted sections keep their whitespace and become part of a single
    token; the quotes themselves are dropped. Runs of whitespace outside
    quotes separate tokens.
    """

    def __init__(self, line: str):
        self.line = line

    def parse(self) -> List[str]:
        """Tokenize the line."""
        tokens = []
        current = []
        in_token = False
        in_quote = False

        for char in self.line:
            if char == QUOTE:
                in_quote = not in_quote
                in_token = True
            elif char in WHITESPACE and not in_quote:
                if in_token:
                    tokens.append("".join(current))
                    current = []
                    in_token = False
            else:
                current.append(char)
                in_token = True

        if in_quote:
            raise MalformedQuotingError("Unterminated quote in command line")

        if in_token:
            tokens.append("".join(current))

        logger.debug(f"Parsed command line into {len(tokens)} tokens: {tokens}")
        return tokens


def join_args(args: List[str]) -> str:
    """Rejoin process arguments into one command line.

    Arguments containing a space or tab are wrapped in double quotes so that
    they survive tokenization as a single token.
    """
    joined = []
    for arg in args:
        if any(char in arg for char in WHITESPACE):
            arg = QUOTE + arg + QUOTE
        joined.append(arg)
    return " ".join(joined)
