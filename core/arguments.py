"""
Command-line handling needed at bootstrap.

Only two things are read here: the deep-link URL passed after a literal
'--' and the executable path. The windowing runtime never sees more than
FORWARD_ARGUMENT_COUNT raw arguments.
"""

from dataclasses import dataclass, field
from typing import List

from core.assertion import expects

URL_SEPARATOR = "--"

# For now just pass only the first argument, the executable path.
FORWARD_ARGUMENT_COUNT = 1


def decode_argument(argument):
    """Converts one raw argument to text, replacing undecodable sequences."""
    if isinstance(argument, (bytes, bytearray)):
        return bytes(argument).decode('utf-8', errors='replace')
    try:
        raw = argument.encode('utf-8', errors='surrogateescape')
    except UnicodeEncodeError:
        raw = argument.encode('utf-8', errors='surrogatepass')
    return raw.decode('utf-8', errors='replace')


def read_arguments(argv, sink=None) -> List[str]:
    expects(argv is not None, "argv is not None", sink)
    return [decode_argument(argument) for argument in argv]


def extract_opened_url(arguments) -> str:
    """
    Returns the URL passed after '--'.

    Every token after the first '--' overwrites the previous one, so the
    last argument wins. Without '--' the result is ''.
    """
    opened_url = ""
    next_url = False
    for argument in arguments:
        if next_url:
            opened_url = argument
        elif argument == URL_SEPARATOR:
            next_url = True
    return opened_url


def filter_arguments(argv, limit=FORWARD_ARGUMENT_COUNT) -> list:
    """Returns the first `limit` raw arguments, unmodified."""
    return list(argv[:max(limit, 0)])


@dataclass(frozen=True)
class ParsedCommandLine:
    arguments: List[str] = field(default_factory=list)
    opened_url: str = ""
    filtered: list = field(default_factory=list)


def parse(argv, sink=None) -> ParsedCommandLine:
    arguments = read_arguments(argv, sink)
    return ParsedCommandLine(
        arguments=arguments,
        opened_url=extract_opened_url(arguments),
        filtered=filter_arguments(argv),
    )
