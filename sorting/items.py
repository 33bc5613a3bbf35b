"""Item kinds and input loading for the sorting tool.

Three kinds of items are supported, one per run:

- ``long``: whitespace-separated 64-bit signed integers; malformed tokens are
  reported and skipped
- ``word``: whitespace-separated tokens, taken verbatim
- ``line``: whole lines, including empty ones, without the line terminator

Each kind is an `ItemKind` value bundling its loader and the way its natural
ordering is printed. Loading returns an immutable `Collection`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, TextIO, Tuple, Union

from sorting.common.exceptions import MalformedItemError

logger = logging.getLogger(__name__)

Item = Union[int, str]

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
_LONG_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Collection:
    """Items in the order they were successfully parsed."""

    items: Tuple[Item, ...] = ()

    @property
    def total(self) -> int:
        return len(self.items)


def parse_long(token: str) -> int:
    """Parse `token` as a 64-bit signed integer.

    Raises:
        MalformedItemError: If the token is not a decimal integer in range
    """
    if not _LONG_RE.fullmatch(token):
        raise MalformedItemError(token, "long")
    value = int(token)
    if not LONG_MIN <= value <= LONG_MAX:
        raise MalformedItemError(token, "long")
    return value


def iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def iter_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\n")


def load_longs(stream: TextIO) -> List[int]:
    numbers: List[int] = []
    for token in iter_tokens(stream):
        try:
            numbers.append(parse_long(token))
        except MalformedItemError as e:
            logger.warning(str(e))
    return numbers


def load_words(stream: TextIO) -> List[str]:
    return list(iter_tokens(stream))


def load_lines(stream: TextIO) -> List[str]:
    return list(iter_lines(stream))


@dataclass(frozen=True)
class ItemKind:
    """Capabilities of one item kind.

    Attributes:
        name: Value of ``-dataType`` selecting this kind
        label: Plural noun used in the ``Total`` line
        reader: Turns an input stream into a list of items
        one_per_line: Print naturally sorted items one per line instead of
            on a single space-separated line
    """

    name: str
    label: str
    reader: Callable[[TextIO], List]
    one_per_line: bool = False

    def load(self, stream: TextIO) -> Collection:
        collection = Collection(tuple(self.reader(stream)))
        logger.debug(f"Loaded {collection.total} {self.label}")
        return collection


LONG = ItemKind(name="long", label="numbers", reader=load_longs)
WORD = ItemKind(name="word", label="words", reader=load_words)
LINE = ItemKind(name="line", label="lines", reader=load_lines, one_per_line=True)

KINDS: Dict[str, ItemKind] = {kind.name: kind for kind in (LONG, WORD, LINE)}


def get_kind(name: str | None) -> ItemKind:
    """Return the item kind for ``-dataType`` `name`; unknown names mean words."""
    if name is None:
        return WORD
    return KINDS.get(name, WORD)
