"""
Deck list parser.

Deck files hold one entry per line:

    <quantity> x <card name>

Whitespace around the ``x`` separator is optional, and the name runs to
the end of the line (further ``x`` characters belong to the name):

    3x Ogre
    1 x Donkey
    2xKnight of the Axe

Each line is scanned once, left to right, by a three-state machine
(numbering -> exing -> naming). Errors carry the 1-based column of the
offending character; a full-file parse collects every line error before
raising.
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Generic, Iterable, TypeVar

from shrekdeck.cards.base import CardInfo
from shrekdeck.errors import CardParseError, DeckSyntaxError, ParseError

logger = logging.getLogger(__name__)

SEPARATOR = "x"
WHITESPACE = frozenset(" \t")
DIGITS = frozenset(string.digits)
BOM = "\ufeff"

# Token descriptions used in error messages
EXPECT_NUMBERING = frozenset({"'x'", "digit", "space", "tab"})
EXPECT_EXING = frozenset({"'x'", "space", "tab"})
EXPECT_DIGIT = frozenset({"digit"})
EXPECT_NAME = frozenset({"card name"})

C = TypeVar("C", bound=CardInfo)


class State(Enum):
    NUMBERING = auto()
    EXING = auto()
    NAMING = auto()


@dataclass(frozen=True)
class DeckLine:
    """One parsed line: how many copies of which card."""
    quantity: int
    name: str
    column: int  # 1-based column where the trimmed name starts


@dataclass(frozen=True)
class DeckEntry(Generic[C]):
    """A resolved card with its declared quantity and source line."""
    card: C
    quantity: int
    line: int


def parse_line(text: str) -> DeckLine:
    """Parse a single deck line.

    Raises:
        ParseError: with the column of the first offending character, or
            one past the end of the line if the line stops too early.
    """
    state = State.NUMBERING
    digits: list[str] = []
    name: list[str] = []
    name_start = len(text) + 1

    for column, char in enumerate(text, start=1):
        if state is State.NAMING:
            name.append(char)
            continue

        if char == SEPARATOR:
            if not digits:
                raise ParseError(char, EXPECT_DIGIT, column)
            state = State.NAMING
            name_start = column + 1
        elif char in WHITESPACE:
            state = State.EXING
        elif state is State.NUMBERING and char in DIGITS:
            digits.append(char)
        else:
            expected = EXPECT_NUMBERING if state is State.NUMBERING else EXPECT_EXING
            raise ParseError(char, expected, column)

    end = len(text) + 1
    if state is State.NUMBERING:
        raise ParseError(None, EXPECT_NUMBERING if digits else EXPECT_DIGIT, end)
    if state is State.EXING:
        raise ParseError(None, EXPECT_EXING, end)

    raw_name = "".join(name)
    trimmed = raw_name.strip()
    if not trimmed:
        raise ParseError(None, EXPECT_NAME, end)

    # Only ASCII digits reach the buffer, so int() cannot fail here
    quantity = int("".join(digits))
    leading = len(raw_name) - len(raw_name.lstrip())
    return DeckLine(quantity=quantity, name=trimmed, column=name_start + leading)


def parse_lines(lines: Iterable[str], card_type: type[C]) -> list[DeckEntry[C]]:
    """Parse deck lines and resolve each name with ``card_type.parse``.

    Blank lines are skipped. Every syntax and card error is collected.

    Raises:
        DeckSyntaxError: if any line failed, listing all failures.
    """
    entries: list[DeckEntry[C]] = []
    errors: list[ParseError] = []

    for number, text in enumerate(lines, start=1):
        text = text.rstrip("\r\n")
        if number == 1:
            text = text.lstrip(BOM)
        if not text.strip():
            continue

        try:
            deck_line = parse_line(text)
        except ParseError as e:
            errors.append(e.at_line(number, text))
            continue

        try:
            card = card_type.parse(deck_line.name)
        except CardParseError as e:
            errors.append(
                ParseError(
                    None,
                    (),
                    deck_line.column + e.offset,
                    line=number,
                    source=text,
                    message=e.message,
                )
            )
            continue

        entries.append(DeckEntry(card=card, quantity=deck_line.quantity, line=number))

    if errors:
        logger.debug(f"{len(errors)} line(s) failed to parse")
        raise DeckSyntaxError(errors)

    logger.debug(f"Parsed {len(entries)} deck entries")
    return entries


def parse_text(text: str, card_type: type[C]) -> list[DeckEntry[C]]:
    """Parse a whole deck list held in memory."""
    return parse_lines(text.splitlines(), card_type)


def parse_file(path: Path, card_type: type[C]) -> list[DeckEntry[C]]:
    """Read a UTF-8 deck file and parse it."""
    logger.info(f"Reading deck list {path}")
    text = Path(path).read_text(encoding="utf-8")
    return parse_text(text, card_type)
