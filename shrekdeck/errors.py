"""Exception types for shrekdeck."""

from __future__ import annotations

from typing import Iterable, Optional


class ShrekDeckError(Exception):
    """Base class for all shrekdeck errors."""
    pass


def _describe(found: Optional[str]) -> str:
    if found is None:
        return "end of line"
    if found == " ":
        return "space"
    if found == "\t":
        return "tab"
    return repr(found)


class ParseError(ShrekDeckError):
    """A syntax error at a known column of a deck line.

    Attributes are read-only. Use ``at_line`` to attach a line number
    and the source text once the error is placed inside a file.
    """

    def __init__(
        self,
        found: Optional[str],
        expected: Iterable[str],
        column: int,
        line: Optional[int] = None,
        source: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self._found = found
        self._expected = frozenset(expected)
        self._column = column
        self._line = line
        self._source = source
        self._message = message
        super().__init__(self._render())

    @property
    def found(self) -> Optional[str]:
        return self._found

    @property
    def expected(self) -> frozenset[str]:
        return self._expected

    @property
    def column(self) -> int:
        return self._column

    @property
    def line(self) -> Optional[int]:
        return self._line

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def message(self) -> Optional[str]:
        return self._message

    def at_line(self, line: int, source: Optional[str] = None) -> "ParseError":
        """Return a copy of this error placed at ``line``."""
        return ParseError(
            self._found,
            self._expected,
            self._column,
            line=line,
            source=source if source is not None else self._source,
            message=self._message,
        )

    def _render(self) -> str:
        if self._line is None:
            where = f"column {self._column}"
        else:
            where = f"line {self._line}, column {self._column}"

        if self._message:
            text = f"{where}: {self._message}"
        else:
            text = f"{where}: unexpected {_describe(self._found)}"
            if self._expected:
                text += ", expected one of: " + ", ".join(sorted(self._expected))

        if self._source is not None:
            text += f"\n    {self._source}\n    {self._caret_padding()}^"
        return text

    def _caret_padding(self) -> str:
        # Tabs copied from the source line keep the caret aligned
        before = self._source[: self._column - 1]
        padding = "".join(c if c == "\t" else " " for c in before)
        return padding + " " * (self._column - 1 - len(before))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (
            self._found == other._found
            and self._expected == other._expected
            and self._column == other._column
            and self._line == other._line
            and self._message == other._message
        )

    def __hash__(self) -> int:
        return hash((self._found, self._expected, self._column, self._line, self._message))


class CardParseError(ParseError):
    """A resolver rejected a syntactically valid card identifier.

    ``offset`` is the 0-based position inside the identifier. The file
    parser turns it into an absolute column.
    """

    def __init__(self, message: str, offset: int = 0):
        self.offset = offset
        super().__init__(None, (), offset + 1, message=message)


class DeckSyntaxError(ShrekDeckError):
    """One or more lines of a deck file failed to parse."""

    def __init__(self, errors: list[ParseError]):
        self.errors = list(errors)
        super().__init__("\n\n".join(str(e) for e in self.errors))


class CardError(ShrekDeckError):
    """A resolver could not produce card metadata."""
    pass


class DeckBuildError(ShrekDeckError):
    """Building the save document was aborted."""

    def __init__(self, card_name: str, deck_index: int, cause: CardError):
        self.card_name = card_name
        self.deck_index = deck_index
        self.cause = cause
        super().__init__(f"card {card_name!r} (deck index {deck_index}): {cause}")


class SinkError(ShrekDeckError):
    """Writing output failed."""
    pass


class TabletopDirNotFound(SinkError):
    """The Tabletop Simulator saved objects directory could not be found."""

    def __init__(self, message: str = "Tabletop Simulator directory could not be found!"):
        super().__init__(message)


class SkinError(ShrekDeckError):
    """A skin file could not be loaded."""
    pass


class ThumbnailError(ShrekDeckError):
    """A thumbnail image could not be read."""
    pass


class SaveFormatError(ShrekDeckError):
    """A save file is not valid JSON or not a save document."""
    pass
