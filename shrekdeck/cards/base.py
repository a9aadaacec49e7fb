"""Card resolver interface.

A deck build targets exactly one card class. The class turns the name
captured from a deck line into the display name, image URLs and shape
the save document needs.
"""

import unicodedata
from abc import ABC, abstractmethod

from shrekdeck.tts.save import CardShape


class CardInfo(ABC):
    """Capability set every card skin implements.

    ``parse`` may raise ``CardParseError`` to reject an identifier. The
    ``get_*`` methods may raise ``CardError``; a failure aborts the build.
    Instances with the same ``get_name()`` are treated as the same card.
    """

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def get_front_image(self) -> str:
        ...

    @abstractmethod
    def get_back_image(self) -> str:
        ...

    @abstractmethod
    def get_card_shape(self) -> CardShape:
        ...

    @classmethod
    @abstractmethod
    def parse(cls, identifier: str) -> "CardInfo":
        ...


def fold_accents(text: str) -> str:
    """Replace accented letters with their ASCII base letter (ä -> a)."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def url_name(name: str, strip_spaces: bool = True, fold: bool = True) -> str:
    """Turn a card name into the form used inside image URLs."""
    if strip_spaces:
        name = name.replace(" ", "")
    if fold:
        name = fold_accents(name)
    return name
