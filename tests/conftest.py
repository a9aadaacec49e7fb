import itertools
from dataclasses import dataclass

import pytest

from shrekdeck.cards.base import CardInfo
from shrekdeck.errors import CardError, CardParseError
from shrekdeck.tts.save import CardShape


@dataclass(frozen=True)
class PlainCard(CardInfo):
    """Minimal resolver used across tests."""
    name: str

    def get_name(self) -> str:
        return self.name

    def get_front_image(self) -> str:
        return f"https://cards.test/{self.name}.png"

    def get_back_image(self) -> str:
        return "https://cards.test/back.png"

    def get_card_shape(self) -> CardShape:
        return CardShape.RECTANGLE

    @classmethod
    def parse(cls, identifier: str) -> "PlainCard":
        return cls(identifier)


@dataclass(frozen=True)
class PickyCard(PlainCard):
    """Rejects names containing a digit, pointing at the digit."""

    @classmethod
    def parse(cls, identifier: str) -> "PickyCard":
        for offset, char in enumerate(identifier):
            if char.isdigit():
                raise CardParseError("card names cannot contain digits", offset=offset)
        return cls(identifier)


@dataclass(frozen=True)
class BrokenCard(PlainCard):
    """Fails to resolve a front image for the card named 'Broken'."""

    def get_front_image(self) -> str:
        if self.name == "Broken":
            raise CardError("no artwork for Broken")
        return super().get_front_image()


@pytest.fixture
def counting_guids():
    """Deterministic GUID factory: g0, g1, g2, ..."""
    counter = itertools.count()
    return lambda: f"g{next(counter)}"


@pytest.fixture
def sample_deck_text() -> str:
    """Sample deck list with a blank line and mixed spacing."""
    return "3x Ogre\n1 x Donkey\n\n2xKnight\n"


@pytest.fixture
def deck_file(tmp_path, sample_deck_text):
    path = tmp_path / "deck.txt"
    path.write_text(sample_deck_text, encoding="utf-8")
    return path


@pytest.fixture
def skin_file(tmp_path):
    path = tmp_path / "ogre_wars.yml"
    path.write_text(
        "name: Ogre Wars\n"
        "front_url: \"https://ogres.test/{name}.png\"\n"
        "back_url: \"https://ogres.test/back.png\"\n"
        "shape: hex\n"
        "cards: [Ogre, Donkey, Knight]\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def tts_dir(tmp_path, monkeypatch):
    """An existing Saved Objects directory wired in through the environment."""
    path = tmp_path / "Saved Objects"
    path.mkdir()
    monkeypatch.setenv("SHREKDECK_TTS_DIR", str(path))
    return path
