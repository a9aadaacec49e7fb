"""Bloodless card skin, hosted on file.garden."""

from dataclasses import dataclass

from shrekdeck.cards.base import CardInfo, url_name
from shrekdeck.tts.save import CardShape

FILE_GARDEN_BASE = "https://file.garden/ZJSEzoaUL3bz8vYK/bloodlesscards"
BACK_URL = f"{FILE_GARDEN_BASE}/00%20back.png"


def get_filegarden_link(name: str) -> str:
    return f"{FILE_GARDEN_BASE}/{url_name(name)}.png"


@dataclass(frozen=True)
class BloodlessCard(CardInfo):
    name: str

    def get_name(self) -> str:
        return self.name

    def get_front_image(self) -> str:
        return get_filegarden_link(self.name)

    def get_back_image(self) -> str:
        return BACK_URL

    def get_card_shape(self) -> CardShape:
        return CardShape.ROUNDED_RECTANGLE

    @classmethod
    def parse(cls, identifier: str) -> "BloodlessCard":
        return cls(name=identifier)
