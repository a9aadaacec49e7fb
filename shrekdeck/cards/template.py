"""
Card skins described by data instead of code.

A skin file lets another game reuse the tool without writing a card
class:

    name: Ogre Wars
    front_url: "https://example.org/cards/{name}.png"
    back_url: "https://example.org/cards/back.png"
    shape: rectangle
    cards: [Ogre, Donkey]

``{name}`` is replaced by the card name with spaces removed and accents
folded (both can be turned off). When ``cards`` is given, any other
name is rejected while parsing.
"""

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from shrekdeck.cards.base import CardInfo, url_name
from shrekdeck.errors import CardError, CardParseError, SkinError
from shrekdeck.tts.save import CardShape

REQUIRED_KEYS = ("name", "front_url", "back_url")


def _parse_shape(value: Any) -> CardShape:
    if isinstance(value, CardShape):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return CardShape(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if key in CardShape.__members__:
            return CardShape[key]
    choices = ", ".join(s.name.lower() for s in CardShape)
    raise SkinError(f"Unknown card shape {value!r} (choose from: {choices})")


@dataclass(frozen=True)
class Skin:
    name: str
    front_url: str
    back_url: str
    shape: CardShape = CardShape.ROUNDED_RECTANGLE
    strip_spaces: bool = True
    fold_accents: bool = True
    cards: Optional[frozenset[str]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Skin":
        missing = [key for key in REQUIRED_KEYS if not data.get(key)]
        if missing:
            raise SkinError(f"Skin is missing required keys: {', '.join(missing)}")

        cards = data.get("cards")
        if cards is not None:
            if not isinstance(cards, list):
                raise SkinError("Skin 'cards' must be a list of card names")
            cards = frozenset(str(c).strip() for c in cards)

        return cls(
            name=str(data["name"]),
            front_url=str(data["front_url"]),
            back_url=str(data["back_url"]),
            shape=_parse_shape(data.get("shape", CardShape.ROUNDED_RECTANGLE)),
            strip_spaces=bool(data.get("strip_spaces", True)),
            fold_accents=bool(data.get("fold_accents", True)),
            cards=cards,
        )


@dataclass(frozen=True)
class TemplateCard(CardInfo):
    """Card resolved through a Skin. Use ``template_card_type`` to bind one."""
    name: str
    skin: ClassVar[Optional[Skin]] = None

    def _skin(self) -> Skin:
        if self.skin is None:
            raise CardError(f"{type(self).__name__} has no skin bound")
        return self.skin

    def _format(self, template: str) -> str:
        skin = self._skin()
        try:
            return template.format(
                name=url_name(self.name, skin.strip_spaces, skin.fold_accents)
            )
        except (KeyError, IndexError, ValueError) as e:
            raise CardError(f"Bad URL template {template!r} in skin {skin.name!r}: {e}") from e

    def get_name(self) -> str:
        return self.name

    def get_front_image(self) -> str:
        return self._format(self._skin().front_url)

    def get_back_image(self) -> str:
        return self._format(self._skin().back_url)

    def get_card_shape(self) -> CardShape:
        return self._skin().shape

    @classmethod
    def parse(cls, identifier: str) -> "TemplateCard":
        skin = cls.skin
        if skin is not None and skin.cards is not None and identifier not in skin.cards:
            raise CardParseError(f"unknown card {identifier!r} for skin {skin.name!r}")
        return cls(name=identifier)


def template_card_type(skin: Skin) -> type[TemplateCard]:
    """Create a TemplateCard subclass bound to ``skin``."""
    words = re.findall(r"[A-Za-z0-9]+", skin.name)
    class_name = "".join(w.capitalize() for w in words) or "Template"
    return type(f"{class_name}Card", (TemplateCard,), {"skin": skin})
