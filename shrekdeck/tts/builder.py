"""
Build a save document from parsed deck entries.

Every distinct card (by name, in first-seen order) gets a deck index
starting at 0 and one CustomDeck entry. Each physical copy becomes a
CardState with its own GUID and ``CardID = deck_index * 100``. The
lower two digits are the slot on the card's image sheet; every sheet
here is 1x1, so the slot is always 0.
"""

import logging
from typing import Callable, Iterable, Protocol

from shrekdeck.cards.base import CardInfo
from shrekdeck.errors import CardError, DeckBuildError
from shrekdeck.tts.save import CardState, CustomDeckEntry, DeckState, SaveState, new_guid

logger = logging.getLogger(__name__)

CARD_ID_RADIX = 100


class Entry(Protocol):
    card: CardInfo
    quantity: int


def card_id_for(deck_index: int, slot: int = 0) -> int:
    return deck_index * CARD_ID_RADIX + slot


def build_metadata(card: CardInfo) -> CustomDeckEntry:
    """Resolve a card's images and shape into a CustomDeck entry."""
    return CustomDeckEntry(
        face_url=card.get_front_image(),
        back_url=card.get_back_image(),
        shape=card.get_card_shape(),
    )


def build_deck(
    entries: Iterable[Entry],
    guid_factory: Callable[[], str] = new_guid,
    nickname: str = "",
) -> DeckState:
    """Assemble the deck container.

    Raises:
        DeckBuildError: if any resolver call fails. Nothing is returned
            in that case.
    """
    indices: dict[str, int] = {}
    custom_deck: dict[int, CustomDeckEntry] = {}
    cards: list[CardState] = []

    for entry in entries:
        name = entry.card.get_name()
        deck_index = indices.get(name)

        if deck_index is None:
            deck_index = len(indices)
            try:
                record = build_metadata(entry.card)
            except CardError as e:
                raise DeckBuildError(name, deck_index, e) from e
            indices[name] = deck_index
            custom_deck[deck_index] = record
            logger.debug(f"Deck index {deck_index}: {name} -> {record.face_url}")

        record = custom_deck[deck_index]
        card_id = card_id_for(deck_index)
        for _ in range(entry.quantity):
            cards.append(
                CardState(
                    guid=guid_factory(),
                    card_id=card_id,
                    deck_index=deck_index,
                    record=record,
                    nickname=name,
                )
            )

    logger.info(f"Built deck: {len(custom_deck)} distinct cards, {len(cards)} copies")
    return DeckState(
        guid=guid_factory(),
        cards=tuple(cards),
        custom_deck=custom_deck,
        nickname=nickname,
    )


def build_save(
    entries: Iterable[Entry],
    guid_factory: Callable[[], str] = new_guid,
    nickname: str = "",
) -> SaveState:
    """Build a save document holding a single deck."""
    deck = build_deck(entries, guid_factory=guid_factory, nickname=nickname)
    return SaveState(object_states=(deck,))
