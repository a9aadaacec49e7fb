"""Tests for the save document's serialized form."""

import pytest

from shrekdeck.parser import parse_text
from shrekdeck.tts.builder import build_save
from shrekdeck.tts.save import CardShape, CustomDeckEntry, Transform, new_guid
from tests.conftest import PlainCard


@pytest.fixture
def save_dict(counting_guids) -> dict:
    entries = parse_text("2x Ogre\n1x Donkey\n", PlainCard)
    return build_save(entries, guid_factory=counting_guids).to_dict()


class TestSaveLevelFields:
    def test_top_level_keys(self, save_dict: dict) -> None:
        assert list(save_dict) == [
            "SaveName", "Date", "VersionNumber", "GameMode", "GameType", "GameComplexity",
            "Tags", "Gravity", "PlayArea", "Table", "Sky", "Note", "TabStates",
            "LuaScript", "LuaScriptState", "XmlUI", "ObjectStates",
        ]

    def test_defaults(self, save_dict: dict) -> None:
        assert save_dict["SaveName"] == ""
        assert save_dict["Tags"] == []
        assert save_dict["Gravity"] == 0.5
        assert save_dict["TabStates"] == {}
        assert len(save_dict["ObjectStates"]) == 1


class TestDeckObject:
    def test_deck_fields(self, save_dict: dict) -> None:
        deck = save_dict["ObjectStates"][0]

        assert deck["Name"] == "Deck"
        assert deck["GUID"] == "g3"
        assert deck["DeckIDs"] == [0, 0, 100]
        assert list(deck["CustomDeck"]) == ["0", "1"]
        assert deck["Hands"] is False
        assert deck["XmlUI"] == ""
        assert "GMNotes" in deck
        assert len(deck["ContainedObjects"]) == 3

    def test_custom_deck_entry(self, save_dict: dict) -> None:
        entry = save_dict["ObjectStates"][0]["CustomDeck"]["1"]

        assert entry == {
            "FaceURL": "https://cards.test/Donkey.png",
            "BackURL": "https://cards.test/back.png",
            "NumWidth": 1,
            "NumHeight": 1,
            "BackIsHidden": True,
            "UniqueBack": False,
            "Type": 1,
        }

    def test_transform(self, save_dict: dict) -> None:
        transform = save_dict["ObjectStates"][0]["Transform"]

        assert transform["posY"] == 1.0
        assert transform["rotZ"] == 180.0
        assert transform["scaleX"] == 1.0


class TestCardObjects:
    def test_card_fields(self, save_dict: dict) -> None:
        cards = save_dict["ObjectStates"][0]["ContainedObjects"]

        assert [c["GUID"] for c in cards] == ["g0", "g1", "g2"]
        assert [c["CardID"] for c in cards] == [0, 0, 100]
        assert [c["Nickname"] for c in cards] == ["Ogre", "Ogre", "Donkey"]
        assert all(c["Name"] == "Card" for c in cards)
        assert all(c["Hands"] is True for c in cards)

    def test_card_refers_to_its_own_record(self, save_dict: dict) -> None:
        deck = save_dict["ObjectStates"][0]
        donkey = deck["ContainedObjects"][2]

        assert donkey["CustomDeck"] == {"1": deck["CustomDeck"]["1"]}

    def test_cards_identical_except_guid(self, save_dict: dict) -> None:
        first, second, _ = save_dict["ObjectStates"][0]["ContainedObjects"]

        assert {**first, "GUID": ""} == {**second, "GUID": ""}


class TestModelPieces:
    def test_shape_type_codes(self) -> None:
        assert [int(s) for s in CardShape] == [0, 1, 2, 3, 4]

    def test_entry_type_code(self) -> None:
        entry = CustomDeckEntry(face_url="f", back_url="b", shape=CardShape.CIRCLE)

        assert entry.to_dict()["Type"] == 4

    def test_transform_keys(self) -> None:
        assert list(Transform().to_dict()) == [
            "posX", "posY", "posZ", "rotX", "rotY", "rotZ", "scaleX", "scaleY", "scaleZ",
        ]

    def test_new_guid(self) -> None:
        assert new_guid() != new_guid()
        assert len(new_guid()) == 32
