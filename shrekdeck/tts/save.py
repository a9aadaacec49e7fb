"""
Tabletop Simulator save document model.

A saved object file is a JSON document with a handful of save-level
fields and an ``ObjectStates`` list. Decks are stored as one ``Deck``
object whose ``ContainedObjects`` are ``Card`` objects:

    SaveState
      ObjectStates[0]: DeckState          (Name "Deck")
        CustomDeck: {"0": CustomDeckEntry, "1": ...}
        DeckIDs:    [0, 0, 0, 100]
        ContainedObjects:
          CardState (CardID 0,   CustomDeck {"0": ...})
          ...

Key names and casing below are the simulator's and must not change.
"""

import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class CardShape(IntEnum):
    """Card outline, stored as the CustomDeck ``Type`` code."""
    ROUNDED_RECTANGLE = 0
    RECTANGLE = 1
    ROUNDED_HEX = 2
    HEX = 3
    CIRCLE = 4


def new_guid() -> str:
    """Generate a fresh object GUID."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Transform:
    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    rot_x: float = 0.0
    rot_y: float = 180.0
    rot_z: float = 180.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0

    def to_dict(self) -> dict[str, float]:
        return {
            "posX": self.pos_x,
            "posY": self.pos_y,
            "posZ": self.pos_z,
            "rotX": self.rot_x,
            "rotY": self.rot_y,
            "rotZ": self.rot_z,
            "scaleX": self.scale_x,
            "scaleY": self.scale_y,
            "scaleZ": self.scale_z,
        }


# Simulator default tint for custom cards
DEFAULT_COLOR = {"r": 0.713235, "g": 0.713235, "b": 0.713235}

CARD_TRANSFORM = Transform()
DECK_TRANSFORM = Transform(pos_y=1.0)


@dataclass(frozen=True)
class CustomDeckEntry:
    """Image metadata for one distinct card (one 1x1 sheet)."""
    face_url: str
    back_url: str
    shape: CardShape = CardShape.ROUNDED_RECTANGLE
    num_width: int = 1
    num_height: int = 1
    back_is_hidden: bool = True
    unique_back: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "FaceURL": self.face_url,
            "BackURL": self.back_url,
            "NumWidth": self.num_width,
            "NumHeight": self.num_height,
            "BackIsHidden": self.back_is_hidden,
            "UniqueBack": self.unique_back,
            "Type": int(self.shape),
        }


def _object_fields(
    guid: str,
    name: str,
    nickname: str,
    transform: Transform,
    hands: bool,
) -> dict[str, Any]:
    """Fields shared by every simulated object, in the simulator's order."""
    return {
        "GUID": guid,
        "Name": name,
        "Transform": transform.to_dict(),
        "Nickname": nickname,
        "Description": "",
        "GMNotes": "",
        "AltLookAngle": {"x": 0.0, "y": 0.0, "z": 0.0},
        "ColorDiffuse": dict(DEFAULT_COLOR),
        "LayoutGroupSortIndex": 0,
        "Value": 0,
        "Locked": False,
        "Grid": True,
        "Snap": True,
        "IgnoreFoW": False,
        "MeasureMovement": False,
        "DragSelectable": True,
        "Autoraise": True,
        "Sticky": True,
        "Tooltip": True,
        "GridProjection": False,
        "HideWhenFaceDown": True,
        "Hands": hands,
    }


def _script_fields() -> dict[str, str]:
    return {"LuaScript": "", "LuaScriptState": "", "XmlUI": ""}


@dataclass(frozen=True)
class CardState:
    """One physical card inside a deck."""
    guid: str
    card_id: int
    deck_index: int
    record: CustomDeckEntry
    nickname: str = ""
    transform: Transform = CARD_TRANSFORM

    def to_dict(self) -> dict[str, Any]:
        data = _object_fields(self.guid, "Card", self.nickname, self.transform, hands=True)
        data["CardID"] = self.card_id
        data["SidewaysCard"] = False
        data["CustomDeck"] = {str(self.deck_index): self.record.to_dict()}
        data.update(_script_fields())
        return data


@dataclass(frozen=True)
class DeckState:
    """The deck container: card children plus all their image metadata."""
    guid: str
    cards: tuple[CardState, ...]
    custom_deck: dict[int, CustomDeckEntry]
    nickname: str = ""
    transform: Transform = DECK_TRANSFORM

    @property
    def deck_ids(self) -> list[int]:
        return [card.card_id for card in self.cards]

    def to_dict(self) -> dict[str, Any]:
        data = _object_fields(self.guid, "Deck", self.nickname, self.transform, hands=False)
        data["SidewaysCard"] = False
        data["DeckIDs"] = self.deck_ids
        data["CustomDeck"] = {
            str(index): entry.to_dict() for index, entry in self.custom_deck.items()
        }
        data.update(_script_fields())
        data["ContainedObjects"] = [card.to_dict() for card in self.cards]
        return data


@dataclass(frozen=True)
class SaveState:
    """A complete saved object file."""
    object_states: tuple[DeckState, ...]
    save_name: str = ""
    date: str = ""
    version_number: str = ""
    game_mode: str = ""
    game_type: str = ""
    game_complexity: str = ""
    tags: tuple[str, ...] = ()
    gravity: float = 0.5
    play_area: float = 0.5
    table: str = ""
    sky: str = ""
    note: str = ""
    tab_states: dict[str, Any] = field(default_factory=dict)
    lua_script: str = ""
    lua_script_state: str = ""
    xml_ui: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "SaveName": self.save_name,
            "Date": self.date,
            "VersionNumber": self.version_number,
            "GameMode": self.game_mode,
            "GameType": self.game_type,
            "GameComplexity": self.game_complexity,
            "Tags": list(self.tags),
            "Gravity": self.gravity,
            "PlayArea": self.play_area,
            "Table": self.table,
            "Sky": self.sky,
            "Note": self.note,
            "TabStates": dict(self.tab_states),
            "LuaScript": self.lua_script,
            "LuaScriptState": self.lua_script_state,
            "XmlUI": self.xml_ui,
            "ObjectStates": [obj.to_dict() for obj in self.object_states],
        }
