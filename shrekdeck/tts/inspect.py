"""Summarize deck objects in an existing save file and flag broken card ids."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from shrekdeck.errors import SaveFormatError
from shrekdeck.tts.builder import CARD_ID_RADIX

DECK_OBJECT_NAMES = ("Deck", "DeckCustom")


@dataclass
class DeckSummary:
    nickname: str
    custom_deck: dict[str, dict[str, Any]]
    deck_id_count: int
    deck_id_range: Optional[tuple[int, int]]
    contained_count: int
    warnings: list[str] = field(default_factory=list)


def load_save(path: Path) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SaveFormatError(f"Could not read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SaveFormatError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("ObjectStates"), list):
        raise SaveFormatError(f"{path} has no ObjectStates list")
    return data


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        json_type = "object" if kind is dict else "array"
        raise SaveFormatError(f"{what} should be a JSON {json_type}, got {type(value).__name__}")
    return value


def _check_custom_deck(custom_deck: dict[str, Any]) -> tuple[dict[str, dict[str, Any]], list[str]]:
    """Split CustomDeck into usable entries and warnings for the rest."""
    entries = {}
    warnings = []
    for key, info in custom_deck.items():
        if not isinstance(info, dict):
            warnings.append(f"CustomDeck entry {key} is not an object")
            continue
        entries[key] = info
    return entries, warnings


def _check_card_ids(deck_ids: list[int], custom_deck: dict[str, dict[str, Any]]) -> list[str]:
    warnings = []
    for card_id in deck_ids:
        key = str(card_id // CARD_ID_RADIX)
        slot = card_id % CARD_ID_RADIX
        info = custom_deck.get(key)
        if info is None:
            warnings.append(f"CardID {card_id} refers to missing CustomDeck entry {key}")
            continue
        width = info.get("NumWidth", 1)
        height = info.get("NumHeight", 1)
        if not (_is_int(width) and _is_int(height)):
            warnings.append(
                f"CustomDeck entry {key} has an invalid sheet size ({width!r} x {height!r})"
            )
            continue
        max_index = width * height - 1
        if slot > max_index:
            warnings.append(
                f"CardID {card_id} (index {slot}) exceeds sprite sheet size ({max_index})"
            )
    return warnings


def summarize_save(data: dict[str, Any]) -> list[DeckSummary]:
    """One summary per deck object in the save.

    Raises:
        SaveFormatError: if an object or one of its deck fields has the
            wrong JSON type. Bad values inside those fields are warnings.
    """
    summaries = []
    for position, obj in enumerate(data.get("ObjectStates", [])):
        where = f"ObjectStates[{position}]"
        _require(obj, dict, where)
        if obj.get("Name") not in DECK_OBJECT_NAMES:
            continue

        custom_deck = _require(obj.get("CustomDeck", {}), dict, f"{where}.CustomDeck")
        raw_ids = _require(obj.get("DeckIDs", []), list, f"{where}.DeckIDs")
        contained = _require(obj.get("ContainedObjects", []), list, f"{where}.ContainedObjects")

        custom_deck, warnings = _check_custom_deck(custom_deck)
        deck_ids = [card_id for card_id in raw_ids if _is_int(card_id)]
        for index, card_id in enumerate(raw_ids):
            if not _is_int(card_id):
                warnings.append(f"DeckIDs[{index}] is not an integer: {card_id!r}")

        warnings.extend(_check_card_ids(deck_ids, custom_deck))
        if len(raw_ids) != len(contained):
            warnings.append(
                f"DeckIDs has {len(raw_ids)} entries but ContainedObjects has {len(contained)}"
            )

        summaries.append(
            DeckSummary(
                nickname=obj.get("Nickname") or obj.get("Name", "Unknown"),
                custom_deck=custom_deck,
                deck_id_count=len(raw_ids),
                deck_id_range=(min(deck_ids), max(deck_ids)) if deck_ids else None,
                contained_count=len(contained),
                warnings=warnings,
            )
        )
    return summaries


def format_summary(summaries: list[DeckSummary]) -> str:
    if not summaries:
        return "No deck objects found"

    lines = []
    for summary in summaries:
        lines.append(f"Deck: {summary.nickname}")
        for deck_id, info in summary.custom_deck.items():
            lines.append(f"  Deck ID: {deck_id}")
            lines.append(f"    FaceURL: {info.get('FaceURL', 'MISSING')}")
            lines.append(f"    BackURL: {info.get('BackURL', 'MISSING')}")
            lines.append(f"    Grid: {info.get('NumWidth')}x{info.get('NumHeight')}")
        lines.append(f"  DeckIDs count: {summary.deck_id_count}")
        if summary.deck_id_range:
            low, high = summary.deck_id_range
            lines.append(f"  DeckIDs range: {low} - {high}")
        lines.append(f"  ContainedObjects count: {summary.contained_count}")
        for warning in summary.warnings:
            lines.append(f"  WARNING: {warning}")
    return "\n".join(lines)
