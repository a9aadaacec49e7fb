"""Tabletop Simulator save documents.

Exports are lazily loaded; ``shrekdeck.cards`` imports ``tts.save`` and
``tts.builder`` imports ``shrekdeck.cards``.
"""

__all__ = [
    # save.py
    "CardShape",
    "CardState",
    "CustomDeckEntry",
    "DeckState",
    "SaveState",
    "Transform",
    "new_guid",
    # builder.py
    "build_deck",
    "build_save",
    "card_id_for",
    # paths.py
    "get_tts_dir",
]


def __getattr__(name: str):
    """Lazy import for module exports."""
    if name in ("CardShape", "CardState", "CustomDeckEntry", "DeckState", "SaveState",
                "Transform", "new_guid"):
        from shrekdeck.tts import save
        return getattr(save, name)
    elif name in ("build_deck", "build_save", "card_id_for"):
        from shrekdeck.tts import builder
        return getattr(builder, name)
    elif name == "get_tts_dir":
        from shrekdeck.tts import paths
        return getattr(paths, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
