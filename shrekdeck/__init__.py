"""shrekdeck - deck list to Tabletop Simulator saved object converter."""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports so submodules can be run with ``python -m``."""
    if name in ("parse_line", "parse_lines", "parse_text", "parse_file", "DeckLine", "DeckEntry"):
        from shrekdeck import parser
        return getattr(parser, name)
    if name in ("build_save", "build_deck"):
        from shrekdeck.tts import builder
        return getattr(builder, name)
    if name in ("render_save", "write_save", "write_to_tabletop"):
        from shrekdeck import export
        return getattr(export, name)
    if name in ("CardInfo", "BloodlessCard", "TemplateCard", "template_card_type"):
        import shrekdeck.cards
        return getattr(shrekdeck.cards, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    # parser.py
    "parse_line",
    "parse_lines",
    "parse_text",
    "parse_file",
    "DeckLine",
    "DeckEntry",
    # tts/builder.py
    "build_save",
    "build_deck",
    # export.py
    "render_save",
    "write_save",
    "write_to_tabletop",
    # cards
    "CardInfo",
    "BloodlessCard",
    "TemplateCard",
    "template_card_type",
]
